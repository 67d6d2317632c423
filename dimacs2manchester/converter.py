#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## converter.py
##
"""
    Rewrites DIMACS CNF clause lines into a Boolean expression over `AND`, `OR` and `NOT`
    (sometimes called Manchester syntax).

    Every clause line is handled on its own, through a fixed sequence of textual rewrites:

    1. strip the surrounding ASCII whitespace
    2. tag every run of digits with a leading underscore, ``12`` becomes ``_12``
    3. replace every run of whitespace by ``" OR "``
    4. replace every ``-`` by ``"NOT "``

    The result is wrapped in parentheses. Comment (``c``) and problem (``p``) lines are dropped.
    The clause terminator ``0`` is not removed and shows up as an ``_0`` term:

    .. code-block:: text

        1 -2 0    ->    (_1 OR NOT _2 OR _0)

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        is_header
        convert_line
        convert_lines
        to_manchester
"""

import re
from typing import Iterable, Iterator

CLAUSE_SEPARATOR = " AND \n"

# DIMACS files are plain ASCII, keep \d and \s to their ASCII meaning
_HEADER = re.compile(r"\s*[pc]", re.ASCII)
_DIGITS = re.compile(r"\d+", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)
_ASCII_WHITESPACE = " \t\n\r\f\v"

# order matters: later rewrites work on the text produced by earlier ones
_REWRITES = (
    lambda line: _DIGITS.sub(r"_\g<0>", line),
    lambda line: _WHITESPACE.sub(" OR ", line),
    lambda line: line.replace("-", "NOT "),
)


def is_header(line: str) -> bool:
    """
        True if `line` is a comment or problem line,
        i.e. its first character after leading whitespace is a `p` or a `c`.
    """
    return _HEADER.match(line) is not None


def convert_line(line: str) -> str:
    """
        Converts a single clause line into a parenthesized disjunction.

        No validation is done, tokens that are not integers are copied through
        the rewrites as they are.

        :param line: a DIMACS clause line, e.g. ``"-1 2 0"``
        :return: the clause expression, e.g. ``"(NOT _1 OR _2 OR _0)"``
    """
    line = line.strip(_ASCII_WHITESPACE)
    for rewrite in _REWRITES:
        line = rewrite(line)
    return f"({line})"


def convert_lines(lines: Iterable[str]) -> Iterator[str]:
    """
        Lazily converts DIMACS lines into clause expressions, keeping their order.

        Header and comment lines are skipped, as are lines holding nothing but whitespace.
    """
    for line in lines:
        if is_header(line) or not line.strip(_ASCII_WHITESPACE):
            continue
        yield convert_line(line)


def to_manchester(lines: Iterable[str]) -> str:
    """
        Converts DIMACS lines into a single formula string.

        Clause expressions are joined by `CLAUSE_SEPARATOR`.
        The result has no trailing newline, and is the empty string when there are no clauses.

        :param lines: iterable of DIMACS lines, e.g. an open file
    """
    return CLAUSE_SEPARATOR.join(convert_lines(lines))
