#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## reader.py
##
"""
    Reading DIMACS input from files or standard input.

    All given files are read in order as one stream of lines, `-` standing for standard input.
    Without any file, standard input is read.
    Files ending in `.xz` are decompressed on the fly.

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        open_input
        read_lines
"""

import os
import lzma
import fileinput
from typing import Iterator, Sequence, Union


def open_input(fname: Union[str, os.PathLike], mode: str = "r"):
    """
        Opens a single input file as text, LZMA-decompressing it when it has an `.xz` extension.

        Used as the `openhook` of :class:`fileinput.FileInput`, so it follows that signature.

        Arguments:
            fname (str or os.PathLike): path to the file
            mode (str): mode for plain files, `.xz` files are always opened as text
    """
    if os.fspath(fname).endswith(".xz"):
        return lzma.open(fname, "rt")
    return open(fname, mode)


def read_lines(files: Sequence[Union[str, os.PathLike]] = ()) -> Iterator[str]:
    """
        Yields the lines of all `files`, in order, as if they were a single file.

        Errors opening or reading a file (missing file, no permission, ...) are not caught here
        and surface as :class:`OSError` once iteration reaches that file.

        Arguments:
            files: paths to read, `-` for standard input. Empty means standard input.
    """
    with fileinput.FileInput(files or ("-",), openhook=open_input) as stream:
        yield from stream
