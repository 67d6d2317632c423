"""
    dimacs2manchester converts CNF formulas in DIMACS format into a readable Boolean expression,
    using AND, OR and NOT keywords (Manchester syntax).

    The package consists of 3 modules:
    - `converter`: the line-by-line rewrite of DIMACS clauses into expressions
    - `reader`: reading lines from files (plain or `.xz`) or standard input
    - `cli`: the `dimacs2manchester` command
"""

__version__ = "0.1.0"


from .converter import is_header, convert_line, convert_lines, to_manchester
from .reader import read_lines
