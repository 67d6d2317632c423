"""
Command-line interface for dimacs2manchester.

Converts a DIMACS CNF formula into a Boolean expression over AND, OR and NOT,
printed on standard output.

Usage:
    dimacs2manchester [FILE ...]

Without FILE, or when FILE is `-`, standard input is read.
Several files are read one after the other as a single input.
"""

import sys
import lzma
import argparse
from dimacs2manchester import __version__
from dimacs2manchester.converter import to_manchester
from dimacs2manchester.reader import read_lines


def main(args=None):
    parser = argparse.ArgumentParser(description="Convert DIMACS CNF to a Boolean expression using AND, OR and NOT")
    parser.add_argument("files", nargs="*", metavar="FILE", help="DIMACS file(s) to convert, `-` or nothing for standard input (`.xz` files are decompressed)")
    parser.add_argument("--version", action="version", version=f"dimacs2manchester {__version__}")
    args = parser.parse_args(args)

    # build the whole formula first, nothing gets printed if reading fails halfway
    try:
        formula = to_manchester(read_lines(args.files))
    except (OSError, EOFError, lzma.LZMAError) as e:
        sys.stderr.write(f"Error reading input: {e}\n")
        sys.exit(1)

    print(formula)


if __name__ == "__main__":
    main()
