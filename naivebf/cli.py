"""Command line front end: interpret, convert to C, or minimize a program.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

import argparse
import sys

from naivebf import converter, interpreter
from naivebf.errors import BrainfuckError
from naivebf.source import minimize
from naivebf.specs import CellSize, EofBehavior, Specifications


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bf", description="Naive Brainf**k interpreter")
    parser.add_argument(
        "src", nargs="?",
        help="Source file. If not given, read source from stdin.")
    parser.add_argument(
        "-E", "--eof", dest="eof_behavior", default=EofBehavior.ZERO,
        type=EofBehavior.from_str, metavar="{zero,neg1,nc}",
        help="EOF behavior (default: zero)")
    parser.add_argument(
        "-s", "--cell-size", default=CellSize.U8,
        type=CellSize.from_str, metavar="{8,16,32,64}",
        help="Specify the size of the cells in bits (default: 8)")
    parser.add_argument(
        "-m", "--minimize", action="store_true",
        help="Minimize the source code")
    parser.add_argument(
        "-c", "--convert", action="store_true",
        help="Convert to C source code")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Report progress on stderr")
    return parser


def read_source(path, stdin):
    if path is None:
        return stdin.read().decode("utf-8", errors="replace")
    with open(path, "rt", encoding="utf-8", errors="replace") as file:
        return file.read()


def main(argv=None, stdin=None, stdout=None):
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    args = build_parser().parse_args(argv)

    try:
        source = read_source(args.src, stdin)
    except OSError as e:
        sys.stderr.write("error: %s\n" % e)
        return 1

    if args.minimize:
        stdout.write((minimize(source) + "\n").encode("ascii"))
        stdout.flush()
        return 0

    specs = Specifications(args.cell_size, args.eof_behavior)

    try:
        if args.convert:
            text = converter.to_c(source, specs, verbose=args.verbose)
            stdout.write(text.encode("utf-8"))
            stdout.flush()
        else:
            interpreter.run(source, stdin, stdout, specs, verbose=args.verbose)
    except BrainfuckError as e:
        sys.stderr.write("error: %s\n" % e)
        return 1

    return 0
