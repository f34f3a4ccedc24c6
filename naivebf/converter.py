"""Brainf**k to C converter.

The output is a C program built from six macros, one per kind of
operation. Runs of "+"/"-" and of "<"/">" are contracted into a single
macro call carrying the net amount:

    M1(n)  add n to the current cell
    M2(n)  move the pointer n cells
    M3(x)  read one byte, storing x at end of input
    M4(f)  print the current cell with routine f
    M5     while (*ptr) {
    M6     }

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

import io
import pkgutil
import sys

from naivebf import source as src
from naivebf.specs import Specifications

BUFFER_CELLS = 0xffff

C_MAIN_START = "int main() {"
C_MAIN_END = "return 0;\n}"


def c_prelude():
    return pkgutil.get_data("naivebf", "data/prelude.c").decode("utf-8")


def compile(code, specs=Specifications(), verbose=False):
    """Returns the lines of C that make up the body of main()."""
    lines = []

    def adjust(amount):
        lines.append("M1(%d)" % amount)

    def move(amount):
        lines.append("M2(%d)" % amount)

    def read(_):
        lines.append("M3(%s)" % specs.eof_behavior.c_expression)

    def write(_):
        lines.append("M4(%s)" % specs.cell_size.print_routine)

    def start_loop(_):
        lines.append("M5")

    def end_loop(_):
        lines.append("M6")

    emit = {
        src.ADJUST: adjust,
        src.MOVE: move,
        src.READ: read,
        src.PRINT: write,
        src.LOOP_OPEN: start_loop,
        src.LOOP_CLOSE: end_loop,
    }

    for kind, amount in src.contract(code):
        emit[kind](amount)

    if verbose:
        sys.stderr.write("contracted from %d to %d instructions\n" %
                         (len(code), len(lines)))

    return lines


def convert(source, output, specs=Specifications(), verbose=False):
    """Checks source and writes the equivalent C program to output."""
    code = src.minimize(source)
    src.validate(code)
    body = compile(code, specs, verbose=verbose)

    c_type = specs.cell_size.c_type

    def write_line(line=""):
        output.write(line)
        output.write("\n")

    write_line(c_prelude())
    write_line("%s buf[%#x];" % (c_type, BUFFER_CELLS))
    write_line(C_MAIN_START)
    write_line("%s *ptr = buf;" % c_type)
    write_line("int c;")
    for line in body:
        write_line(line)
    write_line()
    write_line(C_MAIN_END)


def to_c(source, specs=Specifications(), verbose=False):
    """Returns the C program for source as a string."""
    out = io.StringIO()
    convert(source, out, specs, verbose=verbose)
    return out.getvalue()
