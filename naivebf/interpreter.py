"""Brainf**k interpreter

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

import sys

from naivebf import source as src
from naivebf.errors import IoFailure
from naivebf.specs import Specifications
from naivebf.tape import Tape


class Machine(object):
    def __init__(self, code, reader, writer, specs=Specifications(),
                 verbose=False):
        # Code and pointer (program counter)
        self.code = code
        self.cptr = 0

        # Memory
        self.specs = specs
        self.tape = Tape(specs.cell_size)

        # I/O, both binary streams
        self.reader = reader
        self.writer = writer

        self.verbose = verbose
        self.steps = 0
        self.commands = {
            src.ADJUST: self.adjust,
            src.MOVE: self.move,
            src.READ: self.read,
            src.PRINT: self.write,
            src.LOOP_OPEN: self.open_loop,
            src.LOOP_CLOSE: self.close_loop,
        }

    @property
    def halted(self):
        return self.cptr >= len(self.code)

    def adjust(self, delta):
        if delta > 0:
            self.tape.increment()
        else:
            self.tape.decrement()

    def move(self, delta):
        if delta > 0:
            self.tape.move_right()
        else:
            self.tape.move_left()

    def read(self, _):
        try:
            data = self.reader.read(1)
        except OSError as e:
            raise IoFailure("reading input failed: %s" % e) from e
        if data:
            self.tape.write(data[0])
        else:
            self.tape.write(self.specs.eof_behavior.value_for(
                self.specs.cell_size, self.tape.current))

    def write(self, _):
        data = self.specs.cell_size.encode(self.tape.current)
        try:
            self.writer.write(data)
            self.writer.flush()
        except OSError as e:
            raise IoFailure("writing output failed: %s" % e) from e

    def open_loop(self, _):
        if self.tape.current == 0:
            self.cptr = src.find_right_bracket(self.code, self.cptr)

    def close_loop(self, _):
        if self.tape.current != 0:
            self.cptr = src.find_left_bracket(self.code, self.cptr)

    def step(self):
        """Runs one instruction. Can be called many times."""
        kind, delta = src.SYMBOLS[self.code[self.cptr]]
        self.commands[kind](delta)
        # A taken jump leaves cptr on the partner bracket, so this lands
        # just past it.
        self.cptr += 1
        self.steps += 1

    def run(self):
        """Runs program until it ends."""
        while not self.halted:
            self.step()

        if self.verbose:
            sys.stderr.write("halted after %d steps, tape capacity %d\n" %
                             (self.steps, self.tape.capacity))


def run(source, reader, writer, specs=Specifications(), verbose=False):
    """Checks and runs source, reading from and writing to binary streams."""
    code = src.minimize(source)
    src.validate(code)
    machine = Machine(code, reader, writer, specs, verbose=verbose)
    machine.run()
    return machine
