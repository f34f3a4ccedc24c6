"""The Brainf**k memory: a tape of fixed-width cells that grows to the right.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

from naivebf.errors import TapeUnderflow
from naivebf.specs import CellSize


class Tape(object):
    def __init__(self, cell_size=CellSize.U8, capacity=100):
        self.cell_size = cell_size
        self.mod = cell_size.modulus
        self.initial_capacity = capacity
        self.cells = [0] * capacity
        self.pos = 0

    @property
    def position(self):
        return self.pos

    @property
    def capacity(self):
        return len(self.cells)

    @property
    def current(self):
        """Returns value of current cell."""
        return self.cells[self.pos]

    def write(self, value):
        """Sets value of current cell, wrapped to the cell width."""
        self.cells[self.pos] = value % self.mod

    def increment(self):
        self.cells[self.pos] = (self.cells[self.pos] + 1) % self.mod

    def decrement(self):
        self.cells[self.pos] = (self.cells[self.pos] - 1) % self.mod

    def move_right(self):
        self.pos += 1
        if self.pos >= len(self.cells):
            self.cells.extend([0] * len(self.cells))

    def move_left(self):
        if self.pos == 0:
            raise TapeUnderflow()
        self.pos -= 1
        if self.pos * 2 < len(self.cells):
            self._shrink()

    def _shrink(self):
        # Only zero cells past the cursor are released, so moving right
        # again reads exactly what was left there. At least twice the live
        # range is kept.
        keep = max(2 * (self.pos + 1), self.initial_capacity)
        cells = self.cells
        while len(cells) > keep and cells[-1] == 0:
            cells.pop()

    def __repr__(self):
        return "Tape(%s, pos=%d, capacity=%d)" % (
            self.cell_size.name, self.pos, len(self.cells))
