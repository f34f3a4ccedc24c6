"""Run configuration: cell width and end-of-input behaviour.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

from collections import namedtuple
import enum

from naivebf.errors import InvalidUnicode, UnsupportedWidthForValue

SURROGATES = range(0xD800, 0xE000)
MAX_CODE_POINT = 0x10FFFF


class CellSize(enum.Enum):
    """Width of every cell on the tape, in bits.

    An 8 bit cell prints as the raw byte it holds. Wider cells print as
    Unicode code points encoded in UTF-8, so the same program can write
    text outside of Latin-1 when run with wide cells.
    """

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64

    @classmethod
    def from_str(cls, s):
        try:
            return cls(int(s))
        except ValueError:
            raise ValueError("cell size must be one of 8, 16, 32, 64: %r" % s)

    @property
    def bits(self):
        return self.value

    @property
    def modulus(self):
        return 2 ** self.value

    @property
    def max_value(self):
        return self.modulus - 1

    @property
    def c_type(self):
        return "uint%d_t" % self.value

    @property
    def print_routine(self):
        return "printU%d" % self.value

    def encode(self, value):
        """Returns the bytes printed for a cell holding value."""
        if self is CellSize.U8:
            return bytes((value,))
        if self is CellSize.U16:
            if value in SURROGATES:
                raise UnsupportedWidthForValue(value, self)
            return chr(value).encode("utf-8")
        # U32 and U64
        if value > MAX_CODE_POINT or value in SURROGATES:
            raise InvalidUnicode(value)
        return chr(value).encode("utf-8")


class EofBehavior(enum.Enum):
    """What "," stores when the input is exhausted."""

    ZERO = "zero"
    NEG1 = "neg1"
    NO_CHANGE = "nc"

    @classmethod
    def from_str(cls, s):
        try:
            return cls(s.lower())
        except ValueError:
            raise ValueError("EOF behavior must be one of zero, neg1, nc: %r" % s)

    def value_for(self, cell_size, current):
        """Returns the cell value after reading past the end of input."""
        if self is EofBehavior.ZERO:
            return 0
        if self is EofBehavior.NEG1:
            return cell_size.max_value
        return current

    @property
    def c_expression(self):
        # Assigning -1 to an unsigned cell sets all of its bits
        return {
            EofBehavior.ZERO: "0",
            EofBehavior.NEG1: "-1",
            EofBehavior.NO_CHANGE: "*ptr",
        }[self]


Specifications = namedtuple("Specifications", "cell_size eof_behavior",
                            defaults=(CellSize.U8, EofBehavior.ZERO))
