"""Errors raised while checking, running or converting Brainf**k programs.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""


class BrainfuckError(Exception):
    """Base class for every error a run can end with."""


class UnpairedBrackets(BrainfuckError):
    """Raised when a program's brackets do not pair up.

    Attributes:
        position -- index (in the minimized source) of the offending bracket.
    """

    def __init__(self, position=None):
        self.position = position
        if position is None:
            message = "unpaired brackets"
        else:
            message = "unpaired bracket at position %d" % position
        super().__init__(message)


class IoFailure(BrainfuckError):
    """Raised when the input or output stream fails for a reason other
    than end-of-input. The original OSError is chained as __cause__."""


class InvalidUnicode(BrainfuckError):
    """Raised when a wide cell is printed but holds no Unicode scalar."""

    def __init__(self, value):
        self.value = value
        super().__init__("cell value %#x is not a valid code point" % value)


class UnsupportedWidthForValue(BrainfuckError):
    """Raised when a 16 bit cell holds a surrogate code unit.

    A single 16 bit cell cannot spell a supplementary-plane character and
    surrogate pairs are not assembled across cells.
    """

    def __init__(self, value, cell_size):
        self.value = value
        self.cell_size = cell_size
        super().__init__("cannot print %#x from a %d bit cell" %
                         (value, cell_size.bits))


class TapeUnderflow(BrainfuckError):
    """Raised when the program moves left of the first cell. There are no
    negative addresses, so no program can rely on this."""

    def __init__(self):
        super().__init__("moved left of the first cell")
