"""A naive Brainf**k interpreter and Brainf**k to C converter.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

from naivebf.converter import convert, to_c
from naivebf.errors import (
    BrainfuckError,
    InvalidUnicode,
    IoFailure,
    TapeUnderflow,
    UnpairedBrackets,
    UnsupportedWidthForValue,
)
from naivebf.interpreter import Machine, run
from naivebf.source import check_brackets, minimize, validate
from naivebf.specs import CellSize, EofBehavior, Specifications
from naivebf.tape import Tape

__version__ = "0.1.0"
