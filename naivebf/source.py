"""Lexical filter, bracket checks and the symbol table shared by the
interpreter and the C converter.

Copyright (C) 2015 Christian Stigen Larsen

Distributed under the LGPL v2.1 or later. You are allowed to change the license
on a particular copy to the LGPL 3.0, the GPL 2.0 or GPL 3.0.
"""

from collections import deque

from naivebf.errors import UnpairedBrackets

OPERATORS = "+-<>.,[]"

# Operation kinds
ADJUST = "adjust"
MOVE = "move"
READ = "read"
PRINT = "print"
LOOP_OPEN = "loop_open"
LOOP_CLOSE = "loop_close"

# What each symbol means, as (kind, delta). Runs of ADJUST and MOVE
# symbols are summed by their deltas.
SYMBOLS = {
    "+": (ADJUST, 1),
    "-": (ADJUST, -1),
    ">": (MOVE, 1),
    "<": (MOVE, -1),
    ",": (READ, 1),
    ".": (PRINT, 1),
    "[": (LOOP_OPEN, 1),
    "]": (LOOP_CLOSE, 1),
}

COLLAPSIBLE = (ADJUST, MOVE)


def minimize(source):
    """Removes everything that is not one of the eight operators."""
    return "".join(filter(lambda x: x in OPERATORS, source))


def _unpaired_position(code):
    stack = deque()
    for pos, op in enumerate(code):
        if op == "[":
            stack.append(pos)
        elif op == "]":
            if not stack:
                return pos
            stack.pop()
    if stack:
        return stack[-1]
    return None


def check_brackets(code):
    """Returns True if every "[" has a matching "]" and vice versa."""
    return _unpaired_position(code) is None


def validate(code):
    """Raises UnpairedBrackets unless the brackets of code pair up."""
    pos = _unpaired_position(code)
    if pos is not None:
        raise UnpairedBrackets(pos)


def find_right_bracket(code, pos):
    """Returns the position of the "]" matching the "[" at pos."""
    count = 0
    for i in range(pos + 1, len(code)):
        if code[i] == "[":
            count += 1
        elif code[i] == "]":
            if count == 0:
                return i
            count -= 1
    raise AssertionError("no ] matches the [ at %d" % pos)


def find_left_bracket(code, pos):
    """Returns the position of the "[" matching the "]" at pos."""
    count = 0
    for i in range(pos - 1, -1, -1):
        if code[i] == "]":
            count += 1
        elif code[i] == "[":
            if count == 0:
                return i
            count -= 1
    raise AssertionError("no [ matches the ] at %d" % pos)


def contract(code):
    """Yields (kind, amount) pairs for minimized code.

    A maximal run of "+" and "-" becomes one ADJUST pair holding the net
    change (e.g. "++-+" => (ADJUST, 2)), and likewise for "<" and ">" with
    MOVE. Every other operator is yielded as (kind, 1).
    """
    prev, amount = None, 0
    for op in code:
        kind, delta = SYMBOLS[op]
        if kind == prev and kind in COLLAPSIBLE:
            amount += delta
            continue
        if prev is not None:
            yield prev, amount
        prev, amount = kind, delta
    if prev is not None:
        yield prev, amount
