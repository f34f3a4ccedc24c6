'''
Unit tests for the lexical filter, bracket checks and contraction
'''

from collections import deque
import unittest

from naivebf.errors import UnpairedBrackets
from naivebf.source import (
    ADJUST, LOOP_CLOSE, LOOP_OPEN, MOVE, PRINT, READ,
    check_brackets, contract, find_left_bracket, find_right_bracket,
    minimize, validate,
)


def bracket_pairs(code):
    stack, pairs = deque(), []
    for pos, op in enumerate(code):
        if op == '[':
            stack.append(pos)
        elif op == ']':
            pairs.append((stack.pop(), pos))
    return pairs


class TestMinimize(unittest.TestCase):
    '''Test removal of comment characters'''

    def test_only_operators_survive(self):
        self.assertEqual(minimize('he+l-lo,.[]wor<>ld'), '+-,.[]<>')

    def test_empty_and_comment_only(self):
        self.assertEqual(minimize(''), '')
        self.assertEqual(minimize('no operators here\n'), '')

    def test_order_is_preserved(self):
        self.assertEqual(minimize('>a<b+c-d.e,f[g]'), '><+-.,[]')


class TestCheckBrackets(unittest.TestCase):
    '''Test the bracket validator'''

    def test_balanced(self):
        for code in ('', '+-<>.,', '[]', '[[]]', '[][]', '+[->[+]<]', '[[][[]]]'):
            self.assertTrue(check_brackets(code), code)
            validate(code)

    def test_excess_close(self):
        self.assertFalse(check_brackets('[]]'))
        with self.assertRaises(UnpairedBrackets) as cm:
            validate('[]]')
        self.assertEqual(cm.exception.position, 2)

    def test_missing_close(self):
        self.assertFalse(check_brackets('[[]'))
        with self.assertRaises(UnpairedBrackets) as cm:
            validate('+[[]')
        self.assertEqual(cm.exception.position, 1)

    def test_close_before_open(self):
        self.assertFalse(check_brackets(']['))
        with self.assertRaises(UnpairedBrackets) as cm:
            validate('+][')
        self.assertEqual(cm.exception.position, 1)


class TestJumpResolution(unittest.TestCase):
    '''Test matching bracket lookup'''

    programs = [
        '[]',
        '[[]]',
        '+[->[+]<]',
        '[[][[]]][]',
        '++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.',
    ]

    def test_partners_are_inverse(self):
        for code in self.programs:
            for opening, closing in bracket_pairs(code):
                self.assertEqual(find_right_bracket(code, opening), closing)
                self.assertEqual(find_left_bracket(code, closing), opening)

    def test_unmatched_is_an_assertion(self):
        with self.assertRaises(AssertionError):
            find_right_bracket('[+', 0)
        with self.assertRaises(AssertionError):
            find_left_bracket('+]', 1)


class TestContract(unittest.TestCase):
    '''Test run-length contraction'''

    def test_mixed_runs_sum_to_net_delta(self):
        self.assertEqual(list(contract('++-+')), [(ADJUST, 2)])
        self.assertEqual(list(contract('>><>>')), [(MOVE, 3)])
        self.assertEqual(list(contract('+-')), [(ADJUST, 0)])

    def test_runs_break_on_kind_change(self):
        self.assertEqual(list(contract('++>>-<[-].')), [
            (ADJUST, 2), (MOVE, 2), (ADJUST, -1), (MOVE, -1),
            (LOOP_OPEN, 1), (ADJUST, -1), (LOOP_CLOSE, 1), (PRINT, 1),
        ])

    def test_io_and_brackets_are_not_merged(self):
        self.assertEqual(list(contract(',,[][]')), [
            (READ, 1), (READ, 1),
            (LOOP_OPEN, 1), (LOOP_CLOSE, 1), (LOOP_OPEN, 1), (LOOP_CLOSE, 1),
        ])

    def test_empty(self):
        self.assertEqual(list(contract('')), [])


if __name__ == '__main__':
    unittest.main()
