import unittest
from itertools import islice
from operator import length_hint
from sys import maxsize

from mock import Mock

from haka_seq.range_iter import IntegralRangeIter, RangeIterState


class TestIntegralRangeIter(unittest.TestCase):
    def test_iter(self):
        it = IntegralRangeIter(0, 4)
        it_copy = iter(it)
        self.assertEqual(id(it), id(it_copy))
        self.assertEqual(RangeIterState.active, it.state)
        self.assertEqual(5, length_hint(it))

        numbers = []
        while it.has_next():
            numbers.append(next(it))

        self.assertEqual(numbers, [0, 1, 2, 3, 4])
        self.assertEqual(RangeIterState.exhausted, it.state)
        self.assertEqual(0, length_hint(it))
        self.assertEqual(5, it.current)

    def test_single(self):
        it = IntegralRangeIter(3, 3)
        self.assertTrue(it.has_next())
        self.assertEqual(3, it.next())
        self.assertFalse(it.has_next())

    def test_inverted(self):
        it = IntegralRangeIter(5, 3)
        self.assertEqual(RangeIterState.exhausted, it.state)
        self.assertFalse(it.has_next())
        self.assertEqual(0, length_hint(it))
        self.assertEqual([], list(it))

    def test_exhaustion_idempotent(self):
        it = IntegralRangeIter(1, 2)
        self.assertEqual([1, 2], list(it))
        for i in range(0, 3):
            self.assertFalse(it.has_next())
            self.assertRaises(StopIteration, it.next)

        # Single pass; a second loop over the same iterator is empty.
        self.assertEqual([], list(it))

    def test_length_hint_while_consuming(self):
        it = IntegralRangeIter(-2, 2)
        for remaining in [5, 4, 3, 2, 1]:
            self.assertEqual(remaining, length_hint(it))
            next(it)

        self.assertEqual(0, length_hint(it))

    def test_large_bounds(self):
        end = 2**63 - 1
        it = IntegralRangeIter(end - 2, end)
        self.assertEqual([end - 2, end - 1, end], list(it))
        self.assertFalse(it.has_next())

        it = IntegralRangeIter(2**100, 2**100 + 1)
        self.assertEqual([2**100, 2**100 + 1], list(it))

    def test_huge_span(self):
        it = IntegralRangeIter(0, 2**63)
        self.assertTrue(it)
        self.assertEqual(maxsize, length_hint(it))
        self.assertEqual(0, next(it))
        self.assertEqual([1, 2, 3], list(islice(it, 3)))
        self.assertTrue(it.has_next())

        it = IntegralRangeIter(-2**64, 2**64)
        self.assertTrue(it)
        self.assertEqual(maxsize, length_hint(it))

    def test_truth(self):
        self.assertFalse(IntegralRangeIter(5, 3))
        it = IntegralRangeIter(1, 1)
        self.assertTrue(it)
        next(it)
        self.assertFalse(it)

    def test_index_bounds(self):
        it = IntegralRangeIter(False, True)
        self.assertEqual([0, 1], list(it))
        self.assertIs(type(it.start), int)

    def test_bad_bounds(self):
        self.assertRaises(TypeError, IntegralRangeIter, 0.0, 3)
        self.assertRaises(TypeError, IntegralRangeIter, 0, '3')
        self.assertRaises(TypeError, IntegralRangeIter, None, 3)

    def test_repr(self):
        it = IntegralRangeIter(7, 9)
        next(it)
        self.assertEqual('IntegralRangeIter(current=8, end=9)', repr(it))

    def test_log(self):
        log = Mock()
        it = IntegralRangeIter(0, 1, log=log)
        log.debug.assert_not_called()

        list(it)
        self.assertEqual(1, log.debug.call_count)

        list(it)
        self.assertEqual(1, log.debug.call_count)

    def test_log_inverted(self):
        log = Mock()
        IntegralRangeIter(1, 0, log=log)
        log.debug.assert_called_once_with('Empty range; start %d is greater than end %d.', 1, 0)
