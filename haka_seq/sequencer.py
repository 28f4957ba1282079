"""Integer sequences for `for` loops.

Use

    for x in seq(lo, hi):
        ...

in place of counting by hand.  Both bounds are inclusive.  Example
producing every domino stone::

    for first in cardinal(6):
        for second in seq(first, 6):
            print('({}|{})'.format(first, second))

Inverted bounds (`lo > hi`) produce an empty sequence rather than an
error.
"""
from haka_seq.range_iter import IntegralRangeIter


def seq(min, max, log=None):
    """Sequence from `min` to `max`, both inclusive.

    Parameters
    ----------
    min: int
    max: int
    log: str or logging.Logger or None

    Returns
    -------
    IntegralRangeIter
        Empty when `min > max`.
    """
    return IntegralRangeIter(min, max, log=log)


def range(min, max, log=None):
    """Another name for :py:func:`seq`; shadows the builtin only where
    imported explicitly."""
    return seq(min, max, log=log)


def ordinal(last, log=None):
    """Ordinal numbers 1 ("first"), 2 ("second"), ... through `last`
    inclusive.  Empty when `last < 1`.

    Returns
    -------
    IntegralRangeIter
    """
    return seq(1, last, log=log)


def cardinal(max, log=None):
    """Cardinal numbers 0 through `max` inclusive.  Cardinals count how
    many elements there are, which may be zero.  Empty when `max < 0`.

    Returns
    -------
    IntegralRangeIter
    """
    return seq(0, max, log=log)
