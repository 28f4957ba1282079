from sys import maxsize
from operator import index

from enum import (
    IntEnum,
    unique,
)

from haka_seq.null_log import resolve_log


@unique
class RangeIterState(IntEnum):
    """
    A range iterator starts `active` unless its bounds are inverted, in
    which case it starts `exhausted`.  The `exhausted` state is
    terminal.

    Active States:

    * :py:const:`RangeIterState.active`

    Inactive States:

    * :py:const:`RangeIterState.exhausted`
    """
    active = 0
    exhausted = 1


class IntegralRangeIter(object):
    """Single-pass iterator over the integers `start` through `end`,
    both inclusive, in ascending order.

    When `start > end` the iterator is empty; no error is raised.

    Parameters
    ----------
    start: int
    end: int
    log: str or logging.Logger or None
        If `str` then the result of logging.getLogger(log) is used as a
        logger; otherwise assumes that is a `logging.Logger`-like
        object.  If `log` is `None` then logging is disabled.

    Raises
    ------
    TypeError
        Raised when `start` or `end` is not an integral value.
    """

    def __init__(self, start, end, log=None):
        self.start = int(index(start))
        self.end = int(index(end))
        self.__log = resolve_log(log)
        self.__next = self.start

        if self.start > self.end:
            self.__state = RangeIterState.exhausted
            self.__log.debug('Empty range; start %d is greater than end %d.', self.start, self.end)
        else:
            self.__state = RangeIterState.active

    @property
    def state(self):
        """RangeIterState: Current iterator state."""
        return self.__state

    @property
    def current(self):
        """int: Value that will be returned by the next call to
        `next`; greater than `end` once exhausted."""
        return self.__next

    def has_next(self):
        """bool: True if another value remains; False otherwise."""
        return self.__state is RangeIterState.active

    def next(self):
        """Returns the next integer in the sequence.

        Raises
        ------
        StopIteration
            Raised when the sequence is exhausted.

        Returns
        -------
        int
        """
        if self.__state is RangeIterState.exhausted:
            raise StopIteration()

        n = self.__next
        self.__next += 1
        if self.__next > self.end:
            self.__state = RangeIterState.exhausted
            self.__log.debug('Range %d..%d exhausted.', self.start, self.end)

        return n

    __next__ = next

    def __iter__(self):
        return self

    def __bool__(self):
        return self.has_next()

    def __length_hint__(self):
        """Returns number of values not yet produced, capped at
        `sys.maxsize`.

        Returns
        -------
        int
        """
        return min(maxsize, max(0, self.end - self.__next + 1))

    def __repr__(self):
        return 'IntegralRangeIter(current={}, end={})'.format(self.__next, self.end)
