from haka_seq.null_log import NullLogger, resolve_log
from haka_seq.range_iter import IntegralRangeIter, RangeIterState
from haka_seq.sequencer import seq, range, ordinal, cardinal

# `range` is left out so that a star import does not shadow the builtin.
__all__ = [
    'seq',
    'ordinal',
    'cardinal',
    'IntegralRangeIter',
    'RangeIterState',
    'NullLogger',
    'resolve_log',
]
