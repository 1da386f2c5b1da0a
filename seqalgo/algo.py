"""
  These algorithms are similar to those of the STL

  `seq` is either a `seqalgo.sequence.Forward` (positions are whatever it uses)
  or any object with `__len__` and `__getitem__` (positions are integer indices)

  Partition direction
    `partition`, `partition_copy` and `is_partitioned`:
        elements for which `pred` is false come first,
        then elements for which `pred` is true
    `partition_point` and the searches built on it:
        the sequence is expected to hold elements for which `pred` is true first,
        and the first position where `pred` is false is returned
    Hence, after `b = partition(seq, pred)`:
        `partition_point(seq, lambda x: not pred(x)) == b`

  Complexity of the searches
    O(log n) applications of the predicate in every case,
    but positions are moved with `advance`, which is O(1) only for `RandomAccess` sequences.
    For other sequences, the total cost of moving positions is O(n)

  Predicates are never guarded: if one raises, the exception is propagated as is
  and a sequence being partitioned is left in an unspecified order
"""
import functools
import logging
import operator
from collections import namedtuple

from .config import options
from .exception import SeqAlgoPreconditionError, SeqAlgoUsageError
from .sequence import Bidirectional, RandomAccess, as_view

logger = logging.getLogger(__name__)


def identity(elem):
    return elem


class IndexRange(namedtuple('IndexRange', ['lo', 'hi'])):
    """
    Half-open range of positions [lo, hi)
    """
    __slots__ = ()

    @property
    def is_empty(self):
        return self.lo == self.hi


# --------------------------------------------------------------------------
# Partition
# --------------------------------------------------------------------------
def partition_copy(seq, pred):
    """
    partitions sequence `seq` into
      `xs_false` with elements of `seq` that don't satisfy predicate `pred`
      `xs_true`  with elements of `seq` that       satisfy predicate `pred`
    then returns `xs_false`, `xs_true`
    `seq` is left untouched, and the relative order of elements is kept

    Complexity:
      with N = len(seq)
      Time:
        N applications of `pred`.
        N calls to list.append
      Space
        N elements
    """
    xs_false = []
    xs_true = []
    for elem in seq:
        if pred(elem):
            xs_true.append(elem)
        else:
            xs_false.append(elem)
    return xs_false, xs_true


def _partition_forward(view, pred):
    pivot = view.start
    end = view.end
    while True:
        if pivot == end:
            return pivot
        if pred(view[pivot]):
            break
        pivot = view.after(pivot)

    i = view.after(pivot)
    while i != end:
        if not pred(view[i]):
            view.swap(i, pivot)
            pivot = view.after(pivot)
        i = view.after(i)
    return pivot


def _partition_bidirectional(view, pred):
    lo = view.start
    hi = view.end

    # Loop invariants:
    #   not pred(view[k]) for k in [start, lo)
    #       pred(view[k]) for k in [hi, end)
    while True:
        while lo != hi and not pred(view[lo]):
            lo = view.after(lo)
        if lo == hi:
            return lo

        hi = view.before(hi)
        while lo != hi and pred(view[hi]):
            hi = view.before(hi)
        if lo == hi:
            return lo

        view.swap(lo, hi)
        lo = view.after(lo)


_partition = functools.singledispatch(_partition_forward)
_partition.register(Bidirectional, _partition_bidirectional)


def partition(seq, pred):
    """
    Reorders `seq` in place such that
      the elements for which `pred` is false come first,
      then the elements for which `pred` is true
    and returns the position of the first element satisfying `pred`
    (that is, the number of elements not satisfying `pred` for integer positions)

    The strategy depends on what `seq` offers:
      - Bidirectional sequences: two positions converging towards each other.
        At most N/2 swaps. The order of neither group is kept.
      - Forward sequences: one pass with a single pivot position.
        At most N swaps. The relative order of the elements not satisfying `pred` is kept.

    Complexity:
      with N = len(seq)
      Time:
        N applications of `pred`
      Space
        Constant
    """
    view = as_view(seq)
    impl = _partition.dispatch(type(view))
    logger.debug('partition of %s with %s', type(view).__name__, impl.__name__)
    return impl(view, pred)


def partition_forward(seq, pred):
    """
    `partition` with the single pivot strategy, whatever the capabilities of `seq`
    """
    return _partition_forward(as_view(seq), pred)


def partition_bidirectional(seq, pred):
    """
    `partition` with the two-pointer strategy. `seq` needs to be Bidirectional
    """
    view = as_view(seq)
    if not isinstance(view, Bidirectional):
        raise SeqAlgoUsageError(f'the two-pointer partition needs a Bidirectional sequence, {type(view).__name__} is not')
    return _partition_bidirectional(view, pred)


# --------------------------------------------------------------------------
# Validation
# --------------------------------------------------------------------------
def _is_partitioned(view, first, last, pred):
    i = first
    while i != last and not pred(view[i]):
        i = view.after(i)
    while i != last and pred(view[i]):
        i = view.after(i)
    return i == last


def is_partitioned(seq, pred, lo=None, hi=None):
    """
    Returns True if `seq[lo:hi]` holds first elements for which `pred` is false,
    then elements for which `pred` is true (either group may be empty)

    Complexity:
      with N = len(seq)
      Time:
        at most N applications of `pred`
      Space
        Constant
    """
    view = as_view(seq)
    first, last, _ = _bounds(view, lo, hi)
    return _is_partitioned(view, first, last, pred)


# --------------------------------------------------------------------------
# Searches
# --------------------------------------------------------------------------
def _search_view(seq, caller):
    view = as_view(seq)
    if not isinstance(view, RandomAccess):
        logger.debug('%s over %s: positions are advanced one step at a time, O(n) total', caller, type(view).__name__)
    return view


def _bounds(view, lo, hi):
    first = view.start if lo is None else lo
    last = view.end if hi is None else hi
    return first, last, view.distance(first, last)


def _check_partitioned(view, first, last, pred, caller):
    if not options.check_preconditions:
        return
    if not _is_partitioned(view, first, last, lambda elem: not pred(elem)):
        raise SeqAlgoPreconditionError(f'{caller}: the sequence is not partitioned with respect to the searched predicate')


def _partition_point(view, first, length, pred):
    while length > 0:
        half = length // 2
        middle = view.advance(first, half)
        if pred(view[middle]):
            first = view.after(middle)
            length -= half + 1
        else:
            length = half
    return first


def _less_than(value, key, comp):
    def pred(elem):
        return comp(key(elem), value)

    return pred


def _not_greater_than(value, key, comp):
    def pred(elem):
        return not comp(value, key(elem))

    return pred


def partition_point(seq, pred, lo=None, hi=None):
    """
    Gives the partition point of sequence `seq`
    That is, the position i where
          pred(seq[k]) for all k < i
      not pred(seq[k]) for all k >= i

    Precondition: `seq[lo:hi]` is supposed to be partitioned into
      first elements for which `pred` is true
      then elements for which `pred` is false
    This is not checked, unless `seqalgo.config.options.check_preconditions` is set

    Complexity:
      with N = len(seq)
      Time:
        log_2(N) applications of `pred`.
        O(N) steps to move positions if `seq` is not RandomAccess
      Space
        Constant
    """
    view = _search_view(seq, 'partition_point')
    first, last, length = _bounds(view, lo, hi)
    _check_partitioned(view, first, last, pred, 'partition_point')
    return _partition_point(view, first, length, pred)


def lower_bound(seq, value, key=identity, comp=operator.lt, lo=None, hi=None):
    """
    First position whose element is not ordered before `value`
    """
    pred = _less_than(value, key, comp)
    view = _search_view(seq, 'lower_bound')
    first, last, length = _bounds(view, lo, hi)
    _check_partitioned(view, first, last, pred, 'lower_bound')
    return _partition_point(view, first, length, pred)


def upper_bound(seq, value, key=identity, comp=operator.lt, lo=None, hi=None):
    """
    First position whose element is ordered after `value`
    """
    pred = _not_greater_than(value, key, comp)
    view = _search_view(seq, 'upper_bound')
    first, last, length = _bounds(view, lo, hi)
    _check_partitioned(view, first, last, pred, 'upper_bound')
    return _partition_point(view, first, length, pred)


def binary_search(seq, value, key=identity, comp=operator.lt, lo=None, hi=None):
    """
    Position of the first element equivalent to `value`, or None if there is none
    Two elements are equivalent if neither is ordered before the other by `comp`
    """
    pred = _less_than(value, key, comp)
    view = _search_view(seq, 'binary_search')
    first, last, length = _bounds(view, lo, hi)
    _check_partitioned(view, first, last, pred, 'binary_search')
    i = _partition_point(view, first, length, pred)
    if i != last and not comp(value, key(view[i])):
        return i
    return None


def equal_range(seq, value, key=identity, comp=operator.lt, lo=None, hi=None):
    """
    Range of the positions whose elements are equivalent to `value`
    If there are none, the range is empty and starts at the insertion point of `value`

    The search narrows [first, first+length) until an equivalent element is found at `middle`,
    then the two bounds are only searched in what is left:
    the lower bound in [first, middle), the upper bound in [middle, first+length)

    Complexity:
      with N = len(seq)
      Time:
        at most 2*log_2(N)+O(1) applications of `comp`
      Space
        Constant
    """
    less_than = _less_than(value, key, comp)
    not_greater_than = _not_greater_than(value, key, comp)
    view = _search_view(seq, 'equal_range')
    first, last, length = _bounds(view, lo, hi)
    _check_partitioned(view, first, last, less_than, 'equal_range')
    _check_partitioned(view, first, last, not_greater_than, 'equal_range')

    while length > 0:
        half = length // 2
        middle = view.advance(first, half)
        x = key(view[middle])
        if comp(x, value):
            first = view.after(middle)
            length -= half + 1
        elif comp(value, x):
            length = half
        else:
            lower = _partition_point(view, first, half, less_than)
            upper = _partition_point(view, middle, length - half, not_greater_than)
            return IndexRange(lower, upper)

    return IndexRange(first, first)


sorted_range = equal_range
