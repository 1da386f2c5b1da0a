"""
  Capabilities a sequence must offer to be searched or partitioned

  The algorithms of `seqalgo.algo` only see a sequence through its positions:
    Forward        `start`, `end`, `after(i)`, `seq[i]`
                   `advance` and `distance` are available, but in O(n)
    Bidirectional  Forward + `before(i)`
                   enables the two-pointer partition
    RandomAccess   Bidirectional + O(1) `advance` and `distance`
                   enables O(log n) searches

  Positions are only compared with `==` and `!=`.
  `end` is a sentinel: it is never dereferenced.
"""
import abc

from .exception import SeqAlgoUsageError


class Forward(abc.ABC):
    @property
    @abc.abstractmethod
    def start(self):
        pass

    @property
    @abc.abstractmethod
    def end(self):
        pass

    @abc.abstractmethod
    def after(self, i):
        pass

    @abc.abstractmethod
    def __getitem__(self, i):
        pass

    def __setitem__(self, i, value):
        raise SeqAlgoUsageError(f'{type(self).__name__} is not a mutable sequence')

    def swap(self, i, j):
        self[i], self[j] = self[j], self[i]

    def advance(self, i, n):
        """
        Position `n` steps after `i`

        Complexity: n calls to `after`
        """
        if n < 0:
            raise SeqAlgoUsageError(f'{type(self).__name__} can only be advanced forward (asked for {n} steps)')
        for _ in range(n):
            if i == self.end:
                raise SeqAlgoUsageError(f'cannot advance {n} steps: end of sequence reached')
            i = self.after(i)
        return i

    def distance(self, i, j):
        """
        Number of `after` steps needed to go from `i` to `j`

        Complexity: that many calls to `after`
        """
        n = 0
        while i != j:
            if i == self.end:
                raise SeqAlgoUsageError('malformed range: the upper position is not reachable from the lower one')
            i = self.after(i)
            n += 1
        return n

    def positions(self, lo=None, hi=None):
        i = self.start if lo is None else lo
        last = self.end if hi is None else hi
        while i != last:
            yield i
            i = self.after(i)


class Bidirectional(Forward):
    @abc.abstractmethod
    def before(self, i):
        pass


class RandomAccess(Bidirectional):
    """
    Positions are the integers 0..len(self)
    """
    @abc.abstractmethod
    def __len__(self):
        pass

    @property
    def start(self):
        return 0

    @property
    def end(self):
        return len(self)

    def after(self, i):
        if i >= len(self):
            raise SeqAlgoUsageError(f'position {i} has no successor (size is {len(self)})')
        return i + 1

    def before(self, i):
        if i <= 0:
            raise SeqAlgoUsageError(f'position {i} has no predecessor')
        return i - 1

    def advance(self, i, n):
        j = i + n
        if not 0 <= j <= len(self):
            raise SeqAlgoUsageError(f'cannot advance position {i} by {n}: out of [0, {len(self)}]')
        return j

    def distance(self, i, j):
        if not 0 <= i <= j <= len(self):
            raise SeqAlgoUsageError(f'malformed range [{i}, {j}) for a sequence of size {len(self)}')
        return j - i


class SequenceView(RandomAccess):
    """
    Random access view over anything with `__len__` and `__getitem__`
    (list, str, tuple, 1-D numpy array...)
    Writes are forwarded to the underlying object
    """
    def __init__(self, seq):
        self.seq = seq

    def __len__(self):
        return len(self.seq)

    def __getitem__(self, i):
        return self.seq[i]

    def __setitem__(self, i, value):
        self.seq[i] = value

    def __repr__(self):
        return f'SequenceView({self.seq!r})'


def as_view(seq):
    if isinstance(seq, Forward):
        return seq
    if hasattr(seq, '__len__') and hasattr(seq, '__getitem__'):
        return SequenceView(seq)
    raise SeqAlgoUsageError(f'{type(seq).__name__} is neither a seqalgo.sequence.Forward nor a sized indexable sequence')
