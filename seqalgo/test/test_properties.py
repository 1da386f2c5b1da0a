"""
  Randomized checks of the algorithms against linear scans
"""
import random

import pytest

from seqalgo import algo
from seqalgo.utils.linked import ForwardList, LinkedList


seeds = range(20)


def random_values(rng, max_size=40):
    n = rng.randrange(max_size)
    return [rng.randrange(10) for _ in range(n)]


@pytest.mark.parametrize("seed", seeds)
@pytest.mark.parametrize("partition", [algo.partition, algo.partition_forward, algo.partition_bidirectional])
def test_partition_properties(seed, partition):
    rng = random.Random(seed)
    xs = random_values(rng)
    pivot = rng.randrange(10)

    def pred(x):
        return x < pivot

    original = list(xs)
    boundary = partition(xs, pred)
    assert algo.is_partitioned(xs, pred)
    assert boundary == sum(1 for x in original if not pred(x))
    assert sorted(xs) == sorted(original)
    # searches expect the true group first, see the module docstring of seqalgo.algo
    assert algo.partition_point(xs, lambda x: not pred(x)) == boundary


@pytest.mark.parametrize("seed", seeds)
def test_search_properties(seed):
    rng = random.Random(seed)
    xs = sorted(random_values(rng))
    for v in range(-1, 11):
        lo = algo.lower_bound(xs, v)
        hi = algo.upper_bound(xs, v)
        assert all(x < v for x in xs[:lo])
        assert all(x >= v for x in xs[lo:])
        assert all(x <= v for x in xs[:hi])
        assert all(x > v for x in xs[hi:])
        assert algo.equal_range(xs, v) == (lo, hi)

        i = algo.binary_search(xs, v)
        if v in xs:
            assert i == xs.index(v)
        else:
            assert i is None


@pytest.mark.parametrize("seed", seeds)
@pytest.mark.parametrize("sequence_type", [ForwardList, LinkedList])
def test_linked_agrees_with_list(seed, sequence_type):
    rng = random.Random(seed)
    xs = sorted(random_values(rng))
    linked = sequence_type(xs)

    def index(pos):
        return linked.distance(linked.start, pos)

    for v in range(-1, 11):
        assert index(algo.lower_bound(linked, v)) == algo.lower_bound(xs, v)
        assert index(algo.upper_bound(linked, v)) == algo.upper_bound(xs, v)
        r = algo.equal_range(linked, v)
        assert (index(r.lo), index(r.hi)) == algo.equal_range(xs, v)
