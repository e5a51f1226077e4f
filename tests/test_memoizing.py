import threading

import pytest

from nearest_words.distance.levenshtein import LevenshteinDistance
from nearest_words.distance.memoizing import DistanceCache, MemoizingDistanceMetric
from nearest_words.distance.metric import DistanceMetric


class CountingMetric(DistanceMetric):
    def __init__(self, inner=None):
        self.inner = inner or LevenshteinDistance()
        self.calls = []
        self._lock = threading.Lock()

    def _distance(self, word1, word2):
        with self._lock:
            self.calls.append((word1, word2))
        return self.inner.distance(word1, word2)


def test_memoized_matches_unwrapped():
    plain = LevenshteinDistance()
    memoized = MemoizingDistanceMetric(LevenshteinDistance())
    pairs = [("DOG", "LOG"), ("KITTEN", "SITTING"), ("DOG", "LOG"), ("", "CAT"), ("LOG", "DOG")]
    for word1, word2 in pairs + pairs[::-1]:
        assert memoized.distance(word1, word2) == plain.distance(word1, word2)


def test_each_ordered_pair_computed_once():
    inner = CountingMetric()
    memoized = MemoizingDistanceMetric(inner)

    for _ in range(3):
        memoized.distance("DOG", "CAT")
        memoized.distance("CAT", "DOG")

    assert inner.calls == [("DOG", "CAT"), ("CAT", "DOG")]
    assert len(memoized.cache) == 2
    assert memoized.cache.hits == 4
    assert memoized.cache.misses == 2


def test_cache_keys_are_ordered_pairs():
    memoized = MemoizingDistanceMetric(LevenshteinDistance())
    memoized.distance("DOG", "CAT")
    assert ("DOG", "CAT") in memoized.cache
    assert ("CAT", "DOG") not in memoized.cache


def test_zero_distance_is_cached():
    inner = CountingMetric()
    memoized = MemoizingDistanceMetric(inner)
    assert memoized.distance("DOG", "DOG") == 0
    assert memoized.distance("DOG", "DOG") == 0
    assert inner.calls == [("DOG", "DOG")]


def test_shared_cache_between_wrappers():
    cache = DistanceCache()
    inner = CountingMetric()
    first = MemoizingDistanceMetric(inner, cache=cache)
    second = MemoizingDistanceMetric(inner, cache=cache)
    first.distance("DOG", "LOG")
    second.distance("DOG", "LOG")
    assert inner.calls == [("DOG", "LOG")]


def test_concurrent_access_computes_once():
    inner = CountingMetric()
    memoized = MemoizingDistanceMetric(inner)
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(50):
            assert memoized.distance("KITTEN", "SITTING") == 3

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert inner.calls == [("KITTEN", "SITTING")]


def test_cache_clear():
    memoized = MemoizingDistanceMetric(LevenshteinDistance())
    memoized.distance("DOG", "LOG")
    memoized.cache.clear()
    assert len(memoized.cache) == 0
    assert memoized.cache.misses == 0


def test_requires_metric():
    with pytest.raises(TypeError):
        MemoizingDistanceMetric(lambda a, b: 0)
    with pytest.raises(ValueError):
        DistanceCache(shards=0)


def test_concurrent_counters_account_for_every_lookup():
    memoized = MemoizingDistanceMetric(LevenshteinDistance())
    words = ["DOG", "LOG", "CAT", "FISH", "KITTEN", "SITTING", "AWAY", "DAY"]
    pairs = [(a, b) for a in words for b in words]
    thread_count = 8
    rounds = 20
    barrier = threading.Barrier(thread_count)

    def worker():
        barrier.wait()
        for _ in range(rounds):
            for word1, word2 in pairs:
                memoized.distance(word1, word2)

    threads = [threading.Thread(target=worker) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert memoized.cache.misses == len(pairs)
    assert memoized.cache.hits + memoized.cache.misses == thread_count * rounds * len(pairs)
