import logging
import threading
from typing import Callable

from nearest_words.distance.metric import DistanceMetric


logger = logging.getLogger(__name__)

DEFAULT_SHARD_COUNT = 16


class DistanceCache:
    """Ordered-pair distance cache, safe to share between worker threads.

    Each key hashes to one shard lock; a miss is computed while holding that
    lock so a pair is never computed twice for the same cache. Hit and miss
    counts are kept per shard and only updated under that shard's lock.
    """

    def __init__(self, *, shards: int = DEFAULT_SHARD_COUNT):
        if shards < 1:
            raise ValueError("shards must be >= 1")
        self._entries = {}
        self._locks = [threading.Lock() for _ in range(shards)]
        self._hits = [0] * shards
        self._misses = [0] * shards

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    @property
    def hits(self) -> int:
        return sum(self._hits)

    @property
    def misses(self) -> int:
        return sum(self._misses)

    def get_distance(
        self, word1: str, word2: str, compute: Callable[[str, str], int]
    ) -> int:
        key = (word1, word2)
        shard = hash(key) % len(self._locks)
        value = self._entries.get(key)
        if value is not None:
            with self._locks[shard]:
                self._hits[shard] += 1
            return value
        with self._locks[shard]:
            value = self._entries.get(key)
            if value is not None:
                self._hits[shard] += 1
                return value
            value = compute(word1, word2)
            self._entries[key] = value
            self._misses[shard] += 1
        return value

    def clear(self) -> None:
        for lock in self._locks:
            lock.acquire()
        try:
            self._entries.clear()
            self._hits = [0] * len(self._locks)
            self._misses = [0] * len(self._locks)
        finally:
            for lock in self._locks:
                lock.release()


class MemoizingDistanceMetric(DistanceMetric):
    def __init__(self, metric: DistanceMetric, *, cache: DistanceCache | None = None):
        if not isinstance(metric, DistanceMetric):
            raise TypeError("metric must implement DistanceMetric")
        self._metric = metric
        self._cache = cache if cache is not None else DistanceCache()

    @property
    def metric(self) -> DistanceMetric:
        return self._metric

    @property
    def cache(self) -> DistanceCache:
        return self._cache

    def _distance(self, word1: str, word2: str) -> int:
        return self._cache.get_distance(word1, word2, self._metric.distance)

    def log_stats(self, label: str = "distance cache") -> None:
        logger.debug(
            "%s: %d entries, %d hits, %d misses",
            label,
            len(self._cache),
            self._cache.hits,
            self._cache.misses,
        )
