import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Iterable

from nearest_words.distance.memoizing import MemoizingDistanceMetric
from nearest_words.distance.metric import DistanceMetric
from nearest_words.domain.words import WordList, as_word_list
from nearest_words.errors import EmptySourceError


logger = logging.getLogger(__name__)


class CacheScope(str, Enum):
    NONE = "none"
    PER_WORD = "per_word"
    RUN = "run"

    @classmethod
    def parse(cls, value) -> "CacheScope":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(scope.value for scope in cls)
            raise ValueError(f"Unknown cache scope {value!r}; expected one of: {choices}") from None


class RankingAlgorithm:
    """Orders a dictionary by ascending mean distance to a source word list.

    ``cache_scope`` only changes how much distance work is repeated:

    * ``none`` asks the metric for every pair.
    * ``per_word`` memoizes inside a single dictionary word's average.
    * ``run`` shares one cache across the whole ``rank`` call.

    Equal scores keep the dictionary's original order.
    """

    def __init__(
        self,
        metric: DistanceMetric,
        *,
        cache_scope: CacheScope | str = CacheScope.PER_WORD,
        workers: int = 1,
    ):
        if not isinstance(metric, DistanceMetric):
            raise TypeError("metric must implement DistanceMetric")
        if not isinstance(workers, int) or workers < 1:
            raise ValueError("workers must be a positive integer")
        self.metric = metric
        self.cache_scope = CacheScope.parse(cache_scope)
        self.workers = workers

    def rank(
        self,
        source: WordList | Iterable[str],
        dictionary: WordList | Iterable[str],
    ) -> WordList:
        source = as_word_list(source)
        dictionary = as_word_list(dictionary)
        scores = self.score_all(source, dictionary)
        order = sorted(range(len(dictionary)), key=scores.__getitem__)
        return WordList(tuple(dictionary[index] for index in order))

    def score_all(self, source: WordList, dictionary: WordList) -> list[float]:
        source = as_word_list(source)
        dictionary = as_word_list(dictionary)
        if not source:
            raise EmptySourceError()

        run_metric = None
        if self.cache_scope is CacheScope.RUN:
            run_metric = MemoizingDistanceMetric(self.metric)

        def score(word):
            return self._average_distance(word, source, run_metric)

        logger.debug(
            "Scoring %d dictionary words against %d source words (scope=%s, workers=%d)",
            len(dictionary),
            len(source),
            self.cache_scope.value,
            self.workers,
        )
        if self.workers > 1 and len(dictionary) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                scores = list(executor.map(score, dictionary))
        else:
            scores = [score(word) for word in dictionary]

        if run_metric is not None:
            run_metric.log_stats("run-scoped cache")
        return scores

    def score(self, word: str, source: WordList | Iterable[str]) -> float:
        source = as_word_list(source)
        if not source:
            raise EmptySourceError()
        run_metric = None
        if self.cache_scope is CacheScope.RUN:
            run_metric = MemoizingDistanceMetric(self.metric)
        return self._average_distance(word, source, run_metric)

    def _average_distance(self, word, source, run_metric):
        if run_metric is not None:
            metric = run_metric
        elif self.cache_scope is CacheScope.PER_WORD:
            metric = MemoizingDistanceMetric(self.metric)
        else:
            metric = self.metric
        total = sum(metric.distance(item, word) for item in source)
        return total / len(source)


def rank_words(
    source,
    dictionary,
    metric: DistanceMetric,
    *,
    cache_scope: CacheScope | str = CacheScope.PER_WORD,
    workers: int = 1,
) -> WordList:
    algorithm = RankingAlgorithm(metric, cache_scope=cache_scope, workers=workers)
    return algorithm.rank(source, dictionary)
