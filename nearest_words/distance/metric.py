from abc import ABC, abstractmethod

from nearest_words.domain.words import ensure_word


class DistanceMetric(ABC):
    """Pairwise dissimilarity between two words.

    ``distance`` validates both arguments and hands them to ``_distance``;
    implementations must be pure so results can be memoized.
    """

    def distance(self, word1: str, word2: str) -> int:
        ensure_word(word1, name="word1")
        ensure_word(word2, name="word2")
        return self._distance(word1, word2)

    @abstractmethod
    def _distance(self, word1: str, word2: str) -> int:
        raise NotImplementedError
