from typing import Iterable

from nearest_words.distance.metric import DistanceMetric
from nearest_words.domain.words import ensure_word
from nearest_words.errors import WordNotFoundError


class IndexDistanceMetric(DistanceMetric):
    """Distance between the positions of two words in a reference dictionary.

    This does not look at the characters of either word. Both words must be
    members of the reference dictionary; repeated entries keep the position
    of their first occurrence.
    """

    def __init__(self, dictionary: Iterable[str]):
        self._indices = {}
        for position, word in enumerate(dictionary):
            ensure_word(word, name=f"dictionary[{position}]")
            self._indices.setdefault(word, position)

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, word) -> bool:
        return word in self._indices

    def position(self, word: str) -> int:
        try:
            return self._indices[word]
        except KeyError:
            raise WordNotFoundError(word) from None

    def _distance(self, word1: str, word2: str) -> int:
        return abs(self.position(word1) - self.position(word2))
