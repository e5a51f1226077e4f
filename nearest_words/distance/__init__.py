from nearest_words.distance.index_distance import IndexDistanceMetric
from nearest_words.distance.levenshtein import LevenshteinDistance, levenshtein_distance
from nearest_words.distance.memoizing import DistanceCache, MemoizingDistanceMetric
from nearest_words.distance.metric import DistanceMetric

__all__ = [
    "DistanceCache",
    "DistanceMetric",
    "IndexDistanceMetric",
    "LevenshteinDistance",
    "MemoizingDistanceMetric",
    "levenshtein_distance",
]
