from nearest_words.distance.metric import DistanceMetric


def levenshtein_distance(word1: str, word2: str) -> int:
    """Unit-cost insert/delete/substitute distance, two rolling rows."""
    if word1 == word2:
        return 0
    if not word1:
        return len(word2)
    if not word2:
        return len(word1)

    previous = list(range(len(word2) + 1))
    current = [0] * (len(word2) + 1)
    for i, char1 in enumerate(word1):
        current[0] = i + 1
        for j, char2 in enumerate(word2):
            cost = 0 if char1 == char2 else 1
            current[j + 1] = min(
                current[j] + 1,
                previous[j + 1] + 1,
                previous[j] + cost,
            )
        previous, current = current, previous
    return previous[len(word2)]


class LevenshteinDistance(DistanceMetric):
    def _distance(self, word1: str, word2: str) -> int:
        return levenshtein_distance(word1, word2)
