from nearest_words.ranking.average_distance import CacheScope, RankingAlgorithm, rank_words

__all__ = ["CacheScope", "RankingAlgorithm", "rank_words"]
