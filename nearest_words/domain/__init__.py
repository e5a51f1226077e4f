from nearest_words.domain.normalization import normalize_batch, normalize_word, split_words
from nearest_words.domain.words import Word, WordList, as_word_list, ensure_word

__all__ = [
    "Word",
    "WordList",
    "as_word_list",
    "ensure_word",
    "normalize_batch",
    "normalize_word",
    "split_words",
]
