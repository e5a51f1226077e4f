import re
from typing import Iterable

from nearest_words.domain.words import WordList, ensure_word


_SPACE_RE = re.compile(r"\s+")


def normalize_word(word: str, *, uppercase: bool = True) -> str | None:
    ensure_word(word)
    cleaned = word.strip()
    if not cleaned:
        return None
    return cleaned.upper() if uppercase else cleaned


def split_words(text: str | None, *, uppercase: bool = True) -> list[str]:
    if not text:
        return []
    words = []
    for token in _SPACE_RE.split(text):
        normalized = normalize_word(token, uppercase=uppercase)
        if normalized:
            words.append(normalized)
    return words


def normalize_batch(words: Iterable[str], *, uppercase: bool = True) -> WordList:
    normalized = []
    for word in words or []:
        item = normalize_word(word, uppercase=uppercase)
        if item:
            normalized.append(item)
    return WordList(tuple(normalized))
