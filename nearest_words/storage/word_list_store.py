import logging
import os
from typing import Iterable

from nearest_words.domain.normalization import normalize_batch, split_words
from nearest_words.domain.words import WordList


logger = logging.getLogger(__name__)


def read_lines(path):
    if not os.path.exists(path):
        logger.warning("Word list file not found: %s", path)
        return []
    with open(path, "r", encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle]


def read_dictionary(path, *, uppercase=True) -> WordList:
    words = normalize_batch(read_lines(path), uppercase=uppercase)
    logger.debug("Loaded %d dictionary words from %s", len(words), path)
    return words


def read_source_text(path, *, uppercase=True) -> WordList:
    words = []
    for line in read_lines(path):
        words.extend(split_words(line, uppercase=uppercase))
    logger.debug("Loaded %d source words from %s", len(words), path)
    return WordList(tuple(words))


def write_words_to_txt(path, words: Iterable[str]) -> int:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as handle:
        for word in words:
            handle.write(f"{word}\n")
            count += 1
    return count
