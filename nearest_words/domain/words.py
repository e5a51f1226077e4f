from dataclasses import dataclass
from typing import Iterable, Iterator


Word = str


def ensure_word(value, *, name: str = "word") -> Word:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class WordList:
    words: tuple[Word, ...] = ()

    def __post_init__(self):
        words = tuple(self.words)
        for index, word in enumerate(words):
            ensure_word(word, name=f"words[{index}]")
        object.__setattr__(self, "words", words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __getitem__(self, index):
        return self.words[index]

    def head(self, limit: int) -> "WordList":
        if not limit or limit <= 0:
            return self
        return WordList(self.words[:limit])


def as_word_list(words: "WordList | Iterable[Word]") -> WordList:
    if isinstance(words, WordList):
        return words
    if words is None or isinstance(words, str):
        raise TypeError("words must be a WordList or an iterable of str")
    return WordList(tuple(words))
