class EmptySourceError(ValueError):
    def __init__(self, message="Source word list is empty; cannot average distances."):
        super().__init__(message)


class WordNotFoundError(KeyError):
    def __init__(self, word):
        self.word = word
        super().__init__(word)

    def __str__(self):
        return f"Word not found in reference dictionary: {self.word!r}"
