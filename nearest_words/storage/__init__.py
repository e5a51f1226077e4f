from nearest_words.storage.word_list_store import (
    read_dictionary,
    read_lines,
    read_source_text,
    write_words_to_txt,
)

__all__ = [
    "read_dictionary",
    "read_lines",
    "read_source_text",
    "write_words_to_txt",
]
