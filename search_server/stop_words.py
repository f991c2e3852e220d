"""
Stop-word set shared by indexing and query parsing.
"""

from typing import Iterable, Iterator

from nltk import download as _nltk_download
from nltk.corpus import stopwords as _nltk_stopwords

from .tokenizer import split_into_words


def _ensure_stopwords_corpus():
    _nltk_download("stopwords", quiet=True)


def load_nltk_stop_words(language: str) -> list[str]:
    """Return NLTK's stop-word list for a language (e.g. "english", "russian")."""
    _ensure_stopwords_corpus()
    return _nltk_stopwords.words(language)


class StopWords:
    """
    Set of words ignored during both indexing and querying.
    Additions are cumulative; there is no removal.
    """

    def __init__(self, text: str = "") -> None:
        self._words: set[str] = set()
        if text:
            self.add(text)

    def add(self, text: str) -> None:
        """Add every space-separated word of text to the set."""
        self._words.update(split_into_words(text))

    def update(self, words: Iterable[str]) -> None:
        self._words.update(w for w in words if w)

    def is_stop_word(self, word: str) -> bool:
        return word in self._words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        """Split text into words, dropping stop words."""
        return [word for word in split_into_words(text) if word not in self._words]

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
