"""
Document records and the inverted index data structure.

The index maps each term to its postings: document id -> relative term
frequency (occurrences of the term / number of non-stop words in the
document). It also owns per-document metadata (average rating, status).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .errors import DocumentNotFoundError, InvalidDocumentError
from .stop_words import StopWords

logger = logging.getLogger(__name__)


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"

    @classmethod
    def parse(cls, value: "str | DocumentStatus") -> "DocumentStatus":
        """Accept a status member or its name/value in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown document status: {value!r}") from None


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored for every indexed document."""

    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """
    A ranked search result.
    - id: document identifier
    - relevance: accumulated TF-IDF score for the query
    - rating: average rating computed at insertion
    """

    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Iterable[int]) -> int:
    """Integer mean truncated toward zero; 0 for no ratings."""
    ratings = list(ratings)
    if not ratings:
        return 0
    rating_sum = sum(ratings)
    # Truncate toward zero: -5 / 3 -> -1, where // would give -2.
    quotient = abs(rating_sum) // len(ratings)
    return quotient if rating_sum >= 0 else -quotient


class InvertedIndex:
    """
    Inverted index: map from term -> {doc_id: term frequency}, plus
    doc_id -> DocumentData. Append-only; documents are never updated.
    """

    def __init__(self, stop_words: StopWords | None = None) -> None:
        self.stop_words = stop_words if stop_words is not None else StopWords()
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._documents: dict[int, DocumentData] = {}
        self._document_count = 0

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        """
        Index a document. Raises InvalidDocumentError (leaving the index
        untouched) when no words remain after stop-word removal.
        """
        words = self.stop_words.split_into_words_no_stop(document)
        if not words:
            raise InvalidDocumentError(document_id)
        data = DocumentData(
            rating=compute_average_rating(ratings),
            status=DocumentStatus.parse(status),
        )

        freq = 1.0 / len(words)
        for word in words:
            postings = self._word_to_document_freqs.setdefault(word, {})
            postings[document_id] = postings.get(document_id, 0.0) + freq

        self._documents[document_id] = data
        self._document_count += 1
        logger.debug(
            f"Indexed document {document_id}: {len(words)} words, "
            f"{len(self._word_to_document_freqs)} terms in index"
        )

    @property
    def document_count(self) -> int:
        return self._document_count

    def postings(self, term: str) -> dict[int, float]:
        """Return a copy of the term's postings ordered by doc_id, or {}."""
        postings = self._word_to_document_freqs.get(term)
        if not postings:
            return {}
        return dict(sorted(postings.items()))

    def has_posting(self, term: str, document_id: int) -> bool:
        return document_id in self._word_to_document_freqs.get(term, {})

    def metadata(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def document_ids(self) -> Iterator[int]:
        """Iterate over indexed document ids in ascending order."""
        return iter(sorted(self._documents))

    def __len__(self) -> int:
        return len(self._word_to_document_freqs)

    def __contains__(self, term: str) -> bool:
        return term in self._word_to_document_freqs
