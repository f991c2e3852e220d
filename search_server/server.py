"""
SearchServer: the public entry point tying together stop words, the inverted
index, query parsing, ranking and matching.
"""

from typing import Iterable, List, Tuple, Union

from .matcher import match_document
from .posting import Document, DocumentStatus, InvertedIndex
from .query import parse_query
from .ranker import DocumentPredicate, find_top_documents, status_predicate
from .stop_words import StopWords


class SearchServer:
    """
    In-memory full-text search over an append-only document collection.

    Usage:
        server = SearchServer("in the")
        server.add_document(1, "white cat in the box", DocumentStatus.ACTUAL, [5, 3])
        server.find_top_documents("cat -dog")
        server.find_top_documents("cat", DocumentStatus.BANNED)
        server.find_top_documents("cat", lambda doc_id, status, rating: rating > 0)

    Not thread-safe: callers must serialize add_document against all other calls.
    """

    def __init__(self, stop_words: str = "") -> None:
        self._stop_words = StopWords(stop_words)
        self._index = InvertedIndex(self._stop_words)

    def set_stop_words(self, text: str) -> None:
        """Add space-separated stop words (cumulative). Call before adding documents."""
        self._stop_words.add(text)

    def add_stop_words(self, words: Iterable[str]) -> None:
        """Add stop words from an iterable of words."""
        self._stop_words.update(words)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        self._index.add_document(document_id, document, status, ratings)

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: Union[DocumentStatus, DocumentPredicate] = DocumentStatus.ACTUAL,
    ) -> List[Document]:
        """
        Return up to MAX_RESULT_DOCUMENT_COUNT documents ranked by TF-IDF.

        status_or_predicate is either a DocumentStatus to match exactly
        (ACTUAL by default) or a callable (document_id, status, rating) -> bool.
        Exceptions raised by the predicate propagate to the caller.
        """
        if isinstance(status_or_predicate, DocumentStatus):
            predicate = status_predicate(status_or_predicate)
        elif callable(status_or_predicate):
            predicate = status_or_predicate
        else:
            raise TypeError(
                f"Expected DocumentStatus or predicate, got {type(status_or_predicate).__name__}"
            )
        query = parse_query(raw_query, self._stop_words)
        return find_top_documents(self._index, query, predicate)

    def get_document_count(self) -> int:
        return self._index.document_count

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Explain which query words a document matches.
        Raises DocumentNotFoundError if the id was never added.
        """
        query = parse_query(raw_query, self._stop_words)
        return match_document(self._index, query, document_id)

    @property
    def index(self) -> InvertedIndex:
        return self._index
