"""
TF-IDF ranking over the in-memory inverted index.

relevance(d) = sum over plus-words t of tf(t, d) * idf(t)
where idf(t) = ln(N / df_t), N = number of indexed documents and df_t the
number of documents containing t. Documents containing any minus-word are
dropped after scoring.
"""

from __future__ import annotations

import logging
import math
from functools import cmp_to_key
from typing import Callable, Dict, List

from .posting import Document, DocumentStatus, InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5

# Relevances closer than this are considered equal and ordered by rating.
EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def compute_idf(document_count: int, found_in_docs: int) -> float:
    return math.log(document_count / found_in_docs)


def find_all_documents(
    index: InvertedIndex,
    query: Query,
    predicate: DocumentPredicate,
) -> List[Document]:
    """
    Score every document matching a plus-word and passing the predicate,
    then remove documents containing a minus-word.
    Returned documents are ordered by id.
    """
    document_to_relevance: Dict[int, float] = {}
    for word in sorted(query.plus_words):
        postings = index.postings(word)
        if not postings:
            continue
        idf = compute_idf(index.document_count, len(postings))
        for document_id, term_freq in postings.items():
            data = index.metadata(document_id)
            if predicate(document_id, data.status, data.rating):
                document_to_relevance[document_id] = (
                    document_to_relevance.get(document_id, 0.0) + idf * term_freq
                )

    for word in sorted(query.minus_words):
        for document_id in index.postings(word):
            document_to_relevance.pop(document_id, None)

    return [
        Document(
            id=document_id,
            relevance=relevance,
            rating=index.metadata(document_id).rating,
        )
        for document_id, relevance in sorted(document_to_relevance.items())
    ]


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < EPSILON:
        return (rhs.rating > lhs.rating) - (rhs.rating < lhs.rating)
    return -1 if lhs.relevance > rhs.relevance else 1


def rank_documents(documents: List[Document]) -> List[Document]:
    """
    Sort by relevance descending; near-equal relevances (within EPSILON) by
    rating descending. The sort is stable, so full ties keep input order.
    """
    return sorted(documents, key=cmp_to_key(_compare_documents))


def find_top_documents(
    index: InvertedIndex,
    query: Query,
    predicate: DocumentPredicate,
    limit: int = MAX_RESULT_DOCUMENT_COUNT,
) -> List[Document]:
    """Return at most `limit` best documents for a parsed query."""
    matched_documents = rank_documents(find_all_documents(index, query, predicate))
    logger.debug(f"Query matched {len(matched_documents)} documents")
    return matched_documents[:limit]
