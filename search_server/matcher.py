"""
Per-document match explanation.
"""

from typing import List, Tuple

from .posting import DocumentStatus, InvertedIndex
from .query import Query


def match_document(
    index: InvertedIndex,
    query: Query,
    document_id: int,
) -> Tuple[List[str], DocumentStatus]:
    """
    Return the plus-words (in sorted order) found in the document together
    with its status. If the document contains any minus-word, the word list
    is empty. Raises DocumentNotFoundError for an unknown id.
    """
    status = index.metadata(document_id).status

    matched_words: List[str] = []
    for word in sorted(query.plus_words):
        if index.has_posting(word, document_id):
            matched_words.append(word)

    for word in sorted(query.minus_words):
        if index.has_posting(word, document_id):
            matched_words.clear()
            break

    return matched_words, status
