"""
Query parsing: raw query string -> plus-words and minus-words.
"""

import logging
from dataclasses import dataclass, field

from .errors import InvalidQueryError
from .stop_words import StopWords

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass
class Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)

    def __bool__(self) -> bool:
        return bool(self.plus_words or self.minus_words)


def parse_query(raw_query: str, stop_words: StopWords, strict: bool = False) -> Query:
    """
    Parse a raw query.

    Words prefixed with '-' are minus-words: the prefix is stripped and the
    bare word goes into minus_words and also into plus_words. A minus-word
    that is a stop word once stripped is dropped altogether. A bare '-' is
    skipped, or raises InvalidQueryError when strict is set.
    """
    query = Query()
    for word in stop_words.split_into_words_no_stop(raw_query):
        if word.startswith(MINUS_PREFIX):
            word = word[len(MINUS_PREFIX):]
            if not word:
                if strict:
                    raise InvalidQueryError(f"Empty minus-word in query {raw_query!r}")
                logger.debug(f"Skipping empty minus-word in query {raw_query!r}")
                continue
            if stop_words.is_stop_word(word):
                continue
            query.minus_words.add(word)
        query.plus_words.add(word)

    logger.debug(
        f"Parsed query {raw_query!r}: plus={sorted(query.plus_words)}, "
        f"minus={sorted(query.minus_words)}"
    )
    return query
