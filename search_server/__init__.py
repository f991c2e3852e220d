"""In-memory TF-IDF search server package."""

from .errors import (
    SearchServerError,
    InvalidDocumentError,
    DocumentNotFoundError,
    InvalidQueryError,
)
from .posting import Document, DocumentData, DocumentStatus, InvertedIndex
from .query import Query, parse_query
from .ranker import MAX_RESULT_DOCUMENT_COUNT, find_top_documents
from .matcher import match_document
from .server import SearchServer
from .stop_words import StopWords
from .tokenizer import split_into_words
from .index_builder import build_server_from_directory
