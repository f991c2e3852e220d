"""
Errors raised by the search server core.

All of them are ordinary, recoverable exceptions reported to the immediate
caller; nothing in the core terminates the process.
"""


class SearchServerError(Exception):
    """Base class for search server errors."""


class InvalidDocumentError(SearchServerError, ValueError):
    """Document has no indexable words left after stop-word removal."""

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document {document_id} has no words besides stop words")
        self.document_id = document_id


class DocumentNotFoundError(SearchServerError, KeyError):
    """Document id was never added to the index."""

    def __init__(self, document_id: int) -> None:
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"Document {self.document_id} not found"


class InvalidQueryError(SearchServerError, ValueError):
    """Query contains a malformed minus-word (e.g. a bare '-')."""
