"""
Index builder: loads a search server from a directory of document files.

Supported files:
- .json: {"content": str, "id": int?, "status": str?, "ratings": [int]?}
- .html: visible text extracted with BeautifulSoup; status ACTUAL, no ratings
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidDocumentError
from .posting import DocumentStatus
from .server import SearchServer
from .tokenizer import extract_text_from_html, read_html_file

logger = logging.getLogger(__name__)


@dataclass
class SourceDocument:
    content: str
    document_id: int | None = None
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: list[int] = field(default_factory=list)


def _read_source_document(filepath: Path) -> SourceDocument:
    """
    Read a document file.
    - .json: content plus optional id, status and ratings.
    - .html: extracted text only.
    """
    filepath = Path(filepath)
    if filepath.suffix.lower() == ".json":
        data = json.loads(filepath.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"JSON file is not an object: {filepath}")
        if "content" not in data:
            raise ValueError(f"JSON file has no 'content' field: {filepath}")
        if not isinstance(data["content"], str):
            raise ValueError(f"JSON 'content' is not a string: {filepath}")
        ratings = data.get("ratings")
        if ratings is None:
            ratings = []
        if not isinstance(ratings, list):
            raise ValueError(f"JSON 'ratings' is not a list: {filepath}")
        document_id = data.get("id")
        try:
            return SourceDocument(
                content=data["content"],
                document_id=int(document_id) if document_id is not None else None,
                status=DocumentStatus.parse(data.get("status", DocumentStatus.ACTUAL)),
                ratings=[int(r) for r in ratings],
            )
        except TypeError as e:
            raise ValueError(f"Invalid field in {filepath}: {e}") from e
    return SourceDocument(content=extract_text_from_html(read_html_file(filepath)))


def find_document_files(data_dir: Path) -> list[Path]:
    """All .json and .html files under data_dir, sorted by path."""
    data_dir = Path(data_dir)
    html_files = list(data_dir.rglob("*.html"))
    json_files = list(data_dir.rglob("*.json"))
    return sorted(html_files + json_files, key=lambda p: str(p))


def build_server_from_directory(
    data_dir: Path,
    *,
    stop_words: str = "",
) -> tuple[SearchServer, dict[int, Path]]:
    """
    Build a SearchServer from every document file in a directory (recursive).
    Files without an explicit id get the next id after the largest one seen.
    Unreadable and empty documents are logged and skipped.
    Returns (server, doc_id -> file path).
    """
    server = SearchServer(stop_words)
    doc_id_to_path: dict[int, Path] = {}
    next_doc_id = 0

    for filepath in find_document_files(data_dir):
        try:
            source = _read_source_document(filepath)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {filepath}: {e}")
            continue

        document_id = source.document_id if source.document_id is not None else next_doc_id
        if document_id in doc_id_to_path:
            logger.warning(
                f"Skipping {filepath}: id {document_id} already used by {doc_id_to_path[document_id]}"
            )
            continue

        try:
            server.add_document(document_id, source.content, source.status, source.ratings)
        except InvalidDocumentError as e:
            logger.warning(f"Skipping {filepath}: {e}")
            continue

        doc_id_to_path[document_id] = filepath
        next_doc_id = max(next_doc_id, document_id + 1)

    logger.info(f"Loaded {server.get_document_count()} documents from {data_dir}")
    return server, doc_id_to_path
