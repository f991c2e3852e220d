"""
Line-oriented console front end for the search server.

Input protocol (standard input):
    <stop words>
    <document count N>
    <document text>          \\
    <count> <r1> <r2> ...    /  repeated N times (ratings line may be blank)
    <query>
    <query>
    ...

Each query prints the ranked documents, one per line:
    { document_id = 1, relevance = 0.650672, rating = 5 }

With --data-dir, documents are loaded from files instead and every input
line is a query.

Usage:
    search-server < input.txt
    python -m search_server.search_cli --data-dir data --stop-words "in the"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, TextIO

from .errors import SearchServerError
from .index_builder import build_server_from_directory
from .logging_config import setup_logging
from .posting import Document, DocumentStatus
from .server import SearchServer
from .stop_words import load_nltk_stop_words

logger = logging.getLogger(__name__)


def read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    line = read_line(stream).strip()
    return int(line) if line else 0


def parse_ratings(line: str) -> List[int]:
    """
    Parse a ratings line "<count> r1 r2 ...". Blank means no ratings.
    Ratings beyond <count> are ignored.
    """
    numbers = [int(token) for token in line.split()]
    if not numbers:
        return []
    count, ratings = numbers[0], numbers[1:]
    if count != len(ratings):
        logger.warning(f"Ratings line declares {count} ratings but has {len(ratings)}")
    return ratings[:count]


def read_documents(stream: TextIO, server: SearchServer) -> int:
    """Read the document section of the input protocol into server."""
    document_count = read_line_with_number(stream)
    added = 0
    for document_id in range(document_count):
        text = read_line(stream)
        try:
            ratings = parse_ratings(read_line(stream))
        except ValueError:
            logger.warning(f"Invalid ratings for document {document_id}; using none")
            ratings = []
        try:
            server.add_document(document_id, text, DocumentStatus.ACTUAL, ratings)
        except SearchServerError as e:
            logger.warning(f"Skipping document: {e}")
            continue
        added += 1
    return added


def print_document(document: Document, out: TextIO | None = None) -> None:
    print(document, file=out)


def print_match(
    server: SearchServer,
    raw_query: str,
    document_id: int,
    out: TextIO | None = None,
) -> None:
    words, status = server.match_document(raw_query, document_id)
    print(
        f"{{ document_id = {document_id}, status = {status.name}, "
        f"words = [{', '.join(words)}] }}",
        file=out,
    )


def run_queries(
    server: SearchServer,
    queries: Iterable[str],
    *,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    match_id: int | None = None,
    out: TextIO | None = None,
) -> None:
    """Answer each non-blank query line, ranking or matching."""
    for raw_query in queries:
        raw_query = raw_query.rstrip("\r\n")
        if not raw_query.strip():
            continue
        try:
            if match_id is not None:
                print_match(server, raw_query, match_id, out)
            else:
                for document in server.find_top_documents(raw_query, status):
                    print_document(document, out)
        except SearchServerError as e:
            logger.error(f"Query {raw_query!r} failed: {e}")


def main(argv: Iterable[str] | None = None, stdin: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(description="In-memory TF-IDF search server.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Load .json/.html documents from this directory; stdin then holds only queries.",
    )
    parser.add_argument(
        "--stop-words",
        default="",
        help="Extra space-separated stop words.",
    )
    parser.add_argument(
        "--nltk-stop-words",
        metavar="LANG",
        default=None,
        help="Also use NLTK's stop-word list for this language (e.g. english).",
    )
    parser.add_argument(
        "--status",
        type=DocumentStatus.parse,
        default=DocumentStatus.ACTUAL,
        help="Only rank documents with this status (default: actual).",
    )
    parser.add_argument(
        "--match",
        type=int,
        default=None,
        metavar="ID",
        help="Print which query words document ID matches instead of ranking.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(getattr(logging, args.log_level))
    stream = stdin if stdin is not None else sys.stdin

    extra_stop_words: List[str] = []
    if args.nltk_stop_words:
        extra_stop_words = load_nltk_stop_words(args.nltk_stop_words)

    if args.data_dir is not None:
        if not args.data_dir.exists():
            logger.error(f"Data directory not found: {args.data_dir}")
            return 1
        # Stop words must be in place before documents are indexed.
        stop_words = " ".join([args.stop_words, *extra_stop_words])
        server, _ = build_server_from_directory(args.data_dir, stop_words=stop_words)
    else:
        server = SearchServer(args.stop_words)
        server.add_stop_words(extra_stop_words)
        server.set_stop_words(read_line(stream))
        try:
            read_documents(stream, server)
        except ValueError as e:
            logger.error(f"Invalid document count: {e}")
            return 1

    logger.info(f"Indexed {server.get_document_count()} documents")
    run_queries(server, stream, status=args.status, match_id=args.match)
    return 0


if __name__ == "__main__":
    sys.exit(main())
