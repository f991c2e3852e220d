"""
Demo: seed the sample corpus and print ranked results for one query under
three filters (default ACTUAL status, BANNED status, even document ids).

Usage:
    python run_demo.py
    python run_demo.py --query "пушистый кот"
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from search_server import DocumentStatus, SearchServer
from search_server.search_cli import print_document

SAMPLE_STOP_WORDS = "и в на"

SAMPLE_DOCUMENTS = [
    (0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3]),
    (1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9]),
]

DEFAULT_QUERY = "пушистый ухоженный кот"


def build_sample_server() -> SearchServer:
    server = SearchServer()
    server.set_stop_words(SAMPLE_STOP_WORDS)
    for document_id, text, status, ratings in SAMPLE_DOCUMENTS:
        server.add_document(document_id, text, status, ratings)
    return server


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Search server demo on the sample corpus")
    parser.add_argument(
        "--query",
        default=DEFAULT_QUERY,
        help=f"Query to run (default: {DEFAULT_QUERY!r})",
    )
    args = parser.parse_args()

    server = build_sample_server()

    print("ACTUAL by default:")
    for document in server.find_top_documents(args.query):
        print_document(document)
    print("BANNED:")
    for document in server.find_top_documents(args.query, DocumentStatus.BANNED):
        print_document(document)
    print("Even ids:")
    for document in server.find_top_documents(
        args.query, lambda document_id, status, rating: document_id % 2 == 0
    ):
        print_document(document)


if __name__ == "__main__":
    main()
