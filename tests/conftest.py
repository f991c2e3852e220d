"""Shared fixtures for search server tests"""

import pytest
import sys
from pathlib import Path

# Add project root to path for search_server imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from search_server import DocumentStatus, SearchServer


@pytest.fixture
def animal_server():
    """Three documents, no stop words: cat/city, white cat box, dog box"""
    server = SearchServer()
    server.add_document(1, "cat the city", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(2, " white cat in box", DocumentStatus.ACTUAL, [2, 3, 8])
    server.add_document(3, "dog sleep in box", DocumentStatus.ACTUAL, [-6, 3, 0])
    return server


@pytest.fixture
def box_server():
    """Three documents sharing the word "box" with equal term frequency"""
    server = SearchServer()
    server.add_document(10, "rat in the box", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(20, "white cat in box", DocumentStatus.IRRELEVANT, [2, 3, 7])
    server.add_document(30, "dog sleep in box", DocumentStatus.BANNED, [-6, 3, 0])
    return server
