"""
Tests for the SearchServer facade, end to end through parsing, ranking and matching.
"""

import math

import pytest

from search_server import (
    DocumentNotFoundError,
    DocumentStatus,
    InvalidDocumentError,
    SearchServer,
)


class TestStopWords:

    def test_stop_words_excluded_from_documents(self):
        server = SearchServer()
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        found = server.find_top_documents("in")
        assert [d.id for d in found] == [42]

        server = SearchServer()
        server.set_stop_words("in the")
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        assert server.find_top_documents("in") == []

    def test_stop_words_from_constructor_and_iterable(self):
        server = SearchServer("in")
        server.add_stop_words(["the"])
        server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, [])
        assert server.match_document("cat the city", 1) == (["cat", "city"], DocumentStatus.ACTUAL)

    def test_only_stop_words_document_rejected(self):
        server = SearchServer("in the")
        with pytest.raises(InvalidDocumentError):
            server.add_document(1, "in the", DocumentStatus.ACTUAL, [1])
        assert server.get_document_count() == 0


class TestFindTopDocuments:

    def test_added_document_found(self):
        server = SearchServer()
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        result = server.find_top_documents("city")
        assert len(result) == 1
        assert result[0].id == 42

    def test_minus_words_exclude(self, animal_server):
        result = animal_server.find_top_documents("box -cat")
        assert [d.id for d in result] == [3]

    def test_ties_ordered_by_rating(self):
        server = SearchServer()
        server.add_document(10, "rat in the box", DocumentStatus.ACTUAL, [1, 2, 3])
        server.add_document(20, "white cat in box", DocumentStatus.ACTUAL, [2, 3, 7])
        server.add_document(30, "dog sleep in box", DocumentStatus.ACTUAL, [-6, 3, 0])
        result = server.find_top_documents("box")
        assert [d.rating for d in result] == [4, 2, -1]
        assert all(d.relevance == pytest.approx(math.log(3 / 3) * 0.25) for d in result)

    def test_status_filter(self, box_server):
        assert [d.id for d in box_server.find_top_documents("box", DocumentStatus.BANNED)] == [30]
        assert [d.id for d in box_server.find_top_documents("box", DocumentStatus.IRRELEVANT)] == [20]
        assert [d.id for d in box_server.find_top_documents("box", DocumentStatus.ACTUAL)] == [10]
        assert [d.id for d in box_server.find_top_documents("box")] == [10]
        assert box_server.find_top_documents("box", DocumentStatus.REMOVED) == []

    def test_predicate_filter(self, box_server):
        result = box_server.find_top_documents(
            "box", lambda document_id, status, rating: rating >= 2
        )
        assert [d.id for d in result] == [20, 10]

    def test_predicate_exception_propagates(self, box_server):
        def predicate(document_id, status, rating):
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            box_server.find_top_documents("box", predicate)

    def test_invalid_filter_type(self, box_server):
        with pytest.raises(TypeError):
            box_server.find_top_documents("box", "banned")

    def test_empty_and_stop_word_queries(self):
        server = SearchServer("in")
        server.add_document(1, "cat in box", DocumentStatus.ACTUAL, [])
        assert server.find_top_documents("") == []
        assert server.find_top_documents("in in") == []
        assert server.find_top_documents("-") == []

    def test_result_cap(self):
        server = SearchServer()
        for document_id in range(10):
            server.add_document(document_id, "cat", DocumentStatus.ACTUAL, [document_id])
        assert len(server.find_top_documents("cat")) == 5

    def test_relevance_descending(self, animal_server):
        result = animal_server.find_top_documents("white cat")
        assert [d.id for d in result] == [2, 1]
        assert result[0].relevance > result[1].relevance

    def test_repeated_queries_identical(self, animal_server):
        first = animal_server.find_top_documents("box cat -dog")
        second = animal_server.find_top_documents("box cat -dog")
        assert first == second


class TestMatchDocument:

    def test_status_always_returned(self):
        server = SearchServer()
        server.add_document(1, "cat the city", DocumentStatus.BANNED, [1, 2, 3])
        server.add_document(2, " white cat in box", DocumentStatus.IRRELEVANT, [2, 3, 8])
        server.add_document(4, "hello world", DocumentStatus.ACTUAL, [-6, 3, 0])
        assert server.match_document("cat", 1)[1] == DocumentStatus.BANNED
        assert server.match_document("cat", 2)[1] == DocumentStatus.IRRELEVANT
        assert server.match_document("hello -world", 4) == ([], DocumentStatus.ACTUAL)

    def test_unknown_id(self, animal_server):
        with pytest.raises(DocumentNotFoundError):
            animal_server.match_document("cat", 7)


class TestSampleCorpus:
    """The sample corpus used by run_demo.py"""

    @pytest.fixture
    def server(self):
        from run_demo import build_sample_server
        return build_sample_server()

    def test_actual_by_default(self, server):
        result = [str(d) for d in server.find_top_documents("пушистый ухоженный кот")]
        assert result == [
            "{ document_id = 1, relevance = 0.866434, rating = 5 }",
            "{ document_id = 0, relevance = 0.173287, rating = 2 }",
            "{ document_id = 2, relevance = 0.173287, rating = -1 }",
        ]

    def test_banned(self, server):
        result = [str(d) for d in server.find_top_documents("пушистый ухоженный кот", DocumentStatus.BANNED)]
        assert result == ["{ document_id = 3, relevance = 0.231049, rating = 9 }"]

    def test_even_ids(self, server):
        result = server.find_top_documents(
            "пушистый ухоженный кот", lambda document_id, status, rating: document_id % 2 == 0
        )
        assert [d.id for d in result] == [0, 2]
        assert server.get_document_count() == 4
