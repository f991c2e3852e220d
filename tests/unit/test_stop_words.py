"""
Unit tests for the stop-word set.
"""

from unittest.mock import MagicMock, patch

from search_server.stop_words import StopWords, load_nltk_stop_words


class TestStopWords:

    def test_add_is_cumulative(self):
        stop_words = StopWords("in the")
        stop_words.add("on  a")
        assert stop_words.is_stop_word("in")
        assert stop_words.is_stop_word("a")
        assert not stop_words.is_stop_word("cat")
        assert len(stop_words) == 4

    def test_split_without_stop_words(self):
        stop_words = StopWords("in the")
        assert stop_words.split_into_words_no_stop("cat in the city") == ["cat", "city"]

    def test_case_sensitive(self):
        stop_words = StopWords("the")
        assert "The" not in stop_words

    def test_update_skips_empty_words(self):
        stop_words = StopWords()
        stop_words.update(["and", ""])
        assert list(stop_words) == ["and"]


class TestNltkStopWords:
    """NLTK corpus access is mocked - no downloads in unit tests"""

    def test_load_downloads_corpus_and_returns_words(self):
        mock_corpus = MagicMock()
        mock_corpus.words.return_value = ["a", "the"]
        with patch("search_server.stop_words._nltk_download") as mock_download, \
             patch("search_server.stop_words._nltk_stopwords", new=mock_corpus):
            words = load_nltk_stop_words("english")

        assert words == ["a", "the"]
        mock_download.assert_called_once_with("stopwords", quiet=True)
        mock_corpus.words.assert_called_once_with("english")
