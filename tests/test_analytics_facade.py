"""Unit tests for AnalyticsFacade."""
import sys
import math
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from unittest.mock import Mock
from services.analytics_facade import AnalyticsFacade
from services.document_manager import DocumentManager
from services.document_repository import InMemoryDocumentRepository
from services.tfidf_engine import TFIDFEngine


class TestAnalyticsFacade:
    """Test suite for AnalyticsFacade."""

    @pytest.fixture
    def facade(self):
        """Create a facade with default components."""
        return AnalyticsFacade()

    def test_paginate_and_fingerprint(self, facade):
        """Test that pagination and fingerprinting are exposed."""
        pages = facade.paginate("x" * 101)

        assert len(pages) == 2
        assert facade.fingerprint("abc") == facade.fingerprint("abc")

    def test_corpus_and_score(self, facade):
        """Test building and querying the session corpus."""
        assert facade.add_to_corpus("ا ا ب") == 1
        assert facade.add_to_corpus("ا ب ب") == 2

        assert facade.corpus_size == 2
        assert facade.score("ا ب") == pytest.approx(math.log(2.0 / 3.0) / 2.0, abs=1e-9)
        assert facade.score("") == 0.0

    def test_search_keyword(self, facade):
        """Test keyword search over imported documents."""
        manager = DocumentManager(InMemoryDocumentRepository())
        car = manager.import_document("CarFile.txt", "The car is fast and the car is red")
        other = manager.import_document("Other.txt", "nothing to see")

        results = facade.search_keyword("car", [car, other])

        assert len(results) == 1
        assert "CarFile.txt" in results[0]
        assert facade.search_keyword("xy", [car, other]) == []
        assert facade.search("car", [car, other])[0].document_id == car.id

    def test_relevance_uses_fresh_corpus(self, facade):
        """Test that relevance scoring does not touch the session corpus."""
        facade.add_to_corpus("ج")

        score = facade.relevance("ا ب", ["ا ا ب", "ا ب ب"])

        assert score == pytest.approx(math.log(2.0 / 3.0) / 2.0, abs=1e-9)
        assert facade.corpus_size == 1

    def test_relevance_without_other_documents(self, facade):
        """Test that relevance against nothing is 0.0."""
        assert facade.relevance("ا ب", []) == 0.0

    def test_delegates_to_injected_engine(self):
        """Test that an injected TFIDFEngine is used for scoring."""
        engine = Mock(spec=TFIDFEngine)
        engine.score.return_value = 1.5
        facade = AnalyticsFacade(tfidf_engine=engine)

        assert facade.score("ا") == 1.5
        engine.score.assert_called_once_with("ا")
