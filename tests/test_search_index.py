"""Unit tests for SearchIndex."""
import sys
from datetime import datetime
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from services.search_index import SearchIndex, SearchHit
from models.document import Document, Page


def make_document(document_id, name, *page_texts):
    """Build a document whose pages hold the given texts."""
    pages = [
        Page(page_number=index + 1, content=text, document_id=document_id)
        for index, text in enumerate(page_texts)
    ]
    return Document(
        id=document_id,
        name=name,
        fingerprint="hash123",
        created_at=datetime(2024, 1, 1),
        modified_at=datetime(2024, 1, 1),
        pages=pages
    )


class TestSearchIndex:
    """Test suite for SearchIndex."""

    @pytest.fixture
    def index(self):
        """Create a SearchIndex with the default minimum keyword length."""
        return SearchIndex()

    def test_search_keyword_found(self, index):
        """Test that a valid keyword is found in the document pages."""
        doc = make_document(1, "TestFile.txt", "This is for testing the search functionality")

        results = index.search_keyword("testing", [doc])

        assert len(results) == 1
        assert "TestFile.txt" in results[0]
        assert "testing" in results[0]

    def test_search_keyword_exactly_three_characters(self, index):
        """Test that a 3-character keyword is allowed and matched once per document."""
        doc = make_document(1, "CarFile.txt", "The car is fast and the car is red")

        results = index.search_keyword("car", [doc])

        assert len(results) == 1
        assert "CarFile.txt" in results[0]
        assert "car" in results[0]

    @pytest.mark.parametrize("keyword", ["xy", "a", "", None])
    def test_short_keyword_returns_empty(self, index, keyword):
        """Test that keywords shorter than 3 characters are rejected."""
        doc = make_document(1, "Short.txt", "xy a xy")

        assert index.search_keyword(keyword, [doc]) == []

    def test_short_keyword_does_not_scan(self, index):
        """Test that the length guard runs before any page is read."""
        class ExplodingDocument:
            @property
            def pages(self):
                raise AssertionError("pages should not be read")

        assert index.search_keyword("xy", [ExplodingDocument()]) == []

    def test_case_sensitive(self, index):
        """Test that matching respects case."""
        doc = make_document(1, "Case.txt", "The Car is red")

        assert index.search_keyword("car", [doc]) == []
        assert len(index.search_keyword("Car", [doc])) == 1

    def test_one_result_per_document(self, index):
        """Test that multi-page, multi-occurrence matches give one entry."""
        doc = make_document(1, "Many.txt", "car car", "another car", "no match")

        hits = index.search("car", [doc])

        assert len(hits) == 1
        assert hits[0].occurrences == 3
        assert hits[0].page_numbers == [1, 2]

    def test_results_follow_input_order(self, index):
        """Test that results keep input document order without ranking."""
        docs = [
            make_document(1, "b.txt", "one keyword"),
            make_document(2, "none.txt", "nothing here"),
            make_document(3, "a.txt", "keyword keyword keyword"),
        ]

        results = index.search_keyword("keyword", docs)

        assert len(results) == 2
        assert "b.txt" in results[0]
        assert "a.txt" in results[1]

    def test_result_count_bounded_by_documents(self, index):
        """Test that results never exceed the number of documents."""
        docs = [make_document(i, f"doc{i}.txt", "abc abc", "abc") for i in range(1, 5)]

        assert len(index.search_keyword("abc", docs)) <= len(docs)

    def test_match_across_page_boundary(self, index):
        """Test that a keyword split over two pages is found."""
        doc = make_document(1, "Split.txt", "the ca", "r is red")

        hits = index.search("car", [doc])

        assert len(hits) == 1
        assert hits[0].page_numbers == [1, 2]

    def test_document_without_pages(self, index):
        """Test that a document with no pages contributes nothing."""
        doc = make_document(1, "Empty.txt")

        assert index.search_keyword("anything", [doc]) == []

    def test_pages_scanned_in_page_number_order(self, index):
        """Test that pages are combined by page number, not list order."""
        doc = make_document(1, "Order.txt", "ca", "r")
        doc.pages.reverse()

        assert len(index.search_keyword("car", [doc])) == 1

    def test_arabic_keyword(self, index):
        """Test search with an Arabic keyword."""
        doc = make_document(1, "عربي.txt", "هذا كتاب جديد")

        results = index.search_keyword("كتاب", [doc])

        assert len(results) == 1
        assert "عربي.txt" in results[0]
        assert "كتاب" in results[0]

    def test_custom_minimum_length(self):
        """Test that the minimum keyword length is configurable."""
        index = SearchIndex(min_keyword_length=5)
        doc = make_document(1, "Doc.txt", "the car is red")

        assert index.search_keyword("car", [doc]) == []

    def test_search_hit_describe(self):
        """Test the descriptive result line."""
        hit = SearchHit(document_id=1, document_name="Doc.txt", keyword="car", occurrences=2, page_numbers=[3])

        assert hit.describe() == "Keyword 'car' found in Doc.txt (page 3)"
