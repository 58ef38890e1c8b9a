"""Keyword search across paginated documents."""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from models.document import Document, Page
from config import MIN_KEYWORD_LENGTH

logger = logging.getLogger(__name__)


@dataclass
class SearchHit:
    """A document containing the searched keyword."""
    document_id: int
    document_name: str
    keyword: str
    occurrences: int
    page_numbers: List[int]

    def describe(self) -> str:
        """Human-readable result line naming the document and the keyword."""
        label = "page" if len(self.page_numbers) == 1 else "pages"
        pages = ", ".join(str(number) for number in self.page_numbers)
        return f"Keyword '{self.keyword}' found in {self.document_name} ({label} {pages})"


class SearchIndex:
    """Scans document pages for case-sensitive keyword matches."""

    def __init__(self, min_keyword_length: int = MIN_KEYWORD_LENGTH):
        """
        Initialize SearchIndex.

        Args:
            min_keyword_length: Shorter keywords are rejected without scanning
        """
        self.min_keyword_length = min_keyword_length

    def search(self, keyword: Optional[str], documents: Sequence[Document]) -> List[SearchHit]:
        """
        Find the documents whose combined page content contains keyword.

        Pages are scanned as one continuous text, so a match spanning a page
        boundary is found. Each document yields at most one hit and hits keep
        the input document order.

        Args:
            keyword: Case-sensitive substring to look for
            documents: Documents to scan

        Returns:
            One SearchHit per matching document, empty for short keywords
        """
        if not keyword or len(keyword) < self.min_keyword_length:
            logger.info(f"Keyword shorter than {self.min_keyword_length} characters, skipping search")
            return []

        hits = []
        for document in documents:
            pages = sorted(document.pages, key=lambda page: page.page_number)
            text = "".join(page.content for page in pages)

            offsets = self._find_all(text, keyword)
            if not offsets:
                continue

            hits.append(SearchHit(
                document_id=document.id,
                document_name=document.name,
                keyword=keyword,
                occurrences=len(offsets),
                page_numbers=self._pages_for_offsets(pages, offsets, len(keyword))
            ))

        logger.info(f"Keyword search matched {len(hits)} of {len(documents)} documents")
        return hits

    def search_keyword(self, keyword: Optional[str], documents: Sequence[Document]) -> List[str]:
        """
        Find matching documents and describe each match as a string.

        Args:
            keyword: Case-sensitive substring to look for
            documents: Documents to scan

        Returns:
            One result string per matching document, containing the document
            name and the keyword
        """
        return [hit.describe() for hit in self.search(keyword, documents)]

    @staticmethod
    def _find_all(text: str, keyword: str) -> List[int]:
        """Start offsets of every (possibly overlapping) occurrence."""
        offsets = []
        start = text.find(keyword)
        while start != -1:
            offsets.append(start)
            start = text.find(keyword, start + 1)
        return offsets

    @staticmethod
    def _pages_for_offsets(pages: List[Page], offsets: List[int], length: int) -> List[int]:
        """Page numbers overlapping any match in the combined text."""
        matched = []
        page_start = 0
        for page in pages:
            page_end = page_start + len(page.content)
            if page.content and any(start < page_end and start + length > page_start for start in offsets):
                matched.append(page.page_number)
            page_start = page_end
        return matched
