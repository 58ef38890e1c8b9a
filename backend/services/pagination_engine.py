"""Pagination engine that splits raw text into fixed-size pages."""
import logging
from typing import Iterable, List, Optional

from models.document import Page
from config import PAGE_SIZE

logger = logging.getLogger(__name__)


class PaginationEngine:
    """Splits document text into consecutive fixed-size pages."""

    def __init__(self, page_size: int = PAGE_SIZE):
        """
        Initialize PaginationEngine.

        Args:
            page_size: Maximum number of characters per page

        Raises:
            ValueError: If page_size is not positive
        """
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.page_size = page_size

    def paginate(self, content: Optional[str]) -> List[Page]:
        """
        Split content into pages of at most page_size characters.

        Content is sliced as-is: no trimming or normalization happens, so the
        pages joined back together reproduce the input exactly.

        Args:
            content: Raw document text (None is treated as empty)

        Returns:
            Pages numbered from 1; always at least one (possibly empty) page
        """
        if not content:
            return [Page(page_number=1, content="")]

        pages = [
            Page(page_number=index + 1, content=content[start:start + self.page_size])
            for index, start in enumerate(range(0, len(content), self.page_size))
        ]

        logger.debug(f"Paginated {len(content)} characters into {len(pages)} pages")
        return pages

    @staticmethod
    def reassemble(pages: Iterable[Page]) -> str:
        """Join page contents back together in page-number order."""
        ordered = sorted(pages, key=lambda page: page.page_number)
        return "".join(page.content for page in ordered)
