"""Document data models."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Page:
    """Represents a single fixed-size page of a document."""
    page_number: int
    content: str = ""
    document_id: Optional[int] = None

    def __post_init__(self):
        if self.content is None:
            self.content = ""


@dataclass
class Document:
    """Represents an imported text document and its pages."""
    id: int
    name: str
    fingerprint: str  # Assigned once at import, never rewritten by edits
    created_at: datetime
    modified_at: datetime
    pages: List[Page] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def content(self) -> str:
        """Page contents joined in page-number order."""
        ordered = sorted(self.pages, key=lambda page: page.page_number)
        return "".join(page.content for page in ordered)
