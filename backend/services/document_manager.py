"""Document lifecycle: import, edit and integrity checks."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from models.document import Document, Page
from services.content_hasher import ContentHasher
from services.document_repository import DocumentRepository
from services.pagination_engine import PaginationEngine

logger = logging.getLogger(__name__)


class DocumentNotFoundError(LookupError):
    """Raised when a document id is not present in the repository."""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document {document_id} not found")


@dataclass
class IntegrityReport:
    """Comparison of the stored import fingerprint with the current content."""
    document_id: int
    stored_fingerprint: str
    session_fingerprint: str
    modified: bool


class DocumentManager:
    """Imports and edits documents while keeping the import fingerprint fixed."""

    def __init__(
        self,
        repository: DocumentRepository,
        paginator: Optional[PaginationEngine] = None,
        hasher: Optional[ContentHasher] = None
    ):
        """
        Initialize DocumentManager.

        Args:
            repository: Storage for documents (owned by the caller)
            paginator: PaginationEngine instance (default page size if omitted)
            hasher: ContentHasher instance (default algorithm if omitted)
        """
        self.repository = repository
        self.paginator = paginator or PaginationEngine()
        self.hasher = hasher or ContentHasher()

    def import_document(self, name: str, content: Optional[str]) -> Document:
        """
        Import text as a new document.

        The fingerprint computed here is the only one ever stored for the
        document.

        Args:
            name: Document name
            content: Imported raw text

        Returns:
            The stored document with its pages

        Raises:
            ValueError: If name is empty
            EncodingError: If the content cannot be fingerprinted
        """
        if not name or not name.strip():
            raise ValueError("Document name cannot be empty")

        content = content or ""
        fingerprint = self.hasher.fingerprint(content)

        document_id = self.repository.next_id()
        now = datetime.now()
        document = Document(
            id=document_id,
            name=name,
            fingerprint=fingerprint,
            created_at=now,
            modified_at=now,
            pages=self._paginate(content, document_id)
        )

        logger.info(f"Imported {name} as document {document_id} ({len(content)} characters)")
        return self.repository.add(document)

    def update_document(self, document_id: int, content: Optional[str], name: Optional[str] = None) -> Document:
        """
        Replace a document's content and regenerate all of its pages.

        Args:
            document_id: Document to edit
            content: New full text
            name: Optional new name

        Returns:
            The updated document (stored fingerprint unchanged)

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        document = self.get_document(document_id)

        if name is not None:
            if not name.strip():
                raise ValueError("Document name cannot be empty")
            document.name = name

        document.pages = self._paginate(content or "", document_id)
        document.modified_at = datetime.now()

        return self.repository.save(document)

    def update_page(self, document_id: int, page_number: int, content: Optional[str]) -> Document:
        """
        Replace the text of one page, then re-paginate the whole document.

        Args:
            document_id: Document to edit
            page_number: Page whose text is replaced
            content: New page text

        Returns:
            The updated document (stored fingerprint unchanged)

        Raises:
            DocumentNotFoundError: If the document does not exist
            ValueError: If the page number does not exist
        """
        document = self.get_document(document_id)

        pages = sorted(document.pages, key=lambda page: page.page_number)
        if not any(page.page_number == page_number for page in pages):
            raise ValueError(f"Document {document_id} has no page {page_number}")

        combined = "".join(
            (content or "") if page.page_number == page_number else page.content
            for page in pages
        )

        logger.info(f"Editing page {page_number} of document {document_id}")
        return self.update_document(document_id, combined)

    def get_document(self, document_id: int) -> Document:
        """
        Fetch a document by id.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        document = self.repository.get(document_id)
        if document is None:
            logger.error(f"Document {document_id} not found")
            raise DocumentNotFoundError(document_id)
        return document

    def list_documents(self) -> List[Document]:
        return self.repository.list()

    def session_fingerprint(self, document_id: int) -> str:
        """Fingerprint of the document's current content. Never stored."""
        return self.hasher.fingerprint(self.get_document(document_id).content)

    def check_integrity(self, document_id: int) -> IntegrityReport:
        """
        Compare the stored import fingerprint with the current content.

        Args:
            document_id: Document to check

        Returns:
            IntegrityReport; modified is True when the content changed since import
        """
        document = self.get_document(document_id)
        session_fingerprint = self.hasher.fingerprint(document.content)
        modified = session_fingerprint != document.fingerprint

        if modified:
            logger.info(f"Document {document_id} differs from its imported content")

        return IntegrityReport(
            document_id=document_id,
            stored_fingerprint=document.fingerprint,
            session_fingerprint=session_fingerprint,
            modified=modified
        )

    def _paginate(self, content: str, document_id: int) -> List[Page]:
        pages = self.paginator.paginate(content)
        for page in pages:
            page.document_id = document_id
        return pages
