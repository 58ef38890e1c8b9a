"""Storage capability used by the document manager."""
import copy
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from models.document import Document

logger = logging.getLogger(__name__)


class DocumentRepository(ABC):
    """Minimal persistence surface for documents and their pages."""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve a new document id."""

    @abstractmethod
    def add(self, document: Document) -> Document:
        """Store a new document."""

    @abstractmethod
    def get(self, document_id: int) -> Optional[Document]:
        """Return the stored document, or None if the id is unknown."""

    @abstractmethod
    def list(self) -> List[Document]:
        """Return every stored document in id order."""

    @abstractmethod
    def save(self, document: Document) -> Document:
        """Replace the stored pages, name and modification time of a document."""


class InMemoryDocumentRepository(DocumentRepository):
    """Dictionary-backed repository, used by the service and in tests."""

    def __init__(self):
        self._documents: Dict[int, Document] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, document: Document) -> Document:
        if document.id in self._documents:
            raise ValueError(f"Document {document.id} already exists")

        self._documents[document.id] = copy.deepcopy(document)
        logger.info(f"Stored document {document.id} ({document.name}) with {document.total_pages} pages")
        return copy.deepcopy(document)

    def get(self, document_id: int) -> Optional[Document]:
        document = self._documents.get(document_id)
        return copy.deepcopy(document) if document else None

    def list(self) -> List[Document]:
        return [copy.deepcopy(self._documents[key]) for key in sorted(self._documents)]

    def save(self, document: Document) -> Document:
        stored = self._documents.get(document.id)
        if stored is None:
            raise KeyError(document.id)

        # The import fingerprint and creation time are never taken from the caller
        stored.name = document.name
        stored.modified_at = document.modified_at
        stored.pages = copy.deepcopy(document.pages)

        logger.info(f"Updated document {document.id} ({document.name}) with {document.total_pages} pages")
        return copy.deepcopy(stored)
