"""Data models for the document analytics service."""
from .document import Document, Page
from .corpus import CorpusEntry
from .api import (
    ImportDocumentRequest,
    UpdateDocumentRequest,
    UpdatePageRequest,
    PageResponse,
    DocumentResponse,
    IntegrityResponse,
    SearchRequest,
    SearchResponse,
    CorpusDocumentRequest,
    CorpusSizeResponse,
    ScoreRequest,
    ScoreResponse,
)

__all__ = [
    "Document",
    "Page",
    "CorpusEntry",
    "ImportDocumentRequest",
    "UpdateDocumentRequest",
    "UpdatePageRequest",
    "PageResponse",
    "DocumentResponse",
    "IntegrityResponse",
    "SearchRequest",
    "SearchResponse",
    "CorpusDocumentRequest",
    "CorpusSizeResponse",
    "ScoreRequest",
    "ScoreResponse",
]
