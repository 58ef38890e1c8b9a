"""Request and response models for the HTTP API."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ImportDocumentRequest(BaseModel):
    """Raw text imported as a new document."""
    name: str = Field(..., min_length=1)
    content: Optional[str] = ""


class UpdateDocumentRequest(BaseModel):
    """Replacement text for a whole document."""
    content: Optional[str] = ""
    name: Optional[str] = None


class UpdatePageRequest(BaseModel):
    """Replacement text for a single page."""
    content: Optional[str] = ""


class PageResponse(BaseModel):
    page_number: int
    content: str


class DocumentResponse(BaseModel):
    """Stored document with its pages."""
    id: int
    name: str
    fingerprint: str
    created_at: datetime
    modified_at: datetime
    total_pages: int
    pages: List[PageResponse]


class IntegrityResponse(BaseModel):
    document_id: int
    stored_fingerprint: str
    session_fingerprint: str
    modified: bool


class SearchRequest(BaseModel):
    """Keyword search, optionally limited to some documents."""
    keyword: str
    document_ids: Optional[List[int]] = None


class SearchResponse(BaseModel):
    keyword: str
    results: List[str]


class CorpusDocumentRequest(BaseModel):
    text: Optional[str] = ""


class CorpusSizeResponse(BaseModel):
    corpus_size: int


class ScoreRequest(BaseModel):
    text: Optional[str] = ""


class ScoreResponse(BaseModel):
    score: float
    corpus_size: int
