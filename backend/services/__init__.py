"""Services for the document analytics service."""
from .pagination_engine import PaginationEngine
from .content_hasher import ContentHasher, EncodingError
from .text_normalizer import normalize, tokenize
from .tfidf_engine import Corpus, TFIDFEngine
from .search_index import SearchIndex, SearchHit
from .document_repository import DocumentRepository, InMemoryDocumentRepository
from .document_manager import DocumentManager, DocumentNotFoundError, IntegrityReport
from .analytics_facade import AnalyticsFacade

__all__ = ['PaginationEngine', 'ContentHasher', 'EncodingError', 'normalize', 'tokenize', 'Corpus', 'TFIDFEngine', 'SearchIndex', 'SearchHit', 'DocumentRepository', 'InMemoryDocumentRepository', 'DocumentManager', 'DocumentNotFoundError', 'IntegrityReport', 'AnalyticsFacade']
