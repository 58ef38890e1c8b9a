"""Single entry point to the analytics components for the business layer."""
import logging
from typing import List, Optional, Sequence

from models.document import Document, Page
from services.content_hasher import ContentHasher
from services.pagination_engine import PaginationEngine
from services.search_index import SearchHit, SearchIndex
from services.tfidf_engine import TFIDFEngine

logger = logging.getLogger(__name__)


class AnalyticsFacade:
    """Composes pagination, fingerprinting, corpus scoring and keyword search."""

    def __init__(
        self,
        paginator: Optional[PaginationEngine] = None,
        hasher: Optional[ContentHasher] = None,
        tfidf_engine: Optional[TFIDFEngine] = None,
        search_index: Optional[SearchIndex] = None
    ):
        self.paginator = paginator or PaginationEngine()
        self.hasher = hasher or ContentHasher()
        self.tfidf_engine = tfidf_engine or TFIDFEngine()
        self.search_index = search_index or SearchIndex()

    def paginate(self, content: Optional[str]) -> List[Page]:
        return self.paginator.paginate(content)

    def fingerprint(self, text: Optional[str]) -> str:
        return self.hasher.fingerprint(text)

    def add_to_corpus(self, text: Optional[str]) -> int:
        """Add text to the session corpus and return the new corpus size."""
        return self.tfidf_engine.add_document(text)

    def score(self, text: Optional[str]) -> float:
        return self.tfidf_engine.score(text)

    @property
    def corpus_size(self) -> int:
        return self.tfidf_engine.corpus.size

    def search_keyword(self, keyword: Optional[str], documents: Sequence[Document]) -> List[str]:
        return self.search_index.search_keyword(keyword, documents)

    def search(self, keyword: Optional[str], documents: Sequence[Document]) -> List[SearchHit]:
        return self.search_index.search(keyword, documents)

    def relevance(self, selected_text: Optional[str], other_texts: Sequence[Optional[str]]) -> float:
        """
        Score selected_text against a throwaway corpus built from other_texts.

        The session corpus is left untouched.

        Args:
            selected_text: Content of the selected document
            other_texts: Contents of the unselected documents

        Returns:
            Average TF-IDF score of the selected text
        """
        engine = TFIDFEngine()
        for text in other_texts:
            engine.add_document(text)
        logger.debug(f"Scoring selected document against {engine.corpus.size} unselected documents")
        return engine.score(selected_text)

