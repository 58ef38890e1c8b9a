"""TF-IDF relevance scoring against an in-memory corpus."""
import logging
from collections import Counter
from typing import Iterable, List, Optional

import numpy as np

from models.corpus import CorpusEntry
from services.text_normalizer import tokenize

logger = logging.getLogger(__name__)


class Corpus:
    """Append-only collection of normalized documents with term statistics."""

    def __init__(self):
        self.entries: List[CorpusEntry] = []
        self._document_frequencies: Counter = Counter()

    def add_document(self, text: Optional[str]) -> CorpusEntry:
        """
        Normalize, tokenize and append a document.

        Args:
            text: Raw document text (None is treated as empty)

        Returns:
            The stored CorpusEntry
        """
        entry = CorpusEntry(tokens=tuple(tokenize(text)))
        self.entries.append(entry)
        self._document_frequencies.update(entry.terms)

        logger.debug(f"Added corpus entry with {len(entry)} tokens (corpus size: {len(self.entries)})")
        return entry

    def document_frequency(self, term: str) -> int:
        """Number of corpus entries containing term at least once."""
        return self._document_frequencies[term]

    @property
    def size(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class TFIDFEngine:
    """Scores a query document's relevance against a growing corpus."""

    def __init__(self, corpus: Optional[Corpus] = None):
        """
        Initialize TFIDFEngine.

        The engine is not thread-safe: callers sharing one instance across
        threads must serialize add_document and score.

        Args:
            corpus: Existing corpus to score against (a new one by default)
        """
        self.corpus = corpus if corpus is not None else Corpus()

    def add_document(self, text: Optional[str]) -> int:
        """
        Add a document to the corpus.

        Args:
            text: Raw document text

        Returns:
            Corpus size after the addition
        """
        self.corpus.add_document(text)
        return self.corpus.size

    def score(self, query_text: Optional[str]) -> float:
        """
        Compute the average TF-IDF score of a query document.

        For every distinct query term t:
            tf(t)  = count(t) / number of query tokens
            idf(t) = ln(N / (df(t) + 1))
        and the score is sum(tf * idf) / number of distinct terms.

        Empty input, an empty corpus and queries that normalize to no tokens
        all score 0.0. The result is always finite.

        Args:
            query_text: Raw query document text

        Returns:
            Average TF-IDF score
        """
        if not query_text:
            return 0.0

        corpus_size = self.corpus.size
        if corpus_size == 0:
            logger.debug("Corpus is empty, returning 0.0")
            return 0.0

        tokens = tokenize(query_text)
        if not tokens:
            logger.debug("Query normalized to zero tokens, returning 0.0")
            return 0.0

        counts = Counter(tokens)
        terms = list(counts)

        tf = np.array([counts[term] for term in terms], dtype=float) / len(tokens)
        df = np.array([self.corpus.document_frequency(term) for term in terms], dtype=float)
        idf = np.log(corpus_size / (df + 1.0))

        score = float(np.dot(tf, idf) / len(terms))
        logger.debug(f"Scored query with {len(terms)} distinct terms against {corpus_size} documents: {score:.6f}")
        return score

    def score_documents(self, texts: Iterable[Optional[str]]) -> List[float]:
        """Score several query documents in order."""
        return [self.score(text) for text in texts]
