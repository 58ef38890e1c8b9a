"""Content fingerprinting for document integrity checks."""
import hashlib
import logging
from typing import Optional

from config import HASH_ALGORITHM, TEXT_ENCODING

logger = logging.getLogger(__name__)


class EncodingError(Exception):
    """Raised when text cannot be encoded for digesting."""

    def __init__(self, message: str, encoding: str, algorithm: str):
        self.encoding = encoding
        self.algorithm = algorithm
        super().__init__(message)


class ContentHasher:
    """Computes deterministic fingerprints of document text."""

    def __init__(self, algorithm: str = HASH_ALGORITHM, encoding: str = TEXT_ENCODING):
        """
        Initialize ContentHasher.

        Args:
            algorithm: hashlib algorithm name (md5 gives a 128-bit digest)
            encoding: Character encoding applied to text before digesting

        Raises:
            ValueError: If the algorithm is not available in hashlib
        """
        if algorithm not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")

        self.algorithm = algorithm
        self.encoding = encoding

    def fingerprint(self, text: Optional[str]) -> str:
        """
        Compute the fingerprint of text.

        Identical text always yields the identical hex digest; no salt is
        involved. A matching fingerprint signals "unchanged", it is not a
        security guarantee.

        Args:
            text: Text to digest (None is digested as the empty string)

        Returns:
            Lowercase hex digest

        Raises:
            EncodingError: If text cannot be encoded with the configured encoding
        """
        try:
            data = (text or "").encode(self.encoding)
        except UnicodeEncodeError as e:
            message = f"Text cannot be encoded as {self.encoding} for {self.algorithm} digest: {e.reason}"
            logger.error(message)
            raise EncodingError(message, self.encoding, self.algorithm) from e

        return hashlib.new(self.algorithm, data).hexdigest()

    def matches(self, text: Optional[str], fingerprint: str) -> bool:
        """Check whether text still produces the given fingerprint."""
        return self.fingerprint(text) == fingerprint
