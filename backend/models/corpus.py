"""Corpus data models."""
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class CorpusEntry:
    """Normalized, tokenized representation of one document in a corpus."""
    tokens: Tuple[str, ...]
    terms: FrozenSet[str] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "terms", frozenset(self.tokens))

    def __len__(self) -> int:
        return len(self.tokens)
