from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenOccurrence:
    """One occurrence of a term inside a document, as emitted by a tokenizer."""

    document_id: Hashable
    term: str


@dataclass(frozen=True)
class TermCount:
    """Number of occurrences of a term within one document."""

    document_id: Hashable
    term: str
    count: int


@dataclass(frozen=True)
class DocumentTotal:
    """Sum of all term counts of one document."""

    document_id: Hashable
    total: int


@dataclass(frozen=True)
class ScoredTerm:
    """A term count joined with its document total and tf-idf weights."""

    document_id: Hashable
    term: str
    count: int
    total: int
    tf: float
    idf: float
    tf_idf: float


@dataclass(frozen=True)
class RankedTerm:
    """A term ordered by raw frequency within its document (1 = most frequent)."""

    document_id: Hashable
    term: str
    count: int
    total: int
    tf: float
    rank: int
