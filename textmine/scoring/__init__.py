from textmine.scoring.exceptions import (
    DegenerateCorpusError,
    InvalidInputError,
    JoinMismatchError,
    ScoringError,
)
from textmine.scoring.models import (
    DocumentTotal,
    RankedTerm,
    ScoredTerm,
    TermCount,
    TokenOccurrence,
)
from textmine.scoring.ranking import rank_by_frequency, top_terms
from textmine.scoring.scorer import TermFrequencyScorer

__all__ = [
    "DegenerateCorpusError",
    "DocumentTotal",
    "InvalidInputError",
    "JoinMismatchError",
    "RankedTerm",
    "ScoredTerm",
    "ScoringError",
    "TermCount",
    "TermFrequencyScorer",
    "TokenOccurrence",
    "rank_by_frequency",
    "top_terms",
]
