class ScoringError(Exception):
    """Base exception for all scoring-related errors."""


class InvalidInputError(ScoringError):
    """Raised when a token occurrence or table row violates the input contract."""


class JoinMismatchError(ScoringError):
    """Raised when a term count has no matching document total."""


class DegenerateCorpusError(ScoringError):
    """Raised when the corpus holds no documents."""
