class CorpusError(Exception):
    """Base exception for all corpus loading errors."""


class TokenFileFormatError(CorpusError):
    """Raised when a token file line is not a document id / term pair."""
