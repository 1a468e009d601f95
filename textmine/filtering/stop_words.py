from collections.abc import Iterable

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from textmine.filtering.base import BaseTokenFilter
from textmine.scoring.models import TokenOccurrence


class StopWordFilter(BaseTokenFilter):
    """Removes occurrences whose term is in a stop-word lexicon."""

    def __init__(self, stop_words: Iterable[str], case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive
        self._stop_words = frozenset(self._key(word) for word in stop_words)

    @classmethod
    def english(
        cls,
        extra_words: Iterable[str] = (),
        case_sensitive: bool = False,
    ) -> "StopWordFilter":
        """Build a filter from scikit-learn's English lexicon plus ``extra_words``."""
        return cls([*ENGLISH_STOP_WORDS, *extra_words], case_sensitive=case_sensitive)

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def filter(self, occurrences: Iterable[TokenOccurrence]) -> list[TokenOccurrence]:
        return [
            occurrence
            for occurrence in occurrences
            if self._key(occurrence.term) not in self._stop_words
        ]

    def _key(self, term: str) -> str:
        return term if self._case_sensitive else term.casefold()


class NoopFilter(BaseTokenFilter):
    """Keeps every occurrence."""

    def filter(self, occurrences: Iterable[TokenOccurrence]) -> list[TokenOccurrence]:
        return list(occurrences)
