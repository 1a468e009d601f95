from abc import ABC, abstractmethod
from collections.abc import Iterable

from textmine.scoring.models import TokenOccurrence


class BaseTokenFilter(ABC):
    """Contract for all token occurrence filters."""

    @abstractmethod
    def filter(self, occurrences: Iterable[TokenOccurrence]) -> list[TokenOccurrence]:
        """Drop unwanted occurrences, keeping the input order of the rest.

        Args:
            occurrences: Token occurrences produced by a tokenizer.

        Returns:
            The retained occurrences.
        """
