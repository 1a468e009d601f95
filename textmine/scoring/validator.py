"""Ingestion checks for token occurrences."""

from collections.abc import Mapping
from typing import Any

from textmine.scoring.exceptions import InvalidInputError
from textmine.scoring.models import TokenOccurrence

_MISSING = object()


def validate_occurrence(
    record: Any,
    index: int,
    document_field: str = "document_id",
    term_field: str = "term",
) -> TokenOccurrence:
    """Read the grouping key pair from a record and build a TokenOccurrence.

    Records may be mappings or objects exposing the fields as attributes.
    TokenOccurrence instances are always read by their own field names.

    Raises:
        InvalidInputError: if the document id or term is missing or empty.
    """
    if isinstance(record, TokenOccurrence):
        document_field, term_field = "document_id", "term"
    document_id = _read_field(record, document_field)
    if document_id is _MISSING or document_id is None or document_id == "":
        raise InvalidInputError(
            f"Occurrence at index {index}: '{document_field}' must be a non-empty identifier"
        )
    try:
        hash(document_id)
    except TypeError as exc:
        raise InvalidInputError(
            f"Occurrence at index {index}: '{document_field}' must be hashable: {exc}"
        ) from exc
    term = _read_field(record, term_field)
    if not isinstance(term, str) or not term:
        raise InvalidInputError(
            f"Occurrence at index {index}: '{term_field}' must be a non-empty string"
        )
    if isinstance(record, TokenOccurrence):
        return record
    return TokenOccurrence(document_id=document_id, term=term)


def _read_field(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field, _MISSING)
    return getattr(record, field, _MISSING)
