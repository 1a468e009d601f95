import pytest

from textmine.scoring.models import TokenOccurrence


def _tokens(document_id: str, text: str) -> list[TokenOccurrence]:
    return [TokenOccurrence(document_id=document_id, term=word) for word in text.split()]


@pytest.fixture()
def two_document_corpus() -> list[TokenOccurrence]:
    """Doc A = 'the cat sat', Doc B = 'the dog sat'."""
    return _tokens("A", "the cat sat") + _tokens("B", "the dog sat")


@pytest.fixture()
def novel_corpus() -> list[TokenOccurrence]:
    """Three short passages with repeated words and stop words."""
    return (
        _tokens("emma", "emma was handsome clever and rich emma smiled")
        + _tokens("persuasion", "anne was the daughter of sir walter anne read")
        + _tokens("sense", "the family of dashwood had long been settled in sussex")
    )
