"""Per-document orderings of scored tables.

Ties are always broken lexicographically on the term so output is
deterministic regardless of input row order.
"""

from collections import defaultdict
from collections.abc import Hashable, Iterable

from textmine.scoring.models import RankedTerm, ScoredTerm


def top_terms(scored: Iterable[ScoredTerm], n: int) -> list[ScoredTerm]:
    """Return the ``n`` highest tf-idf rows of every document.

    Rows are ordered by document id, then descending tf-idf, then term.
    Exactly ``min(n, rows in document)`` rows are kept per document.

    Raises:
        ValueError: if ``n`` is smaller than 1.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    result: list[ScoredTerm] = []
    for _document_id, rows in _group_by_document(scored):
        rows.sort(key=lambda row: (-row.tf_idf, row.term))
        result.extend(rows[:n])
    return result


def rank_by_frequency(scored: Iterable[ScoredTerm]) -> list[RankedTerm]:
    """Rank every document's terms by raw count (1 = most frequent)."""
    result: list[RankedTerm] = []
    for _document_id, rows in _group_by_document(scored):
        rows.sort(key=lambda row: (-row.count, row.term))
        result.extend(
            RankedTerm(
                document_id=row.document_id,
                term=row.term,
                count=row.count,
                total=row.total,
                tf=row.tf,
                rank=rank,
            )
            for rank, row in enumerate(rows, start=1)
        )
    return result


def _group_by_document(
    scored: Iterable[ScoredTerm],
) -> list[tuple[Hashable, list[ScoredTerm]]]:
    groups: dict[Hashable, list[ScoredTerm]] = defaultdict(list)
    for row in scored:
        groups[row.document_id].append(row)
    try:
        return sorted(groups.items(), key=lambda item: item[0])  # type: ignore[arg-type, return-value]
    except TypeError:
        # mixed id types (e.g. int and str) are not mutually comparable
        return sorted(
            groups.items(), key=lambda item: (type(item[0]).__name__, str(item[0]))
        )
