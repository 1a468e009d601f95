"""tf-idf scoring over a stream of (document, term) occurrences.

Processing flow:
1. Count occurrences per (document, term).
2. Sum counts per document.
3. Join counts to totals, derive tf = count / total.
4. Count documents per term, derive idf = ln(D / df).
5. tf_idf = tf * idf.

Every call builds its tables from scratch; there is no incremental update.
"""

import math
from collections import Counter
from collections.abc import Hashable, Iterable

from textmine.logging.logger import Log
from textmine.scoring.exceptions import (
    DegenerateCorpusError,
    InvalidInputError,
    JoinMismatchError,
)
from textmine.scoring.models import DocumentTotal, ScoredTerm, TermCount, TokenOccurrence
from textmine.scoring.validator import validate_occurrence


class TermFrequencyScorer:
    """Builds term-count, document-total and scored-term tables."""

    def __init__(
        self,
        document_field: str = "document_id",
        term_field: str = "term",
    ) -> None:
        self._document_field = document_field
        self._term_field = term_field

    @property
    def grouping_key(self) -> tuple[str, str]:
        return (self._document_field, self._term_field)

    def ingest(self, records: Iterable[object]) -> list[TokenOccurrence]:
        """Validate records and convert them to TokenOccurrence instances.

        Raises:
            InvalidInputError: if any record has an empty document id or term.
        """
        return [
            validate_occurrence(record, index, self._document_field, self._term_field)
            for index, record in enumerate(records)
        ]

    def compute_counts(self, occurrences: Iterable[object]) -> list[TermCount]:
        """Group occurrences into one row per distinct (document, term).

        The whole input is validated before any row is returned.

        Raises:
            InvalidInputError: if any occurrence has an empty document id or term.
        """
        validated = (
            validate_occurrence(record, index, self._document_field, self._term_field)
            for index, record in enumerate(occurrences)
        )
        return self.count_occurrences(validated)

    def count_occurrences(self, occurrences: Iterable[TokenOccurrence]) -> list[TermCount]:
        """Group already ingested occurrences without validating them again."""
        counter: Counter[tuple[Hashable, str]] = Counter()
        for occurrence in occurrences:
            counter[(occurrence.document_id, occurrence.term)] += 1
        return [
            TermCount(document_id=document_id, term=term, count=count)
            for (document_id, term), count in counter.items()
        ]

    def compute_totals(self, counts: Iterable[TermCount]) -> list[DocumentTotal]:
        """Sum term counts per document."""
        totals: Counter[Hashable] = Counter()
        for row in counts:
            totals[row.document_id] += row.count
        return [
            DocumentTotal(document_id=document_id, total=total)
            for document_id, total in totals.items()
        ]

    def document_frequencies(self, counts: Iterable[TermCount]) -> dict[str, int]:
        """Map each term to the number of distinct documents containing it."""
        seen: set[tuple[Hashable, str]] = set()
        frequencies: Counter[str] = Counter()
        for row in counts:
            key = (row.document_id, row.term)
            if key in seen:
                continue
            seen.add(key)
            frequencies[row.term] += 1
        return dict(frequencies)

    def score(
        self,
        counts: Iterable[TermCount],
        totals: Iterable[DocumentTotal],
        total_documents: int | None = None,
    ) -> list[ScoredTerm]:
        """Join counts to totals and compute tf, idf and tf-idf for every row.

        Args:
            counts: Term-count table from compute_counts.
            totals: Document-total table derived from the same counts.
            total_documents: Corpus size D. Defaults to the number of distinct
                document ids in ``counts``; may be larger, never smaller.

        Raises:
            DegenerateCorpusError: if D is zero.
            JoinMismatchError: if a count row has no matching total.
            InvalidInputError: if a count is below 1, a total is not positive
                or smaller than its document's counts, or D is smaller than
                the number of documents in ``counts``.
        """
        count_rows = self._check_counts(counts)
        total_by_document = self._index_totals(totals)

        documents_in_counts = len({row.document_id for row in count_rows})
        if total_documents is None:
            total_documents = documents_in_counts
        if total_documents <= 0:
            raise DegenerateCorpusError(
                f"Cannot score a corpus of {total_documents} documents"
            )
        if total_documents < documents_in_counts:
            raise InvalidInputError(
                f"total_documents={total_documents} is smaller than the "
                f"{documents_in_counts} documents in the count table"
            )

        self._check_join(count_rows, total_by_document)

        frequencies = self.document_frequencies(count_rows)
        idf_by_term = {
            term: math.log(total_documents / frequency)
            for term, frequency in frequencies.items()
        }
        Log.debug(
            f"Scoring {len(count_rows)} term counts over {total_documents} documents "
            f"({len(idf_by_term)} distinct terms)"
        )

        scored: list[ScoredTerm] = []
        for row in count_rows:
            total = total_by_document[row.document_id]
            tf = row.count / total
            idf = idf_by_term[row.term]
            scored.append(
                ScoredTerm(
                    document_id=row.document_id,
                    term=row.term,
                    count=row.count,
                    total=total,
                    tf=tf,
                    idf=idf,
                    tf_idf=tf * idf,
                )
            )
        return scored

    def bind_tf_idf(self, occurrences: Iterable[object]) -> list[ScoredTerm]:
        """Count, total and score one occurrence stream in a single call."""
        counts = self.compute_counts(occurrences)
        totals = self.compute_totals(counts)
        return self.score(counts, totals)

    def _check_counts(self, counts: Iterable[TermCount]) -> list[TermCount]:
        rows: list[TermCount] = []
        for row in counts:
            if row.count < 1:
                raise InvalidInputError(
                    f"Count for {row.term!r} in document {row.document_id!r} must be "
                    f"at least 1, got {row.count}"
                )
            rows.append(row)
        return rows

    def _index_totals(self, totals: Iterable[DocumentTotal]) -> dict[Hashable, int]:
        indexed: dict[Hashable, int] = {}
        for row in totals:
            if row.document_id in indexed:
                raise InvalidInputError(
                    f"Duplicate document total for document {row.document_id!r}"
                )
            if row.total <= 0:
                raise InvalidInputError(
                    f"Document total for {row.document_id!r} must be positive, got {row.total}"
                )
            indexed[row.document_id] = row.total
        return indexed

    @staticmethod
    def _check_join(count_rows: list[TermCount], total_by_document: dict[Hashable, int]) -> None:
        summed: Counter[Hashable] = Counter()
        for row in count_rows:
            if row.document_id not in total_by_document:
                raise JoinMismatchError(
                    f"No document total for document {row.document_id!r} (term {row.term!r})"
                )
            summed[row.document_id] += row.count
        for document_id, count_sum in summed.items():
            if total_by_document[document_id] < count_sum:
                raise InvalidInputError(
                    f"Document total for {document_id!r} is {total_by_document[document_id]} "
                    f"but its term counts sum to {count_sum}"
                )
