from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from textmine.scoring.models import (
    DocumentTotal,
    ScoredTerm,
    TermCount,
    TokenOccurrence,
)


@dataclass(slots=True)
class PipelineContext:
    records: list[object] = field(default_factory=list)
    occurrences: list[TokenOccurrence] | None = None
    filtered: list[TokenOccurrence] | None = None
    counts: list[TermCount] | None = None
    totals: list[DocumentTotal] | None = None
    scored: list[ScoredTerm] | None = None
    top: list[ScoredTerm] | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
