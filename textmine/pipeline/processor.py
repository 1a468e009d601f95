from collections.abc import Iterable

from textmine.config.settings import Settings
from textmine.filtering.factory import TokenFilterFactory
from textmine.logging.logger import Log
from textmine.pipeline.pipeline import PipelineContext, PipelineStep
from textmine.pipeline.steps import (
    ComputeTotalsStep,
    CountTermsStep,
    FilterTokensStep,
    IngestTokensStep,
    RankTopTermsStep,
    ScoreStep,
)
from textmine.scoring.scorer import TermFrequencyScorer


class Processor:
    """Runs token records through the analysis pipeline.

    Pipeline: ingest -> filter -> count -> totals -> score -> rank.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, records: Iterable[object]) -> PipelineContext:
        """Run every step in order and return the populated context."""
        context = PipelineContext(records=list(records))
        Log.info(f"Processing {len(context.records)} token records")
        for step in self._steps:
            context = step.run(context)
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured filter, grouping key and top_n."""
    scorer = TermFrequencyScorer(
        document_field=settings.document_field,
        term_field=settings.term_field,
    )
    token_filter = TokenFilterFactory.create(settings)
    return Processor(
        steps=[
            IngestTokensStep(scorer),
            FilterTokensStep(token_filter),
            CountTermsStep(scorer),
            ComputeTotalsStep(scorer),
            ScoreStep(scorer),
            RankTopTermsStep(settings.top_n),
        ]
    )
