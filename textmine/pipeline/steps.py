from textmine.filtering.base import BaseTokenFilter
from textmine.logging.logger import Log
from textmine.pipeline.exceptions import PipelineError
from textmine.pipeline.pipeline import PipelineContext, PipelineStep
from textmine.scoring.ranking import top_terms
from textmine.scoring.scorer import TermFrequencyScorer


class IngestTokensStep(PipelineStep):
    def __init__(self, scorer: TermFrequencyScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.occurrences = self._scorer.ingest(context.records)
        Log.info(f"Ingested {len(context.occurrences)} token occurrences")
        return context


class FilterTokensStep(PipelineStep):
    def __init__(self, token_filter: BaseTokenFilter) -> None:
        self._token_filter = token_filter

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.occurrences is None:
            raise PipelineError("PipelineContext.occurrences must be set before filtering")
        context.filtered = self._token_filter.filter(context.occurrences)
        Log.info(
            f"Filtered tokens: kept {len(context.filtered)} of {len(context.occurrences)}"
        )
        return context


class CountTermsStep(PipelineStep):
    def __init__(self, scorer: TermFrequencyScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.filtered is None:
            raise PipelineError("PipelineContext.filtered must be set before counting")
        context.counts = self._scorer.count_occurrences(context.filtered)
        Log.info(f"Counted {len(context.counts)} distinct (document, term) pairs")
        return context


class ComputeTotalsStep(PipelineStep):
    def __init__(self, scorer: TermFrequencyScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.counts is None:
            raise PipelineError("PipelineContext.counts must be set before computing totals")
        context.totals = self._scorer.compute_totals(context.counts)
        Log.info(f"Computed totals for {len(context.totals)} documents")
        return context


class ScoreStep(PipelineStep):
    def __init__(self, scorer: TermFrequencyScorer) -> None:
        self._scorer = scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.counts is None or context.totals is None:
            raise PipelineError(
                "PipelineContext.counts and totals must be set before scoring"
            )
        context.scored = self._scorer.score(context.counts, context.totals)
        Log.info(f"Scored {len(context.scored)} terms")
        return context


class RankTopTermsStep(PipelineStep):
    def __init__(self, top_n: int) -> None:
        self._top_n = top_n

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.scored is None:
            raise PipelineError("PipelineContext.scored must be set before ranking")
        context.top = top_terms(context.scored, self._top_n)
        Log.info(f"Selected {len(context.top)} top terms (n={self._top_n} per document)")
        return context
