from textmine.config.settings import Settings
from textmine.filtering.base import BaseTokenFilter
from textmine.filtering.stop_words import NoopFilter, StopWordFilter


class TokenFilterFactory:
    """Creates the configured token filter."""

    LEXICONS: tuple[str, ...] = ("english", "none")

    @classmethod
    def create(cls, settings: Settings) -> BaseTokenFilter:
        lexicon = settings.stop_words.lower()
        if lexicon == "english":
            return StopWordFilter.english(extra_words=settings.extra_stop_words)
        if lexicon == "none":
            if settings.extra_stop_words:
                return StopWordFilter(settings.extra_stop_words)
            return NoopFilter()
        raise ValueError(
            f"Unknown stop-word lexicon '{lexicon}'. Choose from: {list(cls.LEXICONS)}"
        )
