from textmine.filtering.base import BaseTokenFilter
from textmine.filtering.factory import TokenFilterFactory
from textmine.filtering.stop_words import NoopFilter, StopWordFilter

__all__ = ["BaseTokenFilter", "NoopFilter", "StopWordFilter", "TokenFilterFactory"]
