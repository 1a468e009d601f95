"""tf-idf scoring of token streams from novel corpora."""

__version__ = "0.1.0"
