"""Lexicon sentiment features for book review corpora."""

__version__ = '0.1.0'
