"""Input/output helpers."""

from .files import CorpusLoadError, load_corpus, write_table

__all__ = ['CorpusLoadError', 'load_corpus', 'write_table']
