"""Common interfaces shared across pipeline stages."""

from .protocols import LanguageClassifier

__all__ = ['LanguageClassifier']
