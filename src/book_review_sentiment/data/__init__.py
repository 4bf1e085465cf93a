"""Review table cleaning and filtering."""

from .cleaning import (
    ID_COLUMN,
    LENGTH_COLUMN,
    RATING_LABELS,
    assign_review_ids,
    drop_columns,
    filter_review_length,
    normalize_ratings,
)
from .language import FastTextLanguageClassifier, LanguageFilterError, filter_language

__all__ = [
    'ID_COLUMN',
    'LENGTH_COLUMN',
    'RATING_LABELS',
    'assign_review_ids',
    'drop_columns',
    'filter_review_length',
    'normalize_ratings',
    'FastTextLanguageClassifier',
    'LanguageFilterError',
    'filter_language',
]
