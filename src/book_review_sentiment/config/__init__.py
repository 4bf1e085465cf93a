"""Configuration utilities for book_review_sentiment."""

from .pipeline import (
    WEIGHTING_CHOICES,
    ColumnConfig,
    LanguageConfig,
    LengthConfig,
    LexiconConfig,
    PathConfig,
    PipelineConfig,
    WordConfig,
    load_pipeline_config,
)

__all__ = [
    'WEIGHTING_CHOICES',
    'ColumnConfig',
    'LanguageConfig',
    'LengthConfig',
    'LexiconConfig',
    'PathConfig',
    'PipelineConfig',
    'WordConfig',
    'load_pipeline_config',
]
