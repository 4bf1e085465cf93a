"""Pipeline helpers."""

from .sentiment import (
    PipelineResult,
    PipelineTables,
    build_feature_tables,
    clean_reviews,
    load_lexicons,
    run_sentiment_pipeline,
    run_word_summary,
)

__all__ = [
    'PipelineResult',
    'PipelineTables',
    'build_feature_tables',
    'clean_reviews',
    'load_lexicons',
    'run_sentiment_pipeline',
    'run_word_summary',
]
