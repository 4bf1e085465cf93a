"""Tokenization, lexicon lookup and sentiment aggregation."""

from .lexicons import (
    POLARITY_LABELS,
    LabelLexicon,
    Lexicon,
    ScoreLexicon,
    join_lexicons,
    load_label_lexicon,
    load_score_lexicon,
)
from .merge import FeatureMergeError, merge_review_features
from .sentiment import (
    MEAN_COLUMN,
    MEDIAN_COLUMN,
    SentimentAggregationError,
    aggregate_review_sentiment,
    count_columns,
)
from .tokenize import TOKEN_PATTERN, WORD_COLUMN, tokenize_reviews, tokenize_text
from .words import WORD_SUMMARY_COLUMNS, aggregate_words, compare_with_lexicon

__all__ = [
    'POLARITY_LABELS',
    'LabelLexicon',
    'Lexicon',
    'ScoreLexicon',
    'join_lexicons',
    'load_label_lexicon',
    'load_score_lexicon',
    'FeatureMergeError',
    'merge_review_features',
    'MEAN_COLUMN',
    'MEDIAN_COLUMN',
    'SentimentAggregationError',
    'aggregate_review_sentiment',
    'count_columns',
    'TOKEN_PATTERN',
    'WORD_COLUMN',
    'tokenize_reviews',
    'tokenize_text',
    'WORD_SUMMARY_COLUMNS',
    'aggregate_words',
    'compare_with_lexicon',
]
