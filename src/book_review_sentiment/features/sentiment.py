"""Per-review sentiment statistics from the lexicon-joined token table."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..data.cleaning import ID_COLUMN
from ..utils import get_logger, json_log
from .lexicons import Lexicon

log = get_logger(__name__)

MEAN_COLUMN = 'mean_sentiment'
MEDIAN_COLUMN = 'median_sentiment'


class SentimentAggregationError(RuntimeError):
    """Raised when the token table violates the review-level invariants."""


def count_columns(lexicon_name: str) -> tuple[str, str]:
    """Return the (negative, positive) count column names for a lexicon."""
    return f'count_{lexicon_name}_negative', f'count_{lexicon_name}_positive'


def aggregate_review_sentiment(
    tokens: pd.DataFrame,
    lexicons: Sequence[Lexicon],
    score_lexicon: str = 'afinn',
    rating_column: str = 'rating',
) -> pd.DataFrame:
    """
    Summarize lexicon matches per review.

    Args:
        tokens: Token table already joined with every lexicon in ``lexicons``.
        lexicons: Lexicons whose negative/positive words are counted.
        score_lexicon: Name of the lexicon whose values feed mean and median.
        rating_column: Rating column carried through from the review table.

    Returns:
        One row per ``review_id`` (ascending) with rating, mean and median
        sentiment (NaN when no token matched) and integer counts (0 when no
        token matched).
    """
    names = [lexicon.name for lexicon in lexicons]
    if score_lexicon not in names:
        raise ValueError(f"Score lexicon '{score_lexicon}' not among lexicons {names}")
    missing = [col for col in (ID_COLUMN, rating_column, *names) if col not in tokens.columns]
    if missing:
        raise ValueError(f'Token table missing columns: {missing}')

    review_ids = tokens[ID_COLUMN]
    grouped = tokens.groupby(ID_COLUMN, sort=True)

    ratings_per_review = grouped[rating_column].nunique()
    conflicting = ratings_per_review.loc[ratings_per_review > 1]
    if not conflicting.empty:
        raise SentimentAggregationError(
            f'Reviews with more than one rating: {conflicting.index.tolist()[:10]}',
        )

    summary = grouped[rating_column].first().to_frame()

    scores = tokens[score_lexicon].astype('float64')
    score_groups = scores.groupby(review_ids, sort=True)
    summary[MEAN_COLUMN] = score_groups.mean()
    summary[MEDIAN_COLUMN] = score_groups.median()

    for lexicon in lexicons:
        negative_column, positive_column = count_columns(lexicon.name)
        polarity = lexicon.polarity(tokens[lexicon.name])
        summary[negative_column] = (polarity < 0).groupby(review_ids, sort=True).sum()
        summary[positive_column] = (polarity > 0).groupby(review_ids, sort=True).sum()
        summary[[negative_column, positive_column]] = summary[
            [negative_column, positive_column]
        ].astype('int64')

    summary = summary.reset_index()

    log.info(
        json_log(
            'review_aggregator.completed',
            component='features.sentiment',
            reviews=len(summary),
            reviews_without_score=int(summary[MEAN_COLUMN].isna().sum()),
            score_lexicon=score_lexicon,
        ),
    )
    return summary
