"""Attach review-level sentiment features to the cleaned review table."""

from __future__ import annotations

import pandas as pd

from ..data.cleaning import ID_COLUMN
from ..utils import get_logger, json_log
from .sentiment import MEAN_COLUMN, MEDIAN_COLUMN

log = get_logger(__name__)


class FeatureMergeError(RuntimeError):
    """Raised when a feature join would change the review row count."""


def merge_review_features(
    reviews: pd.DataFrame,
    summary: pd.DataFrame,
    rating_column: str = 'rating',
) -> pd.DataFrame:
    """
    Left-join mean, median and every count column of ``summary`` onto ``reviews``.

    Each feature is joined separately on ``review_id``; the row count of
    ``reviews`` is checked after every join. Reviews with no tokens keep NaN
    mean/median and get 0 counts.
    """
    if ID_COLUMN not in reviews.columns or ID_COLUMN not in summary.columns:
        raise FeatureMergeError(f"Both tables need a '{ID_COLUMN}' column")

    # Rating already lives on the review table.
    features = summary.drop(columns=[rating_column], errors='ignore')
    count_columns = [col for col in features.columns if col.startswith('count_')]
    feature_columns = [MEAN_COLUMN, MEDIAN_COLUMN, *count_columns]

    enriched = reviews
    expected_rows = len(reviews)
    for column in feature_columns:
        if column not in features.columns:
            raise FeatureMergeError(f"Feature column '{column}' missing from summary")
        enriched = enriched.merge(
            features[[ID_COLUMN, column]],
            on=ID_COLUMN,
            how='left',
            validate='one_to_one',
        )
        if len(enriched) != expected_rows:
            raise FeatureMergeError(
                f"Joining '{column}' changed row count from {expected_rows} to {len(enriched)}",
            )

    if count_columns:
        enriched[count_columns] = enriched[count_columns].fillna(0).astype('int64')

    log.info(
        json_log(
            'feature_merge.completed',
            component='features.merge',
            rows=len(enriched),
            features=feature_columns,
            reviews_without_tokens=int((~reviews[ID_COLUMN].isin(features[ID_COLUMN])).sum()),
        ),
    )
    return enriched
