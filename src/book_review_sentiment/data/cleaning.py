"""Rating and length validation for the review table."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from ..utils import get_logger, json_log

log = get_logger(__name__)

# Goodreads star phrases, weakest to strongest.
RATING_LABELS: dict[str, int] = {
    'did not like it': 1,
    'it was ok': 2,
    'liked it': 3,
    'really liked it': 4,
    'it was amazing': 5,
}

LENGTH_COLUMN = 'review_length'
ID_COLUMN = 'review_id'


def drop_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Drop specified columns, warning about names that are not present."""
    columns = list(columns)
    missing = [col for col in columns if col not in df.columns]
    if missing:
        log.warning(
            json_log(
                'drop_columns.missing',
                component='data.cleaning',
                missing=missing,
            )
        )
    present = [col for col in columns if col in df.columns]
    filtered = df.drop(columns=present)

    log.info(
        json_log(
            'drop_columns.completed',
            component='data.cleaning',
            columns_dropped=present,
            rows=len(filtered),
        )
    )
    return filtered


def normalize_ratings(df: pd.DataFrame, rating_column: str = 'rating') -> pd.DataFrame:
    """Map star phrases onto 1..5 and drop rows with any other rating value."""
    if rating_column not in df.columns:
        raise ValueError(f"Column '{rating_column}' not found for rating normalization")

    labels = df[rating_column]
    # Exact matches only; NaN and free text such as 'currently reading' fall out here.
    valid_mask = labels.isin(list(RATING_LABELS))
    filtered = df.loc[valid_mask].copy()
    filtered[rating_column] = filtered[rating_column].map(RATING_LABELS).astype('int64')

    dropped = labels.loc[~valid_mask]
    log.info(
        json_log(
            'rating_normalizer.completed',
            component='data.cleaning',
            rows_in=len(df),
            rows_out=len(filtered),
            rating_column=rating_column,
            dropped_labels={
                str(k): int(v) for k, v in dropped.fillna('<null>').value_counts().items()
            },
        ),
    )
    return filtered


def filter_review_length(
    df: pd.DataFrame,
    text_column: str = 'review',
    min_length: int = 5,
    max_length: int = 8000,
) -> pd.DataFrame:
    """
    Add ``review_length`` and keep reviews with ``min_length <= length < max_length``.

    The minimum filter runs first, then the maximum filter; both counts are logged.
    """
    if min_length < 0 or max_length <= min_length:
        raise ValueError(f'Invalid length band: min={min_length}, max={max_length}')
    if text_column not in df.columns:
        raise ValueError(f"Column '{text_column}' not found for length filter")

    measured = df.copy()
    measured[LENGTH_COLUMN] = measured[text_column].fillna('').astype(str).str.len()

    long_enough = measured.loc[measured[LENGTH_COLUMN] >= int(min_length)]
    filtered = long_enough.loc[long_enough[LENGTH_COLUMN] < int(max_length)].copy()

    log.info(
        json_log(
            'length_filter.completed',
            component='data.cleaning',
            rows_in=len(df),
            rows_out=len(filtered),
            dropped_short=len(measured) - len(long_enough),
            dropped_long=len(long_enough) - len(filtered),
            min_length=min_length,
            max_length=max_length,
        ),
    )
    return filtered


def assign_review_ids(df: pd.DataFrame) -> pd.DataFrame:
    """Number the surviving reviews 1..n in their current order."""
    identified = df.reset_index(drop=True)
    # review_id sits just before review_length when the length is already known.
    position = (
        identified.columns.get_loc(LENGTH_COLUMN)
        if LENGTH_COLUMN in identified.columns
        else len(identified.columns)
    )
    identified.insert(position, ID_COLUMN, range(1, len(identified) + 1))
    return identified
