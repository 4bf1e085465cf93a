"""Corpus-wide word statistics."""

from __future__ import annotations

import pandas as pd

from ..data.cleaning import ID_COLUMN
from ..utils import get_logger, json_log
from .lexicons import Lexicon
from .tokenize import WORD_COLUMN

log = get_logger(__name__)

WORD_SUMMARY_COLUMNS = (WORD_COLUMN, 'reviews', 'uses', 'average_rating')


def aggregate_words(
    tokens: pd.DataFrame,
    min_reviews: int = 3,
    weighting: str = 'review',
    rating_column: str = 'rating',
) -> pd.DataFrame:
    """
    Count reviews and uses per word and average the ratings of those reviews.

    ``weighting='review'`` averages one rating per distinct review containing
    the word; ``'occurrence'`` averages one rating per token, so a review that
    repeats a word counts once per repetition. Words found in fewer than
    ``min_reviews`` reviews are dropped. Sorted by average rating, then word.
    """
    if weighting not in ('review', 'occurrence'):
        raise ValueError(f"weighting must be 'review' or 'occurrence', got '{weighting}'")

    per_review = (
        tokens.groupby([WORD_COLUMN, ID_COLUMN], sort=True)
        .agg(uses=(rating_column, 'size'), **{rating_column: (rating_column, 'first')})
        .reset_index()
    )
    grouped = per_review.groupby(WORD_COLUMN, sort=True)
    summary = grouped.agg(reviews=(ID_COLUMN, 'size'), uses=('uses', 'sum'))

    if weighting == 'review':
        summary['average_rating'] = grouped[rating_column].mean()
    else:
        weighted = per_review[rating_column] * per_review['uses']
        summary['average_rating'] = weighted.groupby(per_review[WORD_COLUMN]).sum() / summary['uses']

    supported = summary.loc[summary['reviews'] >= int(min_reviews)].reset_index()
    supported = supported.sort_values(
        ['average_rating', WORD_COLUMN],
        kind='mergesort',
    ).reset_index(drop=True)
    supported = supported[list(WORD_SUMMARY_COLUMNS)]

    log.info(
        json_log(
            'word_aggregator.completed',
            component='features.words',
            distinct_words=len(summary),
            words_retained=len(supported),
            min_reviews=min_reviews,
            weighting=weighting,
        ),
    )
    return supported


def compare_with_lexicon(words: pd.DataFrame, lexicon: Lexicon) -> pd.DataFrame:
    """Inner-join a word summary with a lexicon; words absent from it are dropped."""
    entries = pd.DataFrame(list(lexicon.entries.items()), columns=[WORD_COLUMN, lexicon.name])
    return words.merge(entries, on=WORD_COLUMN, how='inner').reset_index(drop=True)
