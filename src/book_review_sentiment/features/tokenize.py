"""Split reviews into a one-row-per-word token table."""

from __future__ import annotations

import re

import pandas as pd

from ..data.cleaning import ID_COLUMN
from ..utils import get_logger, json_log

log = get_logger(__name__)

# Runs of letters/digits, allowing inner apostrophes ("don't", "author’s").
TOKEN_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*", flags=re.UNICODE)
WORD_COLUMN = 'word'


def tokenize_text(text: object) -> list[str]:
    """Return the lowercased word tokens of a single value; nulls yield none."""
    if not isinstance(text, str):
        if text is None or pd.isna(text):
            return []
        # Purely numeric review columns are parsed as numbers by read_csv.
        text = str(text)
    return TOKEN_PATTERN.findall(text.lower())


def tokenize_reviews(
    df: pd.DataFrame,
    text_column: str = 'review',
    rating_column: str = 'rating',
) -> pd.DataFrame:
    """
    Explode reviews into ``review_id``, ``rating``, ``word`` rows.

    Rows keep review order, then token order within each review. Reviews
    without any word token contribute no rows.
    """
    missing = [col for col in (ID_COLUMN, rating_column, text_column) if col not in df.columns]
    if missing:
        raise ValueError(f'Missing columns for tokenization: {missing}')

    tokens = df[[ID_COLUMN, rating_column]].copy()
    tokens[WORD_COLUMN] = df[text_column].map(tokenize_text)
    tokens = tokens.explode(WORD_COLUMN)
    tokens = tokens.loc[tokens[WORD_COLUMN].notna()].reset_index(drop=True)
    tokens[WORD_COLUMN] = tokens[WORD_COLUMN].astype(str)
    tokens[rating_column] = tokens[rating_column].astype('int64')
    tokens[ID_COLUMN] = tokens[ID_COLUMN].astype('int64')

    log.info(
        json_log(
            'tokenizer.completed',
            component='features.tokenize',
            reviews=len(df),
            tokens=len(tokens),
            distinct_words=int(tokens[WORD_COLUMN].nunique()),
        ),
    )
    return tokens
