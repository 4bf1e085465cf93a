"""Language identification utilities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from ..common import LanguageClassifier
from ..utils import get_logger, json_log

if TYPE_CHECKING:
    import fasttext

log = get_logger(__name__)


class LanguageFilterError(RuntimeError):
    """Raised when language filtering cannot be completed."""


@lru_cache(maxsize=1)
def _load_fasttext_model(model_path: str) -> fasttext.FastText._FastText:
    """Load and cache the fastText language identification model."""
    path_obj = Path(model_path)
    if not path_obj.exists():
        raise FileNotFoundError(f'fastText model not found at: {path_obj}')
    import fasttext

    return fasttext.load_model(str(path_obj))


def _normalize_label(raw_label: Sequence[str] | Sequence[Sequence[str]]) -> str:
    """Extract the language code from fastText labels."""
    if not raw_label:
        return ''
    label = raw_label[0] if isinstance(raw_label[0], str) else raw_label[0][0]
    return label.replace('__label__', '') if label else ''


class FastTextLanguageClassifier:
    """Language classifier backed by the fastText ``lid.176.bin`` model."""

    def __init__(self, model_path: str | Path) -> None:
        self.model_path = Path(model_path)

    def classify(self, text: str) -> str:
        # fastText rejects newlines inside a single prediction.
        normalized = ' '.join(str(text).split())
        if not normalized:
            return ''
        model = _load_fasttext_model(str(self.model_path))
        labels, _ = model.predict(normalized, k=1)
        return _normalize_label(labels)


def filter_language(
    df: pd.DataFrame,
    classifier: LanguageClassifier,
    target_language: str = 'en',
    text_column: str = 'review',
) -> pd.DataFrame:
    """
    Keep only the rows whose text is classified as ``target_language``.

    Args:
        df: Review table.
        classifier: Anything implementing ``classify(text) -> str``.
        target_language: Language code to retain.
        text_column: Column holding the review text.

    Returns:
        A new frame with the surviving rows; the detected label is not kept.
    """
    if text_column not in df.columns:
        raise LanguageFilterError(f"Column '{text_column}' not found for language filter")

    texts = df[text_column].fillna('').astype(str)
    languages = pd.Series(
        [classifier.classify(text) for text in texts],
        index=df.index,
        dtype='object',
    )
    keep_mask = languages == target_language
    filtered = df.loc[keep_mask].copy()

    log.info(
        json_log(
            'language_filter.completed',
            component='data.language',
            rows_in=len(df),
            rows_out=len(filtered),
            rows_rejected=int((~keep_mask).sum()),
            kept_language=target_language,
        ),
    )
    if log.isEnabledFor(logging.DEBUG):
        counts = languages.loc[~keep_mask].value_counts().head(10)
        log.debug(
            json_log(
                'language_filter.rejected_languages',
                component='data.language',
                counts={str(k): int(v) for k, v in counts.items()},
            ),
        )
    return filtered
