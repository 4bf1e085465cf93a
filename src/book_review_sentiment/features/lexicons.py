"""Sentiment lexicons and their join onto the token table."""

from __future__ import annotations

import csv
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd

from ..utils import get_logger, json_log
from .tokenize import WORD_COLUMN

log = get_logger(__name__)

POLARITY_LABELS = {'negative': -1.0, 'neutral': 0.0, 'positive': 1.0}
_HEADERLESS_SUFFIXES = {'.txt', '.tsv'}


class Lexicon(ABC):
    """A read-only word -> value mapping with a notion of polarity."""

    value_column = 'value'

    def __init__(self, name: str, entries: Mapping[str, Any]) -> None:
        self.name = name
        self._entries = dict(entries)

    @property
    def entries(self) -> Mapping[str, Any]:
        return MappingProxyType(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __repr__(self) -> str:
        return f'{type(self).__name__}(name={self.name!r}, words={len(self)})'

    def lookup(self, word: str) -> Any | None:
        """Return the entry for ``word`` or None when it is not in the lexicon."""
        return self._entries.get(word)

    def values_for(self, words: pd.Series) -> pd.Series:
        """Vectorized lookup; unmatched words become null."""
        return words.map(self._entries)

    @abstractmethod
    def polarity(self, values: pd.Series) -> pd.Series:
        """Map looked-up values to -1.0/0.0/+1.0, NaN where unmatched."""


class ScoreLexicon(Lexicon):
    """Signed integer scores, e.g. AFINN (-5..+5)."""

    def values_for(self, words: pd.Series) -> pd.Series:
        return super().values_for(words).astype('float64')

    def polarity(self, values: pd.Series) -> pd.Series:
        return np.sign(values.astype('float64'))


class LabelLexicon(Lexicon):
    """Categorical polarity labels, e.g. Bing (positive/negative)."""

    value_column = 'sentiment'

    def values_for(self, words: pd.Series) -> pd.Series:
        return super().values_for(words).astype('object')

    def polarity(self, values: pd.Series) -> pd.Series:
        return values.map(POLARITY_LABELS).astype('float64')


def _read_lexicon_table(path: Path, value_column: str) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f'Lexicon file not found: {path}')
    if path.suffix.lower() in _HEADERLESS_SUFFIXES:
        # AFINN distribution format: "word<TAB>score", no header.
        table = pd.read_csv(
            path,
            sep='\t',
            header=None,
            names=[WORD_COLUMN, value_column],
            quoting=csv.QUOTE_NONE,
            keep_default_na=False,
        )
    else:
        table = pd.read_csv(path, keep_default_na=False)
    missing = [col for col in (WORD_COLUMN, value_column) if col not in table.columns]
    if missing:
        raise ValueError(f'Lexicon {path.name} is missing columns: {missing}')

    table = table[[WORD_COLUMN, value_column]].copy()
    table[WORD_COLUMN] = table[WORD_COLUMN].astype(str).str.strip().str.lower()
    table = table.loc[table[WORD_COLUMN] != '']
    return table


def _dedupe(table: pd.DataFrame, name: str, path: Path) -> pd.DataFrame:
    duplicated = table[WORD_COLUMN].duplicated(keep='first')
    if duplicated.any():
        log.warning(
            json_log(
                'lexicon.duplicate_words',
                component='features.lexicons',
                lexicon=name,
                path=str(path),
                count=int(duplicated.sum()),
                examples=table.loc[duplicated, WORD_COLUMN].head(5).tolist(),
            ),
        )
    return table.loc[~duplicated]


def load_score_lexicon(path: str | Path, name: str = 'afinn') -> ScoreLexicon:
    """Load a ``word,value`` lexicon of signed integer scores."""
    lexicon_path = Path(path)
    table = _read_lexicon_table(lexicon_path, ScoreLexicon.value_column)
    scores = pd.to_numeric(table[ScoreLexicon.value_column], errors='coerce')
    if scores.isna().any():
        bad = table.loc[scores.isna(), WORD_COLUMN].head(5).tolist()
        raise ValueError(f'Non-numeric scores in lexicon {lexicon_path.name}: {bad}')
    table = table.assign(**{ScoreLexicon.value_column: scores.astype('int64')})
    table = _dedupe(table, name, lexicon_path)

    lexicon = ScoreLexicon(
        name,
        dict(zip(table[WORD_COLUMN], table[ScoreLexicon.value_column].astype(int))),
    )
    _log_loaded(lexicon, lexicon_path)
    return lexicon


def load_label_lexicon(path: str | Path, name: str = 'bing') -> LabelLexicon:
    """Load a ``word,sentiment`` lexicon of positive/negative/neutral labels."""
    lexicon_path = Path(path)
    table = _read_lexicon_table(lexicon_path, LabelLexicon.value_column)
    labels = table[LabelLexicon.value_column].astype(str).str.strip().str.lower()
    unknown = ~labels.isin(list(POLARITY_LABELS))
    if unknown.any():
        raise ValueError(
            f'Unknown polarity labels in lexicon {lexicon_path.name}: '
            f'{sorted(labels.loc[unknown].unique().tolist())[:5]}'
        )
    table = table.assign(**{LabelLexicon.value_column: labels})
    table = _dedupe(table, name, lexicon_path)

    lexicon = LabelLexicon(
        name,
        dict(zip(table[WORD_COLUMN], table[LabelLexicon.value_column])),
    )
    _log_loaded(lexicon, lexicon_path)
    return lexicon


def _log_loaded(lexicon: Lexicon, path: Path) -> None:
    log.info(
        json_log(
            'lexicon.loaded',
            component='features.lexicons',
            lexicon=lexicon.name,
            kind=type(lexicon).__name__,
            path=str(path),
            words=len(lexicon),
        ),
    )


def join_lexicons(tokens: pd.DataFrame, lexicons: Iterable[Lexicon]) -> pd.DataFrame:
    """Left-join each lexicon onto the tokens as a column named after it."""
    if WORD_COLUMN not in tokens.columns:
        raise ValueError(f"Column '{WORD_COLUMN}' not found in token table")

    joined = tokens.copy()
    for lexicon in lexicons:
        if lexicon.name in joined.columns:
            raise ValueError(f"Lexicon name '{lexicon.name}' collides with an existing column")
        joined[lexicon.name] = lexicon.values_for(joined[WORD_COLUMN])
        log.info(
            json_log(
                'lexicon.joined',
                component='features.lexicons',
                lexicon=lexicon.name,
                tokens=len(joined),
                matched=int(joined[lexicon.name].notna().sum()),
            ),
        )
    return joined
