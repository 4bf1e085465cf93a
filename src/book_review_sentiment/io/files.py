"""File utilities for reading the corpus and writing result tables."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from ..utils import get_logger, json_log

log = get_logger(__name__)


class CorpusLoadError(ValueError):
    """Raised when the review corpus cannot be read or lacks required columns."""


def load_corpus(
    input_csv: str | Path,
    required_columns: Iterable[str] = (),
) -> pd.DataFrame:
    """Read the raw review CSV; columns are returned untouched."""
    input_path = Path(input_csv)
    if not input_path.exists():
        raise FileNotFoundError(f'Input CSV not found: {input_path}')

    try:
        df = pd.read_csv(input_path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(f'Could not parse {input_path}: {exc}') from exc

    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise CorpusLoadError(f'Missing required columns in {input_path.name}: {missing}')

    log.info(
        json_log(
            'corpus.loaded',
            component='io.files',
            input=str(input_path),
            rows=len(df),
            columns=list(df.columns),
        ),
    )
    return df


def write_table(df: pd.DataFrame, output_path: str | Path) -> Path:
    """Write a table as CSV, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    log.info(
        json_log(
            'table.written',
            component='io.files',
            output=str(output_path),
            rows=len(df),
        ),
    )
    return output_path
