"""Sentiment feature pipeline orchestration."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from ..common import LanguageClassifier
from ..config import PipelineConfig
from ..data import (
    FastTextLanguageClassifier,
    assign_review_ids,
    drop_columns,
    filter_language,
    filter_review_length,
    normalize_ratings,
)
from ..features import (
    Lexicon,
    aggregate_review_sentiment,
    aggregate_words,
    compare_with_lexicon,
    join_lexicons,
    load_label_lexicon,
    load_score_lexicon,
    merge_review_features,
    tokenize_reviews,
)
from ..io import load_corpus, write_table
from ..utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    features_path: Path
    words_path: Path
    lexicon_words_path: Path
    reviews: int
    tokens: int
    words: int


@dataclass(frozen=True)
class PipelineTables:
    reviews: pd.DataFrame
    tokens: pd.DataFrame
    summary: pd.DataFrame
    words: pd.DataFrame
    lexicon_words: pd.DataFrame


def load_lexicons(config: PipelineConfig) -> list[Lexicon]:
    """Load the AFINN score and Bing label lexicons named in the config."""
    return [
        load_score_lexicon(config.lexicons.afinn_path, name='afinn'),
        load_label_lexicon(config.lexicons.bing_path, name='bing'),
    ]


def build_classifier(config: PipelineConfig) -> LanguageClassifier:
    if config.language.model_path is None:
        raise ValueError('language.model_path is required for language filtering')
    return FastTextLanguageClassifier(config.language.model_path)


def clean_reviews(
    raw: pd.DataFrame,
    config: PipelineConfig,
    classifier: LanguageClassifier | None = None,
) -> pd.DataFrame:
    """Apply column drop, language, rating and length filters, then number reviews."""
    columns = config.columns
    reviews = drop_columns(raw, columns.drop)
    if config.language.enabled:
        reviews = filter_language(
            reviews,
            classifier=classifier or build_classifier(config),
            target_language=config.language.target,
            text_column=columns.text,
        )
    reviews = normalize_ratings(reviews, rating_column=columns.rating)
    reviews = filter_review_length(
        reviews,
        text_column=columns.text,
        min_length=config.length.min_length,
        max_length=config.length.max_length,
    )
    return assign_review_ids(reviews)


def build_feature_tables(
    raw: pd.DataFrame,
    config: PipelineConfig,
    lexicons: list[Lexicon],
    classifier: LanguageClassifier | None = None,
) -> PipelineTables:
    """Run every in-memory stage and return the resulting tables."""
    columns = config.columns
    cleaned = clean_reviews(raw, config, classifier=classifier)

    tokens = tokenize_reviews(cleaned, text_column=columns.text, rating_column=columns.rating)
    tokens = join_lexicons(tokens, lexicons)

    summary = aggregate_review_sentiment(
        tokens,
        lexicons,
        score_lexicon=config.lexicons.score_lexicon,
        rating_column=columns.rating,
    )
    enriched = merge_review_features(cleaned, summary, rating_column=columns.rating)

    words = aggregate_words(
        tokens,
        min_reviews=config.words.min_reviews,
        weighting=config.words.weighting,
        rating_column=columns.rating,
    )
    score_lexicon = next(
        lexicon for lexicon in lexicons if lexicon.name == config.lexicons.score_lexicon
    )
    lexicon_words = compare_with_lexicon(words, score_lexicon)

    return PipelineTables(
        reviews=enriched,
        tokens=tokens,
        summary=summary,
        words=words,
        lexicon_words=lexicon_words,
    )


def run_sentiment_pipeline(
    input_path: str | Path,
    config: PipelineConfig,
    output_dir: str | Path | None = None,
    classifier: LanguageClassifier | None = None,
) -> PipelineResult:
    """Compute review and word sentiment features and write them as CSVs.

    Nothing is written unless every stage succeeds.
    """
    source_path = Path(input_path).resolve()
    start = time.perf_counter()
    log.info(
        json_log(
            'pipeline.start',
            component='pipeline.sentiment',
            input=str(source_path),
        ),
    )

    raw = load_corpus(source_path, required_columns=config.columns.required)
    lexicons = load_lexicons(config)
    tables = build_feature_tables(raw, config, lexicons, classifier=classifier)

    target_dir = Path(output_dir).resolve() if output_dir else config.paths.output_dir
    stem = source_path.stem
    suffix = source_path.suffix or '.csv'
    score_name = config.lexicons.score_lexicon

    features_path = write_table(tables.reviews, target_dir / f'{stem}.features{suffix}')
    words_path = write_table(tables.words, target_dir / f'{stem}.words{suffix}')
    lexicon_words_path = write_table(
        tables.lexicon_words,
        target_dir / f'{stem}.words_{score_name}{suffix}',
    )

    duration = time.perf_counter() - start
    log.info(
        json_log(
            'pipeline.completed',
            component='pipeline.sentiment',
            input=str(source_path),
            rows_in=len(raw),
            reviews=len(tables.reviews),
            tokens=len(tables.tokens),
            words=len(tables.words),
            output_dir=str(target_dir),
            duration_seconds=duration,
        ),
    )
    return PipelineResult(
        features_path=features_path,
        words_path=words_path,
        lexicon_words_path=lexicon_words_path,
        reviews=len(tables.reviews),
        tokens=len(tables.tokens),
        words=len(tables.words),
    )


def run_word_summary(
    input_path: str | Path,
    config: PipelineConfig,
    output_path: str | Path | None = None,
    classifier: LanguageClassifier | None = None,
) -> Path:
    """Clean and tokenize a corpus and write only the word summary table."""
    source_path = Path(input_path).resolve()
    raw = load_corpus(source_path, required_columns=config.columns.required)
    cleaned = clean_reviews(raw, config, classifier=classifier)
    tokens = tokenize_reviews(
        cleaned,
        text_column=config.columns.text,
        rating_column=config.columns.rating,
    )
    words = aggregate_words(
        tokens,
        min_reviews=config.words.min_reviews,
        weighting=config.words.weighting,
        rating_column=config.columns.rating,
    )
    target = (
        Path(output_path).resolve()
        if output_path
        else config.paths.output_dir / f'{source_path.stem}.words{source_path.suffix or ".csv"}'
    )
    return write_table(words, target)
