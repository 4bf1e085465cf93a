"""Config models and loaders for the sentiment pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import yaml

WEIGHTING_CHOICES = ('review', 'occurrence')


@dataclass(frozen=True)
class ColumnConfig:
    text: str = 'review'
    rating: str = 'rating'
    required: tuple[str, ...] = ('book', 'reviewer', 'rating', 'review')
    drop: tuple[str, ...] = ('reviewer',)


@dataclass(frozen=True)
class LanguageConfig:
    enabled: bool = True
    target: str = 'en'
    model_path: Path | None = None


@dataclass(frozen=True)
class LengthConfig:
    min_length: int = 5
    max_length: int = 8000


@dataclass(frozen=True)
class WordConfig:
    min_reviews: int = 3
    weighting: str = 'review'


@dataclass(frozen=True)
class LexiconConfig:
    afinn_path: Path
    bing_path: Path
    score_lexicon: str = 'afinn'


@dataclass(frozen=True)
class PathConfig:
    output_dir: Path


@dataclass(frozen=True)
class PipelineConfig:
    paths: PathConfig
    lexicons: LexiconConfig
    columns: ColumnConfig = field(default_factory=ColumnConfig)
    language: LanguageConfig = field(default_factory=LanguageConfig)
    length: LengthConfig = field(default_factory=LengthConfig)
    words: WordConfig = field(default_factory=WordConfig)


def load_pipeline_config(config_path: str | Path) -> PipelineConfig:
    """Load a pipeline config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    base_dir = cfg_path.parent

    paths_section = data.get('paths') or {}
    lexicon_section = data.get('lexicons') or {}
    column_section = data.get('columns') or {}
    language_section = data.get('language') or {}
    length_section = data.get('length') or {}
    word_section = data.get('words') or {}

    paths = PathConfig(
        output_dir=_resolve_path(
            base_dir,
            paths_section.get('output_dir', 'data/processed'),
        ),
    )

    afinn_path = lexicon_section.get('afinn_path')
    bing_path = lexicon_section.get('bing_path')
    if not afinn_path or not bing_path:
        raise ValueError('lexicons.afinn_path and lexicons.bing_path must be set')

    lexicons = LexiconConfig(
        afinn_path=_resolve_path(base_dir, afinn_path),
        bing_path=_resolve_path(base_dir, bing_path),
        score_lexicon=str(lexicon_section.get('score_lexicon', 'afinn')),
    )

    defaults = ColumnConfig()
    columns = ColumnConfig(
        text=str(column_section.get('text', defaults.text)),
        rating=str(column_section.get('rating', defaults.rating)),
        required=_ensure_tuple(column_section.get('required', defaults.required)),
        drop=_ensure_tuple(column_section.get('drop', defaults.drop)),
    )

    language_enabled = bool(language_section.get('enabled', True))
    model_path = language_section.get('model_path')
    if language_enabled and not model_path:
        raise ValueError('language.model_path must be set when language.enabled is true')

    language = LanguageConfig(
        enabled=language_enabled,
        target=str(language_section.get('target', 'en')),
        model_path=_resolve_optional_path(base_dir, model_path),
    )

    length = LengthConfig(
        min_length=int(length_section.get('min', 5)),
        max_length=int(length_section.get('max', 8000)),
    )
    if length.min_length < 0 or length.max_length <= length.min_length:
        raise ValueError(
            f'Invalid length band: min={length.min_length}, max={length.max_length}',
        )

    weighting = str(word_section.get('weighting', 'review'))
    if weighting not in WEIGHTING_CHOICES:
        raise ValueError(
            f"words.weighting must be one of {WEIGHTING_CHOICES}, got '{weighting}'",
        )
    words = WordConfig(
        min_reviews=int(word_section.get('min_reviews', 3)),
        weighting=weighting,
    )

    return PipelineConfig(
        paths=paths,
        lexicons=lexicons,
        columns=columns,
        language=language,
        length=length,
        words=words,
    )


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _resolve_optional_path(base: Path, value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base, value)


def _ensure_tuple(items: Iterable[str] | None) -> tuple[str, ...]:
    if not items:
        return tuple()
    return tuple(str(item) for item in items)
