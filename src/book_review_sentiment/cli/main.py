"""Command-line interface for book_review_sentiment."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from ..config import PipelineConfig, load_pipeline_config
from ..pipeline import run_sentiment_pipeline, run_word_summary
from ..utils import get_logger, json_log

app = typer.Typer(help='Book review sentiment features CLI', no_args_is_help=True)
pipeline_app = typer.Typer(help='Pipeline commands', no_args_is_help=True)
app.add_typer(pipeline_app, name='pipeline')

log = get_logger(__name__)

ConfigOption = Annotated[
    Path,
    typer.Option(
        '--config',
        '-c',
        exists=True,
        readable=True,
        help='Path to pipeline configuration YAML.',
    ),
]
InputOption = Annotated[
    Path,
    typer.Option(
        '--input',
        '-i',
        exists=True,
        readable=True,
        help='Path to raw review CSV.',
    ),
]


def _apply_overrides(
    config: PipelineConfig,
    language: str | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
    min_reviews: int | None = None,
) -> PipelineConfig:
    if language is not None:
        config = replace(config, language=replace(config.language, target=language))
    length_overrides: dict[str, int] = {}
    if min_length is not None:
        length_overrides['min_length'] = min_length
    if max_length is not None:
        length_overrides['max_length'] = max_length
    if length_overrides:
        config = replace(config, length=replace(config.length, **length_overrides))
    if min_reviews is not None:
        config = replace(config, words=replace(config.words, min_reviews=min_reviews))
    return config


@pipeline_app.command('run')
def run(
    input_csv: InputOption,
    config: ConfigOption = Path('configs/pipeline.yaml'),
    output_dir: Annotated[
        Path | None,
        typer.Option(
            '--output-dir',
            '-o',
            help='Directory for result CSVs. Defaults to paths.output_dir from the config.',
        ),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option('--language', help='Target language code (default: en).'),
    ] = None,
    min_length: Annotated[
        int | None,
        typer.Option('--min-length', help='Drop reviews shorter than this many characters.'),
    ] = None,
    max_length: Annotated[
        int | None,
        typer.Option('--max-length', help='Drop reviews of at least this many characters.'),
    ] = None,
    min_reviews: Annotated[
        int | None,
        typer.Option('--min-reviews', help='Minimum distinct reviews per summarized word.'),
    ] = None,
) -> None:
    """Compute review-level and word-level sentiment features."""
    log.info(
        json_log(
            'cli.run.start',
            component='cli',
            input=str(input_csv),
            config=str(config),
            output_override=str(output_dir) if output_dir else None,
        ),
    )
    cfg = load_pipeline_config(config)
    cfg = _apply_overrides(
        cfg,
        language=language,
        min_length=min_length,
        max_length=max_length,
        min_reviews=min_reviews,
    )
    result = run_sentiment_pipeline(
        input_path=input_csv,
        config=cfg,
        output_dir=output_dir,
    )

    log.info(
        json_log(
            'cli.run.completed',
            component='cli',
            output=str(result.features_path),
            reviews=result.reviews,
        ),
    )
    typer.echo(f'Review features written to: {result.features_path}')
    typer.echo(f'Word summary written to: {result.words_path}')


@pipeline_app.command('words')
def words(
    input_csv: InputOption,
    config: ConfigOption = Path('configs/pipeline.yaml'),
    output: Annotated[
        Path | None,
        typer.Option(
            '--output',
            '-o',
            help='Output CSV path (default: <output_dir>/<name>.words.csv).',
        ),
    ] = None,
    min_reviews: Annotated[
        int | None,
        typer.Option('--min-reviews', help='Minimum distinct reviews per summarized word.'),
    ] = None,
) -> None:
    """Write only the word-level summary for a corpus."""
    cfg = _apply_overrides(load_pipeline_config(config), min_reviews=min_reviews)
    result_path = run_word_summary(input_path=input_csv, config=cfg, output_path=output)
    typer.echo(f'Word summary written to: {result_path}')


if __name__ == '__main__':
    app()
