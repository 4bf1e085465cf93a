from __future__ import annotations

from dataclasses import replace

import pandas as pd
import pytest

from book_review_sentiment.config import (
    LanguageConfig,
    LexiconConfig,
    PathConfig,
    PipelineConfig,
    WordConfig,
)
from book_review_sentiment.pipeline import run_sentiment_pipeline, run_word_summary


class KeywordClassifier:
    def classify(self, text):
        return 'es' if 'hola' in text.lower() else 'en'


@pytest.fixture()
def corpus(tmp_path):
    raw_csv = tmp_path / 'reviews.csv'
    pd.DataFrame(
        {
            'book': ['b1', 'b2', 'b3', 'b4', 'b5', 'b6', 'b7', 'b8'],
            'reviewer': ['r1', 'r2', 'r3', 'r4', 'r5', 'r6', 'r7', 'r8'],
            'rating': [
                'it was amazing',
                'did not like it',
                'currently reading',
                'liked it',
                'it was ok',
                'really liked it',
                'liked it',
                'it was amazing',
            ],
            'review': [
                'I love this book. Love it!',
                'Hola, no me gusto el libro',
                'Still reading this one',
                'Meh.',
                'The plot was boring and the ending was bad',
                'A book about the sea',
                'x' * 8000,
                '!!!!!!',
            ],
        },
    ).to_csv(raw_csv, index=False)
    return raw_csv


@pytest.fixture()
def config(tmp_path):
    lexicon_dir = tmp_path / 'lexicons'
    lexicon_dir.mkdir()
    afinn = lexicon_dir / 'AFINN-111.txt'
    afinn.write_text('love\t3\nboring\t-3\nbad\t-3\n', encoding='utf-8')
    bing = lexicon_dir / 'bing.csv'
    bing.write_text(
        'word,sentiment\nlove,positive\nboring,negative\nbad,negative\n',
        encoding='utf-8',
    )
    return PipelineConfig(
        paths=PathConfig(output_dir=tmp_path / 'processed'),
        lexicons=LexiconConfig(afinn_path=afinn, bing_path=bing),
        language=LanguageConfig(enabled=True, target='en', model_path=tmp_path / 'lid.bin'),
        words=WordConfig(min_reviews=2),
    )


def test_run_sentiment_pipeline_writes_enriched_reviews(corpus, config):
    result = run_sentiment_pipeline(corpus, config, classifier=KeywordClassifier())

    assert result.features_path == config.paths.output_dir / 'reviews.features.csv'
    features = pd.read_csv(result.features_path)
    assert list(features.columns) == [
        'book',
        'rating',
        'review',
        'review_id',
        'review_length',
        'mean_sentiment',
        'median_sentiment',
        'count_afinn_negative',
        'count_afinn_positive',
        'count_bing_negative',
        'count_bing_positive',
    ]
    assert features['book'].tolist() == ['b1', 'b5', 'b6', 'b8']
    assert features['review_id'].tolist() == [1, 2, 3, 4]
    assert features['rating'].tolist() == [5, 2, 4, 5]
    assert features['review_length'].between(5, 7999).all()
    assert result.reviews == 4

    first = features.iloc[0]
    assert first['mean_sentiment'] == pytest.approx(3.0)
    assert first['count_afinn_positive'] == 2
    assert first['count_bing_positive'] == 2

    second = features.iloc[1]
    assert second['median_sentiment'] == pytest.approx(-3.0)
    assert second['count_afinn_negative'] == 2
    assert second['count_bing_negative'] == 2

    for idx in (2, 3):
        row = features.iloc[idx]
        assert pd.isna(row['mean_sentiment'])
        assert pd.isna(row['median_sentiment'])
        assert row[['count_afinn_negative', 'count_afinn_positive']].tolist() == [0, 0]
        assert row[['count_bing_negative', 'count_bing_positive']].tolist() == [0, 0]


def test_run_sentiment_pipeline_writes_word_tables(corpus, config):
    result = run_sentiment_pipeline(corpus, config, classifier=KeywordClassifier())

    words = pd.read_csv(result.words_path)
    assert words['word'].tolist() == ['the', 'book']
    assert words['reviews'].tolist() == [2, 2]
    assert words['uses'].tolist() == [3, 2]
    assert words['average_rating'].tolist() == pytest.approx([3.0, 4.5])

    assert result.lexicon_words_path.name == 'reviews.words_afinn.csv'
    lexicon_words = pd.read_csv(result.lexicon_words_path)
    assert list(lexicon_words.columns) == ['word', 'reviews', 'uses', 'average_rating', 'afinn']
    assert lexicon_words.empty


def test_run_sentiment_pipeline_is_deterministic(corpus, config, tmp_path):
    first = run_sentiment_pipeline(
        corpus, config, output_dir=tmp_path / 'run1', classifier=KeywordClassifier()
    )
    second = run_sentiment_pipeline(
        corpus, config, output_dir=tmp_path / 'run2', classifier=KeywordClassifier()
    )

    assert first.features_path.read_bytes() == second.features_path.read_bytes()
    assert first.words_path.read_bytes() == second.words_path.read_bytes()


def test_run_sentiment_pipeline_without_language_filter(corpus, config):
    cfg = replace(config, language=LanguageConfig(enabled=False))

    result = run_sentiment_pipeline(corpus, cfg)

    features = pd.read_csv(result.features_path)
    assert 'b2' in features['book'].tolist()
    assert features['review_id'].tolist() == list(range(1, len(features) + 1))


def test_run_sentiment_pipeline_writes_nothing_on_failure(corpus, config):
    cfg = replace(config, lexicons=replace(config.lexicons, score_lexicon='vader'))

    with pytest.raises(ValueError, match='Score lexicon'):
        run_sentiment_pipeline(corpus, cfg, classifier=KeywordClassifier())

    assert not config.paths.output_dir.exists()


def test_run_word_summary_only(corpus, config, tmp_path):
    output = tmp_path / 'words.csv'

    result = run_word_summary(corpus, config, output_path=output, classifier=KeywordClassifier())

    assert result == output
    words = pd.read_csv(output)
    assert words['word'].tolist() == ['the', 'book']
