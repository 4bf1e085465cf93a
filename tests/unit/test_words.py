from __future__ import annotations

import pandas as pd
import pytest

from book_review_sentiment.features.lexicons import LabelLexicon, ScoreLexicon
from book_review_sentiment.features.words import aggregate_words, compare_with_lexicon


def _tokens(rows):
    return pd.DataFrame(rows, columns=['review_id', 'rating', 'word'])


def test_word_with_enough_support_is_retained():
    tokens = _tokens(
        [
            (1, 1, 'unlikeable'),
            (2, 2, 'unlikeable'),
            (3, 2, 'unlikeable'),
            (1, 1, 'twist'),
            (4, 5, 'twist'),
        ],
    )

    words = aggregate_words(tokens, min_reviews=3)

    assert list(words.columns) == ['word', 'reviews', 'uses', 'average_rating']
    assert words['word'].tolist() == ['unlikeable']
    row = words.iloc[0]
    assert row['reviews'] == 3
    assert row['uses'] == 3
    assert row['average_rating'] == pytest.approx(5 / 3)


def test_review_weighting_counts_each_review_once():
    tokens = _tokens(
        [(1, 1, 'slow'), (1, 1, 'slow'), (1, 1, 'slow'), (2, 5, 'slow'), (3, 5, 'slow')],
    )

    by_review = aggregate_words(tokens, min_reviews=3, weighting='review')
    by_occurrence = aggregate_words(tokens, min_reviews=3, weighting='occurrence')

    assert by_review.loc[0, 'uses'] == 5
    assert by_review.loc[0, 'reviews'] == 3
    assert by_review.loc[0, 'average_rating'] == pytest.approx(11 / 3)
    assert by_occurrence.loc[0, 'average_rating'] == pytest.approx(13 / 5)


def test_sorted_by_average_rating_then_word():
    rows = []
    for review_id, rating in ((1, 4), (2, 4), (3, 4)):
        rows.extend([(review_id, rating, 'zeal'), (review_id, rating, 'able')])
    for review_id, rating in ((4, 1), (5, 2), (6, 3)):
        rows.append((review_id, rating, 'dull'))

    words = aggregate_words(_tokens(rows), min_reviews=3)

    assert words['word'].tolist() == ['dull', 'able', 'zeal']


def test_invalid_weighting():
    with pytest.raises(ValueError, match='weighting'):
        aggregate_words(_tokens([(1, 1, 'x')]), weighting='median')


def test_compare_with_lexicon_is_inner_join():
    words = pd.DataFrame(
        {
            'word': ['unlikeable', 'love', 'book'],
            'reviews': [3, 4, 5],
            'uses': [3, 6, 9],
            'average_rating': [1.6, 4.5, 3.2],
        },
    )
    lexicon = ScoreLexicon('afinn', {'love': 3, 'hate': -3})

    compared = compare_with_lexicon(words, lexicon)

    assert compared['word'].tolist() == ['love']
    assert compared['afinn'].tolist() == [3]


def test_compare_with_label_lexicon_keeps_word_order():
    words = pd.DataFrame(
        {
            'word': ['awful', 'plot', 'charming'],
            'reviews': [3, 8, 4],
            'uses': [3, 12, 5],
            'average_rating': [1.3, 3.1, 4.6],
        },
    )
    lexicon = LabelLexicon('bing', {'charming': 'positive', 'awful': 'negative'})

    compared = compare_with_lexicon(words, lexicon)

    assert list(compared.columns) == ['word', 'reviews', 'uses', 'average_rating', 'bing']
    assert compared['word'].tolist() == ['awful', 'charming']
    assert compared['bing'].tolist() == ['negative', 'positive']
