from __future__ import annotations

import pandas as pd
import pytest

from book_review_sentiment.features.tokenize import tokenize_reviews, tokenize_text


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('I loved this Book!', ['i', 'loved', 'this', 'book']),
        ("Don't skip the author's notes.", ["don't", 'skip', 'the', "author's", 'notes']),
        ('well-written, fast-paced', ['well', 'written', 'fast', 'paced']),
        ('5 stars... really', ['5', 'stars', 'really']),
        ('Café crème', ['café', 'crème']),
        ('', []),
        ('?!... --- ***', []),
        (None, []),
        (float('nan'), []),
        (123456, ['123456']),
    ],
)
def test_tokenize_text(text, expected):
    assert tokenize_text(text) == expected


def test_tokenize_reviews_one_row_per_word():
    reviews = pd.DataFrame(
        {
            'book': ['b1', 'b2', 'b3'],
            'rating': [5, 1, 3],
            'review': ['Great, great read.', '!!!!!', 'Meh'],
            'review_id': [1, 2, 3],
        },
    )

    tokens = tokenize_reviews(reviews)

    assert list(tokens.columns) == ['review_id', 'rating', 'word']
    assert tokens['review_id'].tolist() == [1, 1, 1, 3]
    assert tokens['rating'].tolist() == [5, 5, 5, 3]
    assert tokens['word'].tolist() == ['great', 'great', 'read', 'meh']
    assert tokens.index.tolist() == [0, 1, 2, 3]


def test_tokenize_reviews_counts_match_word_counts():
    texts = ['one two three', 'four, five; six seven.', 'eight']
    reviews = pd.DataFrame(
        {'review': texts, 'rating': [1, 2, 3], 'review_id': [1, 2, 3]},
    )

    tokens = tokenize_reviews(reviews)

    assert tokens.groupby('review_id').size().tolist() == [3, 4, 1]


def test_tokenize_reviews_requires_review_id():
    with pytest.raises(ValueError, match='review_id'):
        tokenize_reviews(pd.DataFrame({'review': ['x'], 'rating': [1]}))


def test_tokenize_reviews_numeric_text_column():
    reviews = pd.DataFrame(
        {'review': [123456, 777777], 'rating': [4, 2], 'review_id': [1, 2]},
    )

    tokens = tokenize_reviews(reviews)

    assert tokens['review_id'].tolist() == [1, 2]
    assert tokens['word'].tolist() == ['123456', '777777']
