import pytest

from src.fuzzysearch.metric import distance, normalize, similarity

PAIRS = [
    ("kitten", "sitting"),
    ("aple", "apple"),
    ("", "abc"),
    ("flaw", "lawn"),
    ("Designer", "desiner"),
]


def test_distance_classic_cases():
    assert distance("kitten", "sitting") == 3
    assert distance("flaw", "lawn") == 2
    assert distance("", "abc") == 3
    assert distance("abc", "abc") == 0


def test_distance_counts_code_points():
    # Each accented letter is one edit, not one per encoded byte
    assert distance("café", "cafe") == 1
    assert distance("naïve", "naive") == 1
    assert similarity("日本語", "日本") == pytest.approx(1 / 3)


@pytest.mark.parametrize("a, b", PAIRS)
def test_similarity_is_symmetric(a, b):
    assert similarity(a, b) == similarity(b, a)


@pytest.mark.parametrize("text", ["", "a", "apple", "Jane Smith"])
def test_similarity_identity(text):
    assert similarity(text, text) == 0


@pytest.mark.parametrize("a, b", PAIRS + [("abc", "xyz")])
def test_similarity_range(a, b):
    assert 0 <= similarity(a, b) <= 1


def test_similarity_is_distance_over_longer_length():
    assert similarity("aple", "apple") == pytest.approx(0.2)
    assert similarity("abc", "xyz") == 1.0


def test_empty_query_scores_one_against_text():
    assert similarity("", "") == 0
    assert similarity("", "apple") == 1.0


def test_normalize():
    assert normalize("APPLE") == "apple"
    assert normalize("APPLE", case_sensitive=True) == "APPLE"
