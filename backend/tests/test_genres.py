"""Tests for genre input normalization."""

import pytest

from booknotes.shared.core.exceptions import ValidationError
from booknotes.shared.utils.genres import parse_genres


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("", []),
        ("self-help", ["self-help"]),
        ("self-help, psychology", ["self-help", "psychology"]),
        (" fiction ,\n sci-fi \r\n\n, ,", ["fiction", "sci-fi"]),
        (["  history ", "", "  ", "war"], ["history", "war"]),
        (["Fiction", "fiction"], ["Fiction", "fiction"]),
    ],
)
def test_parse_genres_normalizes_input(raw, expected):
    assert parse_genres(raw) == expected


def test_parse_genres_keeps_first_ten():
    raw = ",".join(f"g{i}" for i in range(15))

    assert parse_genres(raw) == [f"g{i}" for i in range(10)]


def test_parse_genres_rejects_non_string_entries():
    with pytest.raises(ValidationError):
        parse_genres(["fiction", 3])


def test_parse_genres_rejects_other_types():
    with pytest.raises(ValidationError):
        parse_genres({"genre": "fiction"})
