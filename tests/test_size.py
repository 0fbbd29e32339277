"""Tests for size string parsing."""

import pytest

from sqldump_splitter.size import parse_size


@pytest.mark.parametrize("text, expected", [
    ("2.5M", 2_500_000),
    ("2.5MI", 2_621_440),
    ("2.5mi", 2_621_440),
    ("10", 10),
    ("1k", 1000),
    ("1KI", 1024),
    ("3G", 3_000_000_000),
    ("1GI", 1024 ** 3),
    ("1.", 1),
    ("0.5K", 500),
])
def test_parse_size(text, expected):
    assert parse_size(text) == expected


@pytest.mark.parametrize("text", ["", "M", "2.5X", "-1M", "1.2.3", "2 M", "1MIB", "0", "0.0001K"])
def test_parse_size_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)
