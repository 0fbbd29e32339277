"""Tests for run configuration."""

import dataclasses

import pytest

from sqldump_splitter.config import Compression, SplitConfig


def test_defaults_to_plain() -> None:
    config = SplitConfig("dump.sql", 100)
    assert config.compression is Compression.PLAIN


def test_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        SplitConfig("dump.sql", 0)
    with pytest.raises(ValueError):
        SplitConfig("dump.sql", -5)


def test_is_immutable() -> None:
    config = SplitConfig("dump.sql", 100, Compression.GZIP)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_chunk_bytes = 5
