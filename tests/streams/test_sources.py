"""Tests for dump sources."""

import gzip
import tempfile
from pathlib import Path

from sqldump_splitter.streams.sources import is_compressed, open_source


def test_is_compressed_checks_suffix() -> None:
    assert is_compressed("dump.sql.gz")
    assert is_compressed(Path("/data/dump.gz"))
    assert not is_compressed("dump.sql")
    assert not is_compressed("dump.gzip")


class TestOpenSource:
    """Test cases for open_source."""

    def test_reads_plain_lines(self) -> None:
        """Test that a plain dump is read line by line."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "dump.sql"
            path.write_text("SELECT 1;\nSELECT 2;\n", encoding="utf-8")

            with open_source(path) as source:
                assert list(source) == ["SELECT 1;\n", "SELECT 2;\n"]

    def test_decompresses_gzip_by_suffix(self) -> None:
        """Test that a .gz dump is inflated transparently."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "dump.sql.gz"
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write("SELECT 1;\nSELECT 2;\n")

            with open_source(path) as source:
                assert list(source) == ["SELECT 1;\n", "SELECT 2;\n"]

    def test_splits_on_newline_only(self) -> None:
        """Test that carriage returns are kept and never end a line."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            plain = Path(tmp_dir) / "dump.sql"
            plain.write_bytes(b"SELECT 'a\rb';\r\nSELECT 2;\n")
            compressed = Path(tmp_dir) / "dump.sql.gz"
            with gzip.open(compressed, "wb") as f:
                f.write(b"SELECT 'a\rb';\r\nSELECT 2;\n")

            for path in (plain, compressed):
                with open_source(path) as source:
                    assert list(source) == ["SELECT 'a\rb';\r\n", "SELECT 2;\n"]

    def test_passes_through_undecodable_bytes(self) -> None:
        """Test that invalid UTF-8 does not abort reading."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "dump.sql"
            path.write_bytes(b"SELECT '\xe9';\n")

            with open_source(path) as source:
                lines = list(source)
            assert lines[0].encode("utf-8", "surrogateescape") == b"SELECT '\xe9';\n"
