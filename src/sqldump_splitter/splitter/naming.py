"""Naming of numbered chunk files."""

from pathlib import Path

from sqldump_splitter.config import GZIP_SUFFIX, Compression


class FileNumbering:
    """
    Produces chunk names of the form <base>-NN.<extension> for one run.

    The file name is split on its first dot. In plain mode a trailing .gz is
    removed from the extension, in gzip mode one is added if missing. Every
    call to next_name() consumes the current counter value, so names never
    repeat within a run. Numbers past 99 simply grow wider.
    """

    def __init__(self, filename: str | Path, compression: Compression):
        source = Path(filename)
        self._parent = source.parent
        self._compression = compression
        self.counter = 0

        base, dot, extension = source.name.partition(".")
        self._base = base
        self._extension = self._chunk_extension(extension if dot else None)

    def _chunk_extension(self, extension: str | None) -> str:
        gzip_mode = self._compression is Compression.GZIP

        if extension is None:
            return GZIP_SUFFIX if gzip_mode else ""

        if not gzip_mode and extension.endswith(GZIP_SUFFIX):
            extension = extension.removesuffix(GZIP_SUFFIX)
        if gzip_mode and not extension.endswith(GZIP_SUFFIX):
            extension += GZIP_SUFFIX
        return f".{extension}"

    def next_name(self) -> Path:
        """Return the next chunk path and advance the counter."""
        name = f"{self._base}-{self.counter:02d}{self._extension}"
        self.counter += 1
        return self._parent / name
