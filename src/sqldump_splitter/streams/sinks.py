"""Output sinks for chunk files."""

import gzip
import os
from pathlib import Path
from types import TracebackType
from typing import Protocol, Self

from sqldump_splitter.config import Compression
from sqldump_splitter.streams.types import BUFFER_SIZE, ENCODING, ENCODING_ERRORS


class Sink(Protocol):
    """An open chunk file that reports how large it has grown."""

    path: Path

    def write(self, text: str) -> None: ...

    def size(self) -> int: ...

    def close(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class _SinkContext:
    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class PlainSink(_SinkContext):
    """
    Uncompressed chunk file.

    Size is the number of characters written so far, tracked in memory.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._handle = open(  # noqa: SIM115
            self.path,
            "w",
            encoding=ENCODING,
            errors=ENCODING_ERRORS,
            newline="",
            buffering=BUFFER_SIZE,
        )
        self._size = 0

    def write(self, text: str) -> None:
        self._handle.write(text)
        self._size += len(text)

    def size(self) -> int:
        return self._size

    def close(self) -> None:
        self._handle.close()


class GzipSink(_SinkContext):
    """
    Gzip-compressed chunk file.

    Every write is flushed through the compressor so that size() can report
    the real on-disk length of the file. Compressed size cannot be predicted
    from the input, so it is read back from the filesystem on each query.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._writer = gzip.open(self.path, "wb")  # noqa: SIM115

    def write(self, text: str) -> None:
        self._writer.write(text.encode(ENCODING, ENCODING_ERRORS))
        self._writer.flush()

    def size(self) -> int:
        return os.path.getsize(self.path)

    def close(self) -> None:
        self._writer.close()


def open_sink(path: str | Path, compression: Compression) -> Sink:
    """Open a new chunk file of the requested compression."""
    if compression is Compression.GZIP:
        return GzipSink(path)
    return PlainSink(path)
