"""Line-oriented readers for plain and gzip-compressed dumps."""

import gzip
from pathlib import Path
from typing import TextIO

from sqldump_splitter.config import GZIP_SUFFIX
from sqldump_splitter.streams.types import BUFFER_SIZE, ENCODING, ENCODING_ERRORS, NEWLINE


def is_compressed(path: str | Path) -> bool:
    """Whether the source is read through gzip, judged by its file name."""
    return Path(path).name.endswith(GZIP_SUFFIX)


def open_source(path: str | Path) -> TextIO:
    """
    Open a dump for sequential line reading.

    Files ending in .gz are decompressed transparently. Lines end at '\\n'
    only; a '\\r' is kept as ordinary text. The returned handle is a text
    stream and must be closed by the caller.
    """
    if is_compressed(path):
        return gzip.open(
            path, "rt", encoding=ENCODING, errors=ENCODING_ERRORS, newline=NEWLINE
        )
    return open(  # noqa: SIM115
        path,
        encoding=ENCODING,
        errors=ENCODING_ERRORS,
        newline=NEWLINE,
        buffering=BUFFER_SIZE,
    )
