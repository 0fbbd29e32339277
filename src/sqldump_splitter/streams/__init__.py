"""Input sources and output sinks for dump files."""

from sqldump_splitter.streams.sinks import GzipSink, PlainSink, Sink, open_sink
from sqldump_splitter.streams.sources import is_compressed, open_source

__all__ = [
    "GzipSink",
    "PlainSink",
    "Sink",
    "is_compressed",
    "open_sink",
    "open_source",
]
