"""Splitting engine: streams statements from a dump into size-bounded chunks."""

import logging
import time
from pathlib import Path

from sqldump_splitter.config import SplitConfig
from sqldump_splitter.splitter.naming import FileNumbering
from sqldump_splitter.splitter.types import (
    COMMENT_PREFIXES,
    LINE_WHITESPACE,
    STATEMENT_END,
    SplitStats,
)
from sqldump_splitter.streams import Sink, open_sink, open_source

logger = logging.getLogger(__name__)


def is_skippable(line: str) -> bool:
    """Blank lines and lines opening a comment are left out of every chunk."""
    return not line.strip(LINE_WHITESPACE) or line.startswith(COMMENT_PREFIXES)


def split_dump(config: SplitConfig) -> tuple[list[Path], SplitStats]:
    """
    Split a dump into numbered chunks without breaking any statement.

    Lines are stripped and collected until the text ends with ';' at end of
    line. Before a completed statement is written, a non-empty chunk is
    rolled over if its current size plus the statement would reach
    max_chunk_bytes. A single statement larger than the limit still lands
    whole in one chunk.

    The first chunk is created before anything is read, so even an empty
    dump yields one (empty) file. Text after the last terminated statement
    is dropped.

    Returns:
        Tuple of (paths of all chunks in creation order, split statistics).
    """
    start = time.perf_counter()
    logger.info(
        "Splitting %s into chunks of at most %d bytes (%s)",
        config.source_path,
        config.max_chunk_bytes,
        config.compression.value,
    )

    numbering = FileNumbering(config.source_path, config.compression)
    stats = SplitStats()
    paths: list[Path] = []

    def open_next_chunk() -> Sink:
        path = numbering.next_name()
        logger.info("Opening new file %s", path)
        sink = open_sink(path, config.compression)
        paths.append(path)
        return sink

    statement = ""
    # Statements in the open chunk; a chunk with none is never rolled over.
    chunk_statements = 0

    with open_source(config.source_path) as source:
        sink = open_next_chunk()
        try:
            for line in source:
                stats.lines_read += 1
                if is_skippable(line):
                    stats.skipped_lines += 1
                    continue

                statement += line.strip(LINE_WHITESPACE) + "\n"
                if not statement.endswith(STATEMENT_END):
                    continue

                projected = sink.size() + len(statement)
                if chunk_statements and projected >= config.max_chunk_bytes:
                    sink.close()
                    sink = open_next_chunk()
                    chunk_statements = 0
                    stats.rollovers += 1

                sink.write(statement)
                chunk_statements += 1
                stats.statements_written += 1
                statement = ""
        finally:
            sink.close()

    if statement:
        stats.dropped_chars = len(statement)
        logger.warning(
            "Dropped %d characters after the last complete statement", stats.dropped_chars
        )

    logger.info(
        "Done: %d statements in %d files (%d lines read, %d skipped) in %.2fs",
        stats.statements_written,
        len(paths),
        stats.lines_read,
        stats.skipped_lines,
        time.perf_counter() - start,
    )
    return paths, stats


def main_split(config: SplitConfig) -> None:
    """Main entry point that prints each created chunk to stdout."""
    paths, _stats = split_dump(config)

    for path in paths:
        print(path)
