"""Shared constants and metadata structures for splitting."""

from dataclasses import dataclass

# Statements end with a semicolon at the end of a (stripped) line.
STATEMENT_END = ";\n"

# Lines starting with these markers are comments and never reach a chunk.
COMMENT_PREFIXES = ("--", "/*")

# Characters trimmed from both ends of a line: ASCII whitespace and NUL.
LINE_WHITESPACE = " \t\n\v\f\r\0"


@dataclass
class SplitStats:
    """Statistics from split_dump operation."""

    lines_read: int = 0
    skipped_lines: int = 0
    statements_written: int = 0
    rollovers: int = 0
    dropped_chars: int = 0
