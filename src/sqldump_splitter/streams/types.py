"""Shared constants for reading and writing dump files."""

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Dumps are read and written as UTF-8; undecodable bytes round-trip unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# Lines are split on '\n' alone and read back untranslated.
NEWLINE = "\n"
