"""Run configuration for a single split."""

from dataclasses import dataclass
from enum import Enum

# Suffix marking gzip files, both for sources and for output chunks.
GZIP_SUFFIX = ".gz"


class Compression(Enum):
    """Output compression for chunk files."""

    PLAIN = "plain"
    GZIP = "gzip"


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Validated parameters for one run of the splitter."""

    source_path: str
    max_chunk_bytes: int
    compression: Compression = Compression.PLAIN

    def __post_init__(self) -> None:
        if self.max_chunk_bytes <= 0:
            raise ValueError(f"max_chunk_bytes must be positive, got {self.max_chunk_bytes}")
