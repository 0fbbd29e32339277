"""SQL Dump Splitter - Split large SQL dumps into size-bounded chunks."""

from sqldump_splitter.config import Compression, SplitConfig
from sqldump_splitter.splitter.split import main_split, split_dump

__all__ = ["Compression", "SplitConfig", "split_dump", "main_split"]
