"""Command-line interface for the SQL dump splitter."""

import argparse
import logging
import os
import sys

from sqldump_splitter.config import Compression, SplitConfig
from sqldump_splitter.size import parse_size
from sqldump_splitter.splitter.split import main_split

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sqldump-splitter",
        description="Split a SQL dump into files of bounded size without breaking statements.",
    )

    parser.add_argument(
        "-f",
        "--file",
        metavar="DUMPFILE",
        help="File to split (mandatory, .gz files are decompressed)",
    )

    parser.add_argument(
        "-s",
        "--size",
        metavar="FILESIZE",
        help=(
            "Maximum filesize of output files (mandatory); formats accepted are "
            "2.5M for 2.5 Megabytes or 2.5MI for Mebibytes"
        ),
    )

    parser.add_argument(
        "-z",
        "--gzip",
        dest="compression",
        action="store_const",
        const=Compression.GZIP,
        help="gzip compression for output files",
    )

    parser.add_argument(
        "-p",
        "--plain",
        dest="compression",
        action="store_const",
        const=Compression.PLAIN,
        help="No compression for output files (default)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.set_defaults(compression=Compression.PLAIN)
    return parser


def build_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SplitConfig:
    """Validate parsed arguments, exiting through the parser on bad input."""
    if args.file is None:
        parser.error("no filename given")
    if not os.path.isfile(args.file) or not os.access(args.file, os.R_OK):
        parser.error(f"file {args.file} can't be read")

    if args.size is None:
        parser.error("no filesize given")
    try:
        max_chunk_bytes = parse_size(args.size)
    except ValueError as exc:
        parser.error(f"filesize is invalid: {exc}")

    return SplitConfig(
        source_path=args.file,
        max_chunk_bytes=max_chunk_bytes,
        compression=args.compression,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    config = build_config(parser, args)

    try:
        main_split(config)
    except OSError as exc:
        logger.error("Split of %s aborted: %s", config.source_path, exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
