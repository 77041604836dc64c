"""
Command-line interface for renaming photo listings.

Usage:
    photo-album rename [--input <file>] [--schema <schema.yaml>] [--summary]
    photo-album sample [--count N] [--seed S]
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from photo_album.core.exceptions import PhotoAlbumError
from photo_album.core.schema import DEFAULT_SCHEMA, SchemaConfigLoader
from photo_album.observability.logger import configure_package_loggers, get_logger
from photo_album.parsing import MAX_LINES
from photo_album.pipeline import AlbumPipeline

from .sample_data import SampleGenerator

logger = get_logger(__name__)


def rename_command(args) -> int:
    """
    Execute the rename command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        if args.input and args.input != "-":
            input_path = Path(args.input)
            if not input_path.exists():
                logger.error(f"Input file not found: {args.input}")
                return 1
            text = input_path.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        schema = DEFAULT_SCHEMA
        if args.schema:
            logger.info(f"Loading schema from {args.schema}")
            schema = SchemaConfigLoader(args.schema).load_schema()

        pipeline = AlbumPipeline(schema=schema, max_lines=args.max_lines)
        result = pipeline.process(text)

    except (PhotoAlbumError, OSError, ValueError) as e:
        logger.error(f"Error while renaming photos: {e}", exc_info=True)
        return 1

    for name in result["names"]:
        print(name)

    if args.summary:
        summary = {key: value for key, value in result.items() if key != "names"}
        print(json.dumps(summary, indent=2), file=sys.stderr)

    return 0


def sample_command(args) -> int:
    """Print generated sample input."""
    generator = SampleGenerator(seed=args.seed, invalid_ratio=args.invalid_ratio)
    for line in generator.lines(args.count):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-album",
        description="Rename photos into per-city, date-ordered album names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rename a listing file
  photo-album rename --input photos.txt

  # Read from stdin with a custom schema and print counts to stderr
  cat photos.txt | photo-album rename --schema config/schema.yaml --summary

  # Generate 20 sample lines and rename them
  photo-album sample --count 20 --seed 7 | photo-album rename
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    rename_parser = subparsers.add_parser("rename", help="Rename a photo listing")
    rename_parser.add_argument(
        "--input",
        default="-",
        help="Path to input file, '-' for stdin (default: stdin)"
    )
    rename_parser.add_argument(
        "--schema",
        default=None,
        help="Path to a schema YAML file (default: built-in schema)"
    )
    rename_parser.add_argument(
        "--max-lines",
        type=int,
        default=MAX_LINES,
        help=f"Maximum number of lines processed (default: {MAX_LINES})"
    )
    rename_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print processing counts as JSON to stderr"
    )

    sample_parser = subparsers.add_parser("sample", help="Generate sample input")
    sample_parser.add_argument(
        "--count",
        type=int,
        default=20,
        help="Number of lines (default: 20)"
    )
    sample_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output"
    )
    sample_parser.add_argument(
        "--invalid-ratio",
        type=float,
        default=0.2,
        help="Probability of an invalid extension or city (default: 0.2)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    # .env and flags are only known now, after module loggers were created
    configure_package_loggers(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "rename":
        return rename_command(args)
    return sample_command(args)


if __name__ == "__main__":
    sys.exit(main())
