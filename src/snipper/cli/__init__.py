"""Command-line entry point for snipper.

Usage:
    snipper --source <dir> --target <dir> --latex <dir>
    snipper --source <dir> --target <dir> --latex <dir> --extract [--dry-run]
    snipper ... [--config snipper.yaml] [--descriptions] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

from snipper import __version__
from snipper.cli.run import cmd_run


def _directory(label: str):
    """argparse type that accepts only existing directories."""

    def check(value: str) -> Path:
        path = Path(value).expanduser()
        if not path.is_dir():
            raise argparse.ArgumentTypeError(f"Invalid {label} directory: {value}")
        return path

    return check


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snipper",
        description=(
            "Collects snippets of code from source files into separate files "
            "for simple inclusion in LaTeX documents."
        ),
    )
    parser.add_argument(
        "--source", required=True, type=_directory("source"), metavar="DIRECTORY",
        help="Root directory of source files",
    )
    parser.add_argument(
        "--target", required=True, type=_directory("target"), metavar="DIRECTORY",
        help="Directory where snippets are stored",
    )
    parser.add_argument(
        "--latex", required=True, type=_directory("LaTeX"), metavar="DIRECTORY",
        help="Root directory of the LaTeX document",
    )
    parser.add_argument(
        "--extract", action="store_true",
        help="Write snippet files into the target directory",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="With --extract, report what would be written without writing",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to snipper.yaml (default: $SNIPPER_CONFIG or ./snipper.yaml)",
    )
    parser.add_argument(
        "--descriptions", action="store_true",
        help="Show snippet descriptions in the report",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.dry_run and not args.extract:
        parser.error("--dry-run requires --extract")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
