"""Report and extraction command."""

import argparse
import sys


def _print_diagnostics(title: str, lines: list[str]) -> None:
    if not lines:
        return
    print(f"{title} ({len(lines)}):", file=sys.stderr)
    for line in lines:
        print(f"  - {line}", file=sys.stderr)


def cmd_run(args: argparse.Namespace) -> int:
    from rich.console import Console

    from snipper.config import load_config
    from snipper.errors import ConfigError
    from snipper.extract.writer import extract_all
    from snipper.reconcile.engine import reconcile
    from snipper.report import render_report

    try:
        config = load_config(args.config)
    except (OSError, ConfigError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = reconcile(args.source, args.target, args.latex, config)

    render_report(result.snippets, Console(), show_description=args.descriptions)
    print(result.summary(), file=sys.stderr)

    if not args.extract:
        return 0

    extraction = extract_all(
        result.snippets,
        args.target,
        extension=config.snippet_extension,
        dry_run=args.dry_run,
    )
    print()
    print(extraction.summary())
    _print_diagnostics("Extraction errors", extraction.errors)
    _print_diagnostics("Extraction warnings", extraction.warnings)
    _print_diagnostics("Info", extraction.info)

    # Per-snippet problems are reported, never fatal
    return 0
