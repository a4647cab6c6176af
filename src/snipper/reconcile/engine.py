"""Reconciliation — merge source tags, document inclusions and extracted files.

The pass runs in a fixed order:
1. Active tagged regions from every source file
2. Inactive tagged regions from every source file
3. Inclusions from every document
4. Snippet files already present in the target directory

Unreadable files, mismatched tags and unnamed snippet files are recorded
and skipped; nothing here aborts the pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from snipper.config import SnipperConfig
from snipper.discover import files_with_extension
from snipper.errors import MismatchedTag, NameExtractionError
from snipper.reconcile.store import SnippetStore
from snipper.scan.inclusions import scan_inclusions
from snipper.scan.materialized import snippet_name_from_path
from snipper.scan.tags import scan_regions
from snipper.snippet import Snippet, SnippetPatch, TagFragment

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Outcome of one reconciliation pass."""

    snippets: list[Snippet] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    mismatched: list[MismatchedTag] = field(default_factory=list)
    source_files: int = 0
    document_files: int = 0
    snippet_files: int = 0

    def get(self, name: str) -> Snippet | None:
        for snippet in self.snippets:
            if snippet.name == name:
                return snippet
        return None

    def summary(self) -> str:
        lines = [
            f"Reconciled {len(self.snippets)} snippets from "
            f"{self.source_files} source files, {self.document_files} documents, "
            f"{self.snippet_files} snippet files"
        ]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        return "\n".join(lines)


def _read_text(path: Path, result: ReconcileResult) -> str | None:
    try:
        # newline="" keeps \r\n bodies byte-exact
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        result.errors.append(f"{path}: unreadable: {e}")
        logger.debug("skipping unreadable %s", path, exc_info=True)
        return None


def collect_fragments(
    source_files: Iterable[Path],
    config: SnipperConfig,
    result: ReconcileResult,
) -> tuple[list[TagFragment], list[TagFragment]]:
    """Scan source files, returning (active, inactive) fragments."""
    active: list[TagFragment] = []
    inactive: list[TagFragment] = []

    for path in source_files:
        result.source_files += 1
        text = _read_text(path, result)
        if text is None:
            continue
        for is_active, bucket in ((True, active), (False, inactive)):
            for region in scan_regions(text, path, config.tags, active=is_active):
                try:
                    bucket.append(region.to_fragment())
                except MismatchedTag as e:
                    result.mismatched.append(e)
                    result.errors.append(str(e))

    return active, inactive


def reconcile_files(
    source_files: Iterable[Path],
    document_files: Iterable[Path],
    snippet_files: Iterable[Path],
    config: SnipperConfig | None = None,
) -> ReconcileResult:
    """Run one reconciliation pass over explicit file lists."""
    config = config or SnipperConfig()
    result = ReconcileResult()
    store = SnippetStore()

    active, inactive = collect_fragments(source_files, config, result)
    for fragment in active:
        store.upsert(fragment.name, SnippetPatch.from_fragment(fragment))
    for fragment in inactive:
        store.upsert(fragment.name, SnippetPatch.from_fragment(fragment))

    for path in document_files:
        result.document_files += 1
        text = _read_text(path, result)
        if text is None:
            continue
        for name in scan_inclusions(text, config.snippet_extension, config.inclusion_commands):
            store.upsert(name, SnippetPatch.document())

    for path in snippet_files:
        result.snippet_files += 1
        try:
            name = snippet_name_from_path(path, config.snippet_extension)
        except NameExtractionError as e:
            result.warnings.append(str(e))
            continue
        store.upsert(name, SnippetPatch.materialized())

    result.warnings.extend(str(d) for d in store.duplicates)
    result.snippets = store.sorted()
    logger.debug(
        "reconciled %d snippets (%d errors, %d warnings)",
        len(result.snippets), len(result.errors), len(result.warnings),
    )
    return result


def reconcile(
    source_dir: Path | str,
    target_dir: Path | str,
    latex_dir: Path | str,
    config: SnipperConfig | None = None,
) -> ReconcileResult:
    """Discover files under the three directories and reconcile them."""
    config = config or SnipperConfig()
    return reconcile_files(
        files_with_extension(source_dir, config.source_extensions),
        files_with_extension(latex_dir, config.document_extensions),
        files_with_extension(target_dir, [config.snippet_extension]),
        config,
    )
