"""Write snippet bodies to the target directory.

Write policy:
    active snippets   — create or truncate; a re-run always refreshes them
    inactive snippets — create only; an existing file is left untouched

Every snippet gets its own outcome. A failure on one never stops the rest.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from snipper.snippet import Snippet

logger = logging.getLogger(__name__)

CREATED = "created"
UPDATED = "updated"
UNCHANGED = "unchanged"
KEPT_INACTIVE = "kept"
NO_SOURCE = "skipped"
FAILED = "failed"


@dataclass
class ExtractionOutcome:
    name: str
    action: str
    path: Path | None = None
    message: str = ""


@dataclass
class ExtractionResult:
    """Outcome of one extraction run."""

    outcomes: list[ExtractionOutcome] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    dry_run: bool = False

    def by_action(self, action: str) -> list[ExtractionOutcome]:
        return [o for o in self.outcomes if o.action == action]

    def outcome(self, name: str) -> ExtractionOutcome | None:
        for o in self.outcomes:
            if o.name == name:
                return o
        return None

    @property
    def errors(self) -> list[str]:
        return [
            f"{o.name}: {o.message}"
            for o in self.outcomes
            if o.action in (NO_SOURCE, FAILED)
        ]

    @property
    def info(self) -> list[str]:
        return [f"{o.name}: {o.message}" for o in self.by_action(KEPT_INACTIVE)]

    def summary(self) -> str:
        lines = ["Snippet Extraction Results", "─" * 40]
        for action in (CREATED, UPDATED, UNCHANGED, KEPT_INACTIVE, NO_SOURCE, FAILED):
            count = len(self.by_action(action))
            if count:
                lines.append(f"  {action.capitalize() + ':':<11}{count}")
        if self.dry_run:
            lines.append("\n[DRY RUN] No files were modified.")
        return "\n".join(lines)


def is_plain_name(name: str) -> bool:
    """True when ``name`` can be used as a file name inside the target directory."""
    if not name.strip() or name in (".", ".."):
        return False
    return not any(sep in name for sep in ("/", "\\", os.sep, "\0"))


def target_path(target_dir: Path | str, name: str, extension: str = "cpp") -> Path:
    return Path(target_dir) / f"{name}.{extension.lstrip('.')}"


def extract_snippet(
    snippet: Snippet,
    target_dir: Path | str,
    extension: str = "cpp",
    dry_run: bool = False,
) -> ExtractionOutcome:
    """Write one snippet according to the active/inactive policy."""
    if not snippet.extractable:
        return ExtractionOutcome(
            snippet.name, NO_SOURCE,
            message="cannot extract: no associated source region",
        )

    if not is_plain_name(snippet.name):
        return ExtractionOutcome(
            snippet.name, FAILED,
            message="cannot extract: snippet name is not a plain file name",
        )

    path = target_path(target_dir, snippet.name, extension)
    content = snippet.content if snippet.content is not None else ""

    try:
        if snippet.active:
            return _write_active(snippet.name, path, content, dry_run)
        return _write_inactive(snippet.name, path, content, dry_run)
    except OSError as e:
        logger.debug("write failed for %s", path, exc_info=True)
        return ExtractionOutcome(snippet.name, FAILED, path, message=f"write failed: {e}")


def _write_active(name: str, path: Path, content: str, dry_run: bool) -> ExtractionOutcome:
    if path.exists():
        try:
            with open(path, encoding="utf-8", newline="") as f:
                existing = f.read()
        except (OSError, UnicodeDecodeError):
            existing = None
        if existing == content:
            return ExtractionOutcome(name, UNCHANGED, path)
        action = UPDATED
    else:
        action = CREATED

    if not dry_run:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    logger.debug("%s %s", action, path)
    return ExtractionOutcome(name, action, path)


def _write_inactive(name: str, path: Path, content: str, dry_run: bool) -> ExtractionOutcome:
    kept = ExtractionOutcome(
        name, KEPT_INACTIVE, path,
        message="snippet is inactive, not overwritten",
    )
    if dry_run:
        return kept if path.exists() else ExtractionOutcome(name, CREATED, path)
    try:
        with open(path, "x", encoding="utf-8", newline="") as f:
            f.write(content)
    except FileExistsError:
        return kept
    logger.debug("created inactive %s", path)
    return ExtractionOutcome(name, CREATED, path)


def extract_all(
    snippets: Iterable[Snippet],
    target_dir: Path | str,
    extension: str = "cpp",
    dry_run: bool = False,
) -> ExtractionResult:
    """Extract every snippet, recording each outcome independently."""
    result = ExtractionResult(dry_run=dry_run)
    for snippet in snippets:
        if snippet.found_in_source and snippet.content is None:
            result.warnings.append(f"{snippet.name}: no content, writing an empty file")
        result.outcomes.append(extract_snippet(snippet, target_dir, extension, dry_run))
    return result
