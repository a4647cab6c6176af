"""Keyed store that merges every sighting of a snippet name into one record.

Precedence rules applied by ``upsert``:
    - flags only ever switch on, except ``active``
    - an inactive source sighting always forces ``active`` off
    - an active source sighting switches ``active`` on only when it is the
      first source sighting of the name
    - content, source_file and description come from the first source
      sighting and are never overwritten
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from snipper.snippet import Snippet, SnippetPatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateDefinition:
    """A second tagged region of the same kind for an existing name."""

    name: str
    kept: Path | None
    ignored: Path | None
    active: bool

    def __str__(self) -> str:
        kind = "active" if self.active else "inactive"
        return (
            f"Duplicate {kind} definition of snippet '{self.name}' in "
            f"{self.ignored}; keeping the one from {self.kept}"
        )


class SnippetStore:
    """Mapping from snippet name to its reconciled record."""

    def __init__(self) -> None:
        self._snippets: dict[str, Snippet] = {}
        self._source_kinds: dict[str, set[bool]] = {}
        self.duplicates: list[DuplicateDefinition] = []

    def __len__(self) -> int:
        return len(self._snippets)

    def __contains__(self, name: object) -> bool:
        return name in self._snippets

    def get(self, name: str) -> Snippet | None:
        return self._snippets.get(name)

    def upsert(self, name: str, patch: SnippetPatch) -> Snippet:
        """Create or update the record for ``name`` from one sighting."""
        snippet = self._snippets.get(name)
        if snippet is None:
            snippet = Snippet(name=name)
            self._snippets[name] = snippet
            logger.debug("new snippet %r", name)

        if patch.found_in_source:
            self._apply_source(snippet, patch)
        if patch.found_in_document:
            snippet.found_in_document = True
        if patch.found_as_materialized_file:
            snippet.found_as_materialized_file = True

        return snippet

    def _apply_source(self, snippet: Snippet, patch: SnippetPatch) -> None:
        kind = bool(patch.active)
        seen = self._source_kinds.setdefault(snippet.name, set())
        if kind in seen:
            dup = DuplicateDefinition(
                name=snippet.name,
                kept=snippet.source_file,
                ignored=patch.source_file,
                active=kind,
            )
            self.duplicates.append(dup)
            logger.debug("%s", dup)
        seen.add(kind)

        if not snippet.found_in_source:
            snippet.content = patch.content
            snippet.source_file = patch.source_file
            snippet.description = patch.description
            snippet.active = kind
            snippet.found_in_source = True
        elif patch.active is False:
            snippet.active = False

    def sorted(self) -> list[Snippet]:
        """All records ordered by name (codepoint order)."""
        return [self._snippets[name] for name in sorted(self._snippets)]
