"""Snippet records and the partial sightings the scanners produce."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Snippet:
    """One reconciled snippet, keyed by name.

    ``content``, ``source_file`` and ``description`` are only ever filled in
    from a tagged region in a source file. The four flags accumulate as the
    same name is sighted by the different scanners.
    """

    name: str
    content: str | None = None
    description: str | None = None
    source_file: Path | None = None
    found_in_source: bool = False
    found_in_document: bool = False
    found_as_materialized_file: bool = False
    active: bool = False

    @property
    def extractable(self) -> bool:
        return self.found_in_source

    @property
    def source_file_name(self) -> str:
        return self.source_file.name if self.source_file else ""


@dataclass(frozen=True)
class TagFragment:
    """A well-formed tagged region found by the tag scanner."""

    name: str
    body: str
    path: Path
    active: bool = True
    description: str | None = None


@dataclass(frozen=True)
class SnippetPatch:
    """Partial update applied to the store for one sighting of a name.

    ``active`` is ``None`` for sightings that say nothing about activity
    (document inclusions, materialized files).
    """

    content: str | None = None
    description: str | None = None
    source_file: Path | None = None
    found_in_source: bool = False
    found_in_document: bool = False
    found_as_materialized_file: bool = False
    active: bool | None = None

    @classmethod
    def from_fragment(cls, fragment: TagFragment) -> SnippetPatch:
        return cls(
            content=fragment.body,
            description=fragment.description,
            source_file=fragment.path,
            found_in_source=True,
            active=fragment.active,
        )

    @classmethod
    def document(cls) -> SnippetPatch:
        return cls(found_in_document=True)

    @classmethod
    def materialized(cls) -> SnippetPatch:
        return cls(found_as_materialized_file=True)
