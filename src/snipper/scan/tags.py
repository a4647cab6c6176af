"""Find tagged snippet regions in source text.

Active and inactive regions use two independent patterns. Each is
non-greedy and spans newlines, so a body runs up to the first END tag of
the same variant. Nested regions are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from snipper.config import TagSyntax
from snipper.errors import MismatchedTag
from snipper.snippet import TagFragment


@dataclass(frozen=True)
class TagRegion:
    """One BEGIN/END match, before the names have been checked."""

    begin: str
    end: str
    body: str
    path: Path
    active: bool
    description: str | None = None

    def to_fragment(self) -> TagFragment:
        """Return the region as a fragment.

        Raises:
            MismatchedTag: If the BEGIN and END names differ.
        """
        if self.begin != self.end:
            raise MismatchedTag(self.begin, self.end, self.path)
        return TagFragment(
            name=self.begin,
            body=self.body,
            path=self.path,
            active=self.active,
            description=self.description,
        )


def _tag_prefix(syntax: TagSyntax, active: bool) -> str:
    sigil = "" if active else re.escape(syntax.inactive_sigil)
    return re.escape(syntax.comment) + r"[ \t]*" + sigil + re.escape(syntax.keyword)


@lru_cache(maxsize=None)
def _compile(comment: str, keyword: str, sigil: str, active: bool) -> re.Pattern:
    syntax = TagSyntax(comment=comment, keyword=keyword, inactive_sigil=sigil)
    prefix = _tag_prefix(syntax, active)
    return re.compile(
        prefix + r":BEGIN[ \t]*\{(?P<begin>[^{}\n]*)\}"
        r"(?:[ \t]*\$\{(?P<description>[^}\n]*)\})?"
        r"(?P<body>.*?)"
        + prefix + r":END[ \t]*\{(?P<end>[^{}\n]*)\}",
        re.DOTALL,
    )


def tag_pattern(syntax: TagSyntax | None = None, active: bool = True) -> re.Pattern:
    """Compiled pattern for active (or inactive) regions."""
    syntax = syntax or TagSyntax()
    return _compile(syntax.comment, syntax.keyword, syntax.inactive_sigil, active)


def scan_regions(
    text: str,
    path: Path | str,
    syntax: TagSyntax | None = None,
    active: bool = True,
) -> Iterator[TagRegion]:
    """Yield every active (or inactive) region in ``text``."""
    source = Path(path)
    for match in tag_pattern(syntax, active).finditer(text):
        description = match.group("description")
        if description is not None:
            description = description.strip() or None
        yield TagRegion(
            begin=match.group("begin"),
            end=match.group("end"),
            body=match.group("body"),
            path=source,
            active=active,
            description=description,
        )


def scan_tags(
    text: str,
    path: Path | str,
    syntax: TagSyntax | None = None,
) -> Iterator[TagRegion]:
    """Yield active regions first, then inactive ones, for a single file."""
    yield from scan_regions(text, path, syntax, active=True)
    yield from scan_regions(text, path, syntax, active=False)
