"""Find snippet inclusions in LaTeX documents.

Recognized forms:
    \\lstinputlisting{snippets/name.cpp}
    \\lstinputlisting[language=C++, caption=Foo]{../code/name.cpp}
    \\lstinputlisting{name.cpp}
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator


@lru_cache(maxsize=None)
def _compile(commands: tuple[str, ...], extension: str) -> re.Pattern:
    names = "|".join(re.escape(c) for c in commands)
    return re.compile(
        r"\\(?:" + names + r")[ \t]*"
        r"(?:\[[^\]]*\][ \t]*)?"
        r"\{[ \t]*(?:[^{}]*/)?(?P<name>[^{}/]+?)\.(?i:" + re.escape(extension) + r")[ \t]*\}"
    )


def inclusion_pattern(
    extension: str = "cpp",
    commands: list[str] | tuple[str, ...] = ("lstinputlisting",),
) -> re.Pattern:
    return _compile(tuple(commands), extension.lstrip("."))


def scan_inclusions(
    text: str,
    extension: str = "cpp",
    commands: list[str] | tuple[str, ...] = ("lstinputlisting",),
) -> Iterator[str]:
    """Yield the snippet name of every inclusion in ``text``.

    Only the file stem counts: directory and extension are dropped.
    Repeated inclusions are yielded each time they occur.
    """
    for match in inclusion_pattern(extension, commands).finditer(text):
        yield match.group("name")
