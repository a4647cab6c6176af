"""Derive snippet names from previously extracted snippet files."""

from __future__ import annotations

import os
from pathlib import Path

from snipper.errors import NameExtractionError


def snippet_name_from_path(path: Path | str, extension: str = "cpp") -> str:
    """Return the snippet name for an extracted file.

    The name is the file name with the snippet extension removed
    (matched case-insensitively). A file with a different extension keeps
    its plain stem.

    Raises:
        NameExtractionError: If the path has no usable file name.
    """
    raw = os.fspath(path)
    if not raw or raw.endswith(("/", os.sep)):
        raise NameExtractionError(path)

    file_name = Path(raw).name
    if file_name in ("", ".", ".."):
        raise NameExtractionError(path)

    suffix = "." + extension.lstrip(".").lower()
    if file_name.lower().endswith(suffix):
        name = file_name[: -len(suffix)]
    else:
        name = Path(file_name).stem

    if not name:
        raise NameExtractionError(path)
    return name
