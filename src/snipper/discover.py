"""Find files beneath a directory by extension."""

from pathlib import Path


def files_with_extension(
    root: Path | str,
    extensions: list[str],
    case_sensitive: bool = False,
) -> list[Path]:
    """Walk ``root`` and return every regular file with one of ``extensions``.

    Args:
        root: Directory to walk recursively.
        extensions: Extensions without the leading dot (e.g. ["cpp", "h"]).
        case_sensitive: Match extensions exactly instead of ignoring case.

    Returns:
        Sorted list of matching file paths.
    """
    root_dir = Path(root)
    if not case_sensitive:
        wanted = {ext.lstrip(".").lower() for ext in extensions}
    else:
        wanted = {ext.lstrip(".") for ext in extensions}

    found: list[Path] = []
    for path in root_dir.rglob("*"):
        if not path.is_file():
            continue
        suffix = path.suffix[1:]
        if not case_sensitive:
            suffix = suffix.lower()
        if suffix and suffix in wanted:
            found.append(path)

    return sorted(found)
