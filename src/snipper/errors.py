"""Exception types raised across snipper."""

from pathlib import Path


class SnipperError(Exception):
    """Base class for every snipper error."""


class MismatchedTag(SnipperError):
    """A tagged region whose BEGIN and END names differ."""

    def __init__(self, begin: str, end: str, path: Path | str | None = None):
        self.begin = begin
        self.end = end
        self.path = Path(path) if path is not None else None
        where = f" in {self.path}" if self.path else ""
        super().__init__(
            f"Snippet with mismatched begin and end tags{where}: "
            f'"{begin}" != "{end}"'
        )


class NameExtractionError(SnipperError):
    """No snippet name can be derived from a snippet file path."""

    def __init__(self, path: Path | str):
        self.path = path
        super().__init__(f"Unable to obtain snippet name from snippet file: {path!s}")


class ConfigError(SnipperError, ValueError):
    """The snipper.yaml configuration is malformed."""
