"""Load snipper.yaml and resolve where it lives.

Resolution order for the config file:
    1. explicit path (``--config``)
    2. SNIPPER_CONFIG environment variable
    3. snipper.yaml in the current working directory
    4. built-in defaults

Example snipper.yaml:
    source_extensions: [cpp, h]
    document_extensions: [tex]
    snippet_extension: cpp
    tags:
      comment: "//"
      keyword: SNIPPET
      inactive_sigil: "!"
    inclusion_commands: [lstinputlisting]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from snipper import DEFAULT_COMMENT, DEFAULT_INACTIVE_SIGIL, DEFAULT_KEYWORD
from snipper.errors import ConfigError

CONFIG_ENV_VAR = "SNIPPER_CONFIG"
DEFAULT_CONFIG_NAME = "snipper.yaml"


@dataclass
class TagSyntax:
    """Tokens that make up a BEGIN/END tag."""

    comment: str = DEFAULT_COMMENT
    keyword: str = DEFAULT_KEYWORD
    inactive_sigil: str = DEFAULT_INACTIVE_SIGIL


@dataclass
class SnipperConfig:
    source_extensions: list[str] = field(default_factory=lambda: ["cpp", "h"])
    document_extensions: list[str] = field(default_factory=lambda: ["tex"])
    snippet_extension: str = "cpp"
    tags: TagSyntax = field(default_factory=TagSyntax)
    inclusion_commands: list[str] = field(default_factory=lambda: ["lstinputlisting"])


def default_config_path() -> Path | None:
    """Return the config file to use when none is given explicitly."""
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    local = Path.cwd() / DEFAULT_CONFIG_NAME
    return local if local.is_file() else None


def load_config(path: Path | str | None = None) -> SnipperConfig:
    """Load a SnipperConfig, falling back to defaults when no file exists.

    Raises:
        FileNotFoundError: If an explicitly requested file is missing.
        ConfigError: If the YAML is malformed or has wrongly typed keys.
    """
    config_path = Path(path) if path else default_config_path()
    if config_path is None:
        return SnipperConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{config_path}: not valid UTF-8: {e}") from e

    if data is None:
        return SnipperConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} is not a YAML mapping")

    return parse_config(data, source=str(config_path))


def parse_config(data: dict, source: str = "<config>") -> SnipperConfig:
    """Build a SnipperConfig from an already-parsed mapping."""
    config = SnipperConfig()

    unknown = set(data) - {
        "source_extensions", "document_extensions", "snippet_extension",
        "tags", "inclusion_commands",
    }
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(sorted(map(str, unknown)))}")

    if "source_extensions" in data:
        config.source_extensions = _extension_list(data["source_extensions"], "source_extensions", source)
    if "document_extensions" in data:
        config.document_extensions = _extension_list(data["document_extensions"], "document_extensions", source)
    if "snippet_extension" in data:
        config.snippet_extension = _extension(data["snippet_extension"], "snippet_extension", source)
    if "inclusion_commands" in data:
        commands = data["inclusion_commands"]
        if not _is_str_list(commands) or not commands:
            raise ConfigError(f"{source}: inclusion_commands must be a non-empty list of strings")
        config.inclusion_commands = [c.lstrip("\\") for c in commands]

    tags = data.get("tags") or {}
    if not isinstance(tags, dict):
        raise ConfigError(f"{source}: tags must be a mapping")
    for key in ("comment", "keyword", "inactive_sigil"):
        if key in tags:
            value = tags[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{source}: tags.{key} must be a non-empty string")
            setattr(config.tags, key, value)

    return config


def _is_str_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _extension(value, key: str, source: str) -> str:
    if not isinstance(value, str) or not value.strip(". "):
        raise ConfigError(f"{source}: {key} must be a non-empty string")
    return value.strip().lstrip(".").lower()


def _extension_list(value, key: str, source: str) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not _is_str_list(value) or not value:
        raise ConfigError(f"{source}: {key} must be a non-empty list of strings")
    return [_extension(v, key, source) for v in value]
