"""Shared test fixtures for snipper."""

from pathlib import Path

import pytest

from snipper.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep a developer's snipper.yaml or SNIPPER_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dirs(tmp_path):
    """Source, target and LaTeX directories under tmp_path."""
    source = tmp_path / "src"
    target = tmp_path / "snippets"
    latex = tmp_path / "doc"
    for d in (source, target, latex):
        d.mkdir()
    return source, target, latex


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def active(name: str, body: str, end: str | None = None, description: str | None = None) -> str:
    desc = f" ${{{description}}}" if description is not None else ""
    return f"// SNIPPET:BEGIN {{{name}}}{desc}{body}// SNIPPET:END {{{end or name}}}"


def inactive(name: str, body: str, end: str | None = None) -> str:
    return f"// !SNIPPET:BEGIN {{{name}}}{body}// !SNIPPET:END {{{end or name}}}"


def include(name: str, folder: str = "snippets") -> str:
    return f"\\lstinputlisting[language=C++]{{{folder}/{name}.cpp}}\n"
