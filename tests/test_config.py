"""Tests for configuration loading and file discovery."""

from pathlib import Path

import pytest

from conftest import write
from snipper.config import CONFIG_ENV_VAR, SnipperConfig, load_config, parse_config
from snipper.discover import files_with_extension
from snipper.errors import ConfigError


class TestDefaults:
    def test_no_file_gives_defaults(self):
        config = load_config()
        assert config == SnipperConfig()
        assert config.source_extensions == ["cpp", "h"]
        assert config.document_extensions == ["tex"]
        assert config.snippet_extension == "cpp"
        assert config.tags.comment == "//"
        assert config.tags.keyword == "SNIPPET"
        assert config.tags.inactive_sigil == "!"
        assert config.inclusion_commands == ["lstinputlisting"]


class TestLoadConfig:
    def test_explicit_file(self, tmp_path):
        path = write(tmp_path / "custom.yaml", (
            "source_extensions: [py]\n"
            "snippet_extension: .PY\n"
            "tags:\n  comment: '#'\n"
            "inclusion_commands: ['\\\\inputminted', lstinputlisting]\n"
        ))
        config = load_config(path)
        assert config.source_extensions == ["py"]
        assert config.snippet_extension == "py"
        assert config.tags.comment == "#"
        assert config.tags.keyword == "SNIPPET"
        assert config.inclusion_commands == ["inputminted", "lstinputlisting"]

    def test_env_var(self, tmp_path, monkeypatch):
        path = write(tmp_path / "env.yaml", "document_extensions: tex\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().document_extensions == ["tex"]

    def test_cwd_file(self, tmp_path):
        write(tmp_path / "snipper.yaml", "snippet_extension: h\n")
        assert load_config().snippet_extension == "h"

    def test_empty_file(self, tmp_path):
        path = write(tmp_path / "empty.yaml", "")
        assert load_config(path) == SnipperConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = write(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_string_key(self, tmp_path):
        path = write(tmp_path / "int_key.yaml", "1: x\n")
        with pytest.raises(ConfigError, match="unknown keys: 1"):
            load_config(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"snippet_extension: \xff\xfe\n")
        with pytest.raises(ConfigError, match="not valid UTF-8"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path / "bad.yaml", "tags: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)


class TestParseConfig:
    @pytest.mark.parametrize("data", [
        {"source_extensions": 3},
        {"source_extensions": []},
        {"snippet_extension": ""},
        {"tags": "//"},
        {"tags": {"comment": ""}},
        {"inclusion_commands": "lstinputlisting"},
        {"extensions": ["cpp"]},
    ])
    def test_rejects_bad_values(self, data):
        with pytest.raises(ConfigError):
            parse_config(data)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_config({"unknown": 1})


class TestFilesWithExtension:
    def test_case_insensitive_recursive(self, tmp_path):
        write(tmp_path / "a.cpp", "")
        write(tmp_path / "sub" / "b.H", "")
        write(tmp_path / "sub" / "deeper" / "c.CPP", "")
        write(tmp_path / "d.txt", "")
        write(tmp_path / "cpp", "")
        found = files_with_extension(tmp_path, ["cpp", "h"])
        assert [p.relative_to(tmp_path) for p in found] == [
            Path("a.cpp"), Path("sub/b.H"), Path("sub/deeper/c.CPP"),
        ]

    def test_directories_never_returned(self, tmp_path):
        (tmp_path / "looks_like.cpp").mkdir()
        assert files_with_extension(tmp_path, ["cpp"]) == []

    def test_case_sensitive(self, tmp_path):
        write(tmp_path / "a.cpp", "")
        write(tmp_path / "b.CPP", "")
        found = files_with_extension(tmp_path, ["cpp"], case_sensitive=True)
        assert [p.name for p in found] == ["a.cpp"]
