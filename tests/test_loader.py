"""
Tests for confstack.store.loader module.

Tests JSON source loading including:
- Source path resolution against a working directory
- JSON file reading and error handling
- Layered loading of several files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from confstack.exceptions import ConfigFileNotFoundError, ConfigParseError
from confstack.merge import ArrayMode
from confstack.store import load_layered_config, read_json_file, resolve_source_path


class TestResolveSourcePath:
    """Tests for anchoring source paths."""

    def test_dot_relative(self):
        """Test that ./ paths are joined onto the working directory."""
        assert resolve_source_path("./a.json", "/srv/app") == Path("/srv/app/a.json")

    def test_dot_dot_relative(self):
        """Test that ../ paths walk up from the working directory."""
        assert resolve_source_path("../a.json", "/srv/app") == Path("/srv/a.json")

    def test_bare_relative(self):
        """Test that bare relative paths also use the working directory."""
        assert resolve_source_path("conf/a.json", "/srv") == Path("/srv/conf/a.json")

    def test_absolute_is_normalized_only(self):
        """Test that absolute paths ignore the working directory."""
        assert resolve_source_path("/etc//app/./a.json", "/srv") == Path("/etc/app/a.json")


class TestReadJsonFile:
    """Tests for reading a single JSON file."""

    def test_reads_object(self, create_json_file):
        """Test reading a well-formed JSON object."""
        path = create_json_file("a.json", {"a": [1, {"b": None}], "c": True})
        assert read_json_file(path) == {"a": [1, {"b": None}], "c": True}

    def test_preserves_key_order(self, tmp_test_dir):
        """Test that keys come back in file order."""
        path = tmp_test_dir / "ordered.json"
        path.write_text('{"z": 1, "a": 2, "m": 3}', encoding="utf-8")

        assert list(read_json_file(path)) == ["z", "a", "m"]

    def test_reads_utf8(self, tmp_test_dir):
        """Test that files are decoded as UTF-8."""
        path = tmp_test_dir / "utf8.json"
        path.write_text('{"greeting": "héllo 世界"}', encoding="utf-8")

        assert read_json_file(path)["greeting"] == "héllo 世界"

    def test_missing_file_raises(self, tmp_test_dir):
        """Test that a missing file raises ConfigFileNotFoundError."""
        with pytest.raises(ConfigFileNotFoundError):
            read_json_file(tmp_test_dir / "nonexistent.json")

    def test_invalid_json_raises(self, tmp_test_dir):
        """Test that invalid JSON raises ConfigParseError."""
        path = tmp_test_dir / "bad.json"
        path.write_text("This is not JSON", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            read_json_file(path)

    def test_invalid_utf8_raises(self, tmp_test_dir):
        """Test that bytes that are not UTF-8 raise ConfigParseError."""
        path = tmp_test_dir / "latin.json"
        path.write_bytes(b'{"a": "\xff"}')

        with pytest.raises(ConfigParseError) as exc_info:
            read_json_file(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_directory_raises_not_found(self, tmp_test_dir):
        """Test that a directory is reported as a missing config file."""
        directory = tmp_test_dir / "conf.json"
        directory.mkdir()

        with pytest.raises(ConfigFileNotFoundError, match="is not a file"):
            read_json_file(directory)

    def test_empty_file_raises(self, tmp_test_dir):
        """Test that an empty file raises ConfigParseError."""
        path = tmp_test_dir / "empty.json"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            read_json_file(path)

    @pytest.mark.parametrize("payload", ["[1, 2]", '"text"', "3", "null"])
    def test_non_object_root_raises(self, tmp_test_dir, payload):
        """Test that non-object top-level values are rejected."""
        path = tmp_test_dir / "root.json"
        path.write_text(payload, encoding="utf-8")

        with pytest.raises(ConfigParseError, match="must be an object"):
            read_json_file(path)


class TestLoadLayeredConfig:
    """Tests for one-shot layered loading."""

    def test_later_layers_win(self, create_json_file, tmp_test_dir):
        """Test that layers are merged lowest priority first."""
        create_json_file("org.json", {"level": "org", "org_only": 1, "tags": ["a"]})
        create_json_file("team/prod.json", {"level": "prod", "tags": ["b"]})
        create_json_file("local.json", {"level": "local", "cache": "./cache"})

        cfg = load_layered_config(
            ["./org.json", "./team/prod.json", "local.json"], working_dir=tmp_test_dir
        )

        assert cfg == {
            "level": "local",
            "org_only": 1,
            "tags": ["a", "b"],
            "cache": str(tmp_test_dir / "cache"),
        }

    def test_each_layer_resolves_against_its_own_directory(
        self, create_json_file, tmp_test_dir
    ):
        """Test that relative values use each file's own directory."""
        first = create_json_file("a/one.json", {"p1": "./x"})
        second = create_json_file("b/c/two.json", {"p2": "../y"})

        cfg = load_layered_config([first, second])

        assert cfg["p1"] == str(tmp_test_dir / "a" / "x")
        assert cfg["p2"] == str(tmp_test_dir / "b" / "y")

    def test_replace_arrays(self, create_json_file):
        """Test layered loading with array replacement."""
        first = create_json_file("one.json", {"tags": ["a", "b"]})
        second = create_json_file("two.json", {"tags": ["c"]})

        cfg = load_layered_config([first, second], array_mode=ArrayMode.REPLACE)

        assert cfg == {"tags": ["c"]}

    def test_parser_applies_per_layer(self, create_json_file):
        """Test that the parser runs once per layer."""
        calls = []
        first = create_json_file("one.json", {"a": 1})
        second = create_json_file("two.json", {"b": 2})

        def parser(cfg):
            calls.append(dict(cfg))
            return cfg

        load_layered_config([first, second], parser=parser)

        assert calls == [{"a": 1}, {"b": 2}]

    def test_no_layers(self):
        """Test that an empty list yields an empty tree."""
        assert load_layered_config([]) == {}

    def test_missing_layer_raises(self, create_json_file, tmp_test_dir):
        """Test that a missing layer aborts the whole load."""
        first = create_json_file("one.json", {"a": 1})

        with pytest.raises(ConfigFileNotFoundError):
            load_layered_config([first, tmp_test_dir / "missing.json"])
