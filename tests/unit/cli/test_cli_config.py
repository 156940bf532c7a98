#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_config.py
"""Unit tests for configuration discovery, loading and option building."""

import argparse
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from notemark.cli.config import (
    build_options_from_config,
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
)
from notemark.options import HtmlRendererOptions, MarkdownRendererOptions, TiptapParserOptions


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[markdown]\nemphasis_symbol = "*"\nlist_indent_width = 4\n', encoding="utf-8")
        assert load_config_file(config_file) == {"markdown": {"emphasis_symbol": "*", "list_indent_width": 4}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path, suffix):
        """Test loading a YAML file."""
        config_file = tmp_path / f"config{suffix}"
        config_file.write_text("html:\n  language: fr\n  link_target_blank: false\n", encoding="utf-8")
        assert load_config_file(config_file) == {"html": {"language": "fr", "link_target_blank": False}}

    def test_json(self, tmp_path):
        """Test loading a JSON file, given as a string path."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"tiptap": {"strict_mode": True}}), encoding="utf-8")
        assert load_config_file(str(config_file)) == {"tiptap": {"strict_mode": True}}

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file is an empty config."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")
        assert load_config_file(config_file) == {}

    def test_pyproject_section(self, tmp_path):
        """Test reading [tool.notemark] from pyproject.toml."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "x"\n\n[tool.notemark.markdown]\nbullet_symbol = "*"\n', encoding="utf-8"
        )
        assert load_config_file(pyproject) == {"markdown": {"bullet_symbol": "*"}}

    def test_pyproject_without_section(self, tmp_path):
        """Test a pyproject.toml without a notemark section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(pyproject) == {}

    @pytest.mark.parametrize(
        "filename,content,match",
        [
            ("bad.toml", "[markdown\n", "Invalid TOML"),
            ("bad.yaml", "markdown: [unclosed\n", "Invalid YAML"),
            ("bad.json", "{nope", "Invalid JSON"),
            ("config.ini", "[markdown]\n", "Unsupported config file format"),
            ("list.json", "[1, 2]", "must contain a mapping"),
            ("pyproject.toml", "[tool]\nnotemark = 3\n", "must be a table"),
        ],
    )
    def test_invalid_files(self, tmp_path, filename, content, match):
        """Test that unreadable configuration is reported as an argument error."""
        config_file = tmp_path / filename
        config_file.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match=match):
            load_config_file(config_file)

    def test_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_directory(self, tmp_path):
        """Test a path that is a directory."""
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Tests for configuration file discovery."""

    def test_found_in_start_dir(self, tmp_path):
        """Test finding a dotfile in the start directory."""
        config_file = tmp_path / ".notemark.toml"
        config_file.write_text("", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config_file.resolve()

    def test_found_in_parent(self, tmp_path):
        """Test walking up to a parent directory."""
        config_file = tmp_path / ".notemark.yaml"
        config_file.write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config_file.resolve()

    def test_dotfile_order(self, tmp_path):
        """Test that TOML wins over other formats in the same directory."""
        for name in (".notemark.json", ".notemark.toml"):
            (tmp_path / name).write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path).name == ".notemark.toml"

    def test_pyproject_with_section(self, tmp_path):
        """Test that pyproject.toml counts only with a notemark section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.notemark.tiptap]\nstrict_mode = true\n", encoding="utf-8")
        nested = tmp_path / "src"
        nested.mkdir()
        assert find_config_in_parents(nested) == pyproject.resolve()

    def test_nearest_wins(self, tmp_path):
        """Test that the closest configuration file is used."""
        (tmp_path / ".notemark.toml").write_text("", encoding="utf-8")
        nested = tmp_path / "project"
        nested.mkdir()
        closest = nested / ".notemark.json"
        closest.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(nested) == closest.resolve()

    def test_defaults_to_cwd(self, tmp_path):
        """Test that the search starts in the working directory."""
        config_file = tmp_path / ".notemark.toml"
        config_file.write_text("", encoding="utf-8")
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            assert find_config_in_parents() == config_file.resolve()

    def test_home_fallback(self, tmp_path):
        """Test that the home directory is checked last."""
        home = tmp_path / "home"
        home.mkdir()
        config_file = home / ".notemark.yml"
        config_file.write_text("", encoding="utf-8")

        with patch("notemark.cli.config.find_config_in_parents", return_value=None), patch(
            "pathlib.Path.home", return_value=home
        ):
            assert discover_config_file() == config_file

    def test_nothing_found(self, tmp_path):
        """Test discovery without any configuration."""
        with patch("notemark.cli.config.find_config_in_parents", return_value=None), patch(
            "pathlib.Path.home", return_value=tmp_path
        ):
            assert discover_config_file() is None


@pytest.mark.unit
@pytest.mark.cli
class TestPriority:
    """Tests for load_config_with_priority."""

    @pytest.fixture
    def configs(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text(json.dumps({"markdown": {"emphasis_symbol": "*"}}), encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text(json.dumps({"markdown": {"bullet_symbol": "+"}}), encoding="utf-8")
        return explicit, env

    def test_explicit_beats_env(self, configs):
        """Test that --config wins over the environment variable."""
        explicit, env = configs
        assert load_config_with_priority(str(explicit), str(env)) == {"markdown": {"emphasis_symbol": "*"}}

    def test_env_beats_discovery(self, configs):
        """Test that the environment variable wins over discovery."""
        _, env = configs
        with patch("notemark.cli.config.discover_config_file") as mock_discover:
            assert load_config_with_priority(None, str(env)) == {"markdown": {"bullet_symbol": "+"}}
        mock_discover.assert_not_called()

    def test_discovery(self, configs):
        """Test falling back to discovery."""
        explicit, _ = configs
        with patch("notemark.cli.config.discover_config_file", return_value=explicit):
            assert load_config_with_priority() == {"markdown": {"emphasis_symbol": "*"}}

    def test_no_config(self):
        """Test that no configuration yields an empty dict."""
        with patch("notemark.cli.config.discover_config_file", return_value=None):
            assert load_config_with_priority() == {}


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Tests for build_options_from_config."""

    def test_builds_each_section(self):
        """Test that each section becomes an options object."""
        options = build_options_from_config(
            {
                "tiptap": {"max_nesting_depth": 10},
                "markdown": {"emphasis_symbol": "*"},
                "html": {"css_style": "none"},
            }
        )
        assert options["tiptap"] == TiptapParserOptions(max_nesting_depth=10)
        assert options["markdown"] == MarkdownRendererOptions(emphasis_symbol="*")
        assert options["html"] == HtmlRendererOptions(css_style="none")
        assert "plaintext" not in options

    def test_empty(self):
        """Test an empty configuration."""
        assert build_options_from_config({}) == {}

    @pytest.mark.parametrize(
        "config,match",
        [
            ({"docx": {}}, "Unknown configuration section 'docx'"),
            ({"markdown": "fast"}, "must be a table"),
            ({"markdown": {"emphasis_symbol": "~"}}, "Invalid 'markdown' configuration"),
            ({"html": {"colour": "red"}}, "Invalid 'html' configuration"),
        ],
    )
    def test_invalid(self, config, match):
        """Test configuration errors."""
        with pytest.raises(argparse.ArgumentTypeError, match=match):
            build_options_from_config(config)


@pytest.mark.unit
@pytest.mark.cli
def test_config_paths_are_paths(tmp_path):
    """Test that discovered paths are Path objects usable for loading."""
    config_file = tmp_path / ".notemark.json"
    config_file.write_text('{"plaintext": {"heading_markers": false}}', encoding="utf-8")
    found = find_config_in_parents(tmp_path)
    assert isinstance(found, Path)
    assert build_options_from_config(load_config_file(found))["plaintext"].heading_markers is False
