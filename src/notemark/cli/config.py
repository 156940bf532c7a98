#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration file discovery and loading for the notemark CLI.

A configuration file holds one table per options class::

    [markdown]
    emphasis_symbol = "*"

    [html]
    default_highlight_color = "#fff3a0"

Files are discovered from the working directory upwards, then in the home
directory. ``--config`` and the ``NOTEMARK_CONFIG`` environment variable
take precedence over discovery.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from typing import Any, Dict, Optional

import yaml

from notemark.constants import CONFIG_FILENAMES
from notemark.options import HtmlRendererOptions, MarkdownRendererOptions, PlainTextOptions, TiptapParserOptions
from notemark.options.base import CloneFrozenMixin

CONFIG_SECTIONS: Dict[str, type[CloneFrozenMixin]] = {
    "tiptap": TiptapParserOptions,
    "plaintext": PlainTextOptions,
    "markdown": MarkdownRendererOptions,
    "html": HtmlRendererOptions,
}


def _load_pyproject_notemark_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.notemark] section from a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("notemark")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.notemark] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory is checked for ``.notemark.toml``, ``.notemark.yaml``,
    ``.notemark.yml``, ``.notemark.json`` and finally a ``pyproject.toml``
    with a ``[tool.notemark]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_notemark_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml files are skipped during discovery
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the parent directories or home directory."""
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_notemark_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest): the ``--config`` path, the
    ``NOTEMARK_CONFIG`` path, auto-discovery.

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def build_options_from_config(config: Dict[str, Any]) -> Dict[str, CloneFrozenMixin]:
    """Turn configuration sections into options objects.

    Parameters
    ----------
    config : dict
        Loaded configuration

    Returns
    -------
    dict
        Options instance per section name present in ``config``

    Raises
    ------
    argparse.ArgumentTypeError
        If a section is unknown, is not a table, or holds invalid values

    """
    options: Dict[str, CloneFrozenMixin] = {}
    for section, values in config.items():
        options_class = CONFIG_SECTIONS.get(section)
        if options_class is None:
            known = ", ".join(CONFIG_SECTIONS)
            raise argparse.ArgumentTypeError(f"Unknown configuration section '{section}'. Expected one of: {known}")
        if not isinstance(values, dict):
            raise argparse.ArgumentTypeError(
                f"Configuration section '{section}' must be a table, got {type(values).__name__}"
            )
        try:
            options[section] = options_class.from_dict(values)
        except (TypeError, ValueError) as e:
            raise argparse.ArgumentTypeError(f"Invalid '{section}' configuration: {e}") from e
    return options
