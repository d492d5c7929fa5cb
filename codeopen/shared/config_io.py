"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of CodeOpenConfig to/from
TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from codeopen.domain.config import CodeOpenConfig

LOCAL_CONFIG_DIR = ".codeopen"
CONFIG_FILENAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/codeopen/config.toml or ~/.config/codeopen/config.toml
    - Windows: %APPDATA%/codeopen/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "codeopen" / CONFIG_FILENAME
        return Path.home() / ".config" / "codeopen" / CONFIG_FILENAME
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "codeopen" / CONFIG_FILENAME
        return Path.home() / ".config" / "codeopen" / CONFIG_FILENAME


def get_local_config_path(project_dir: Path) -> Path:
    """Get the per-project config path (may not exist)."""
    return project_dir / LOCAL_CONFIG_DIR / CONFIG_FILENAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def config_to_data(config: CodeOpenConfig) -> dict[str, Any]:
    """Convert a CodeOpenConfig to a TOML-serializable dictionary."""
    data: dict[str, Any] = {
        "discovery": {
            "probe_timeout": float(config.discovery.probe_timeout),
            "version_flag": config.discovery.version_flag,
            "providers": list(config.discovery.providers),
            "load_plugins": config.discovery.load_plugins,
        },
        "launch": {
            "goto_flag": config.launch.goto_flag,
            "open_project_folder": config.launch.open_project_folder,
        },
    }
    if config.editors:
        data["editors"] = {
            short_name: {"name": profile.name, "candidates": list(profile.candidates)}
            for short_name, profile in config.editors.items()
        }
    return data


def load_config(path: Path) -> CodeOpenConfig:
    """Load configuration from a TOML file on top of the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed or has invalid values
    """
    data = load_config_data(path)
    return CodeOpenConfig.from_partial(CodeOpenConfig.default(), data)


def save_config(config: CodeOpenConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: CodeOpenConfig to save
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)
