"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of TweakConfig to/from TOML format.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from tweak.domain.config import TweakConfig, config_keys


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/tweak/config.toml or ~/.config/tweak/config.toml
    - Windows: %APPDATA%/tweak/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "tweak" / "config.toml"
        return Path.home() / ".config" / "tweak" / "config.toml"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "tweak" / "config.toml"
        return Path.home() / ".config" / "tweak" / "config.toml"


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


def load_config(path: Path) -> TweakConfig:
    """Load configuration from a single TOML file over built-in defaults.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed TweakConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    data = load_config_data(path)
    return TweakConfig.from_partial(TweakConfig.default(), data)


def save_config_data(data: dict[str, Any], path: Path) -> None:
    """Save raw config data to a TOML file.

    Only the given sections and keys are written, so anything the file
    leaves out keeps inheriting from the global config and defaults.
    Comments in an existing file are not preserved.

    Args:
        data: Config data ({section: {key: value}})
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def _parse_value(raw: str) -> bool | str:
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return raw


def set_config_value(path: Path, key: str, raw_value: str) -> TweakConfig:
    """Set one 'section.name' key in a config file.

    The file is created if missing. The update is validated before anything
    is written.

    Args:
        path: Config file to update
        key: Dotted key, e.g. "index.dedupe_paths"
        raw_value: Value as typed; "true"/"false" become booleans

    Returns:
        The file's settings over built-in defaults, after the update

    Raises:
        ValueError: If the key is unknown, the value is invalid or the
            existing file is malformed
    """
    if key not in config_keys():
        raise ValueError(f"Unknown config key '{key}'. Known keys: {', '.join(config_keys())}")

    data = load_config_data(path) if path.exists() else {}
    section, name = key.split(".", 1)
    value = _parse_value(raw_value)
    current = getattr(getattr(TweakConfig.default(), section), name)
    if isinstance(current, bool) != isinstance(value, bool):
        raise ValueError(f"Invalid value for {key}: {raw_value!r}")

    if not isinstance(data.setdefault(section, {}), dict):
        raise ValueError(f"[{section}] must be a table")
    data[section][name] = value
    config = TweakConfig.from_partial(TweakConfig.default(), data)
    save_config_data(data, path)
    return config


def create_project_config(path: Path, hash_algorithm: str = "blake3") -> bool:
    """Create the project config.toml written by 'tweak init'.

    Only the hash algorithm is pinned; everything else inherits from the
    global config or built-in defaults. An existing file is left untouched.

    Args:
        path: Destination path for config.toml
        hash_algorithm: Digest used to address objects in this repository

    Returns:
        True if the file was created, False if it already existed.
    """
    if path.exists():
        return False

    template = f"""\
# Tweak repository configuration
# Created by: tweak init

[objects]
# Digest used to address objects. Changing it after the first commit
# leaves existing objects addressed by the old algorithm.
hash_algorithm = "{hash_algorithm}"

# [index]
# Replace an earlier staged entry when the same path is added again
# dedupe_paths = false

# [core]
# Lock .tweak/lock while updating the index and HEAD
# locking = true

# [display]
# Color output: "auto", "always" or "never"
# color_scheme = "auto"
"""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(template)
    return True
