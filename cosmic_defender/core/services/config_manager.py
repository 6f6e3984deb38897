"""
config_manager.py
-----------------
Configuration loader for gameplay settings.

Features:
- Supports .json and .yaml/.yml files
- Recursively merges file values over defaults
- Ignores '_notes' keys for human-readable configs
- Builds the immutable GameConfig consumed by the World
"""

import os
import json

import yaml

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import GameConfig


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")
DEFAULT_SETTINGS_FILE = os.path.join(DATA_ROOT, "settings.yaml")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Path to a .json, .yaml or .yml file. Relative names are
            looked up in the working directory first, then in DATA_ROOT.
        default_dict: Default fallback config
        strict: If True, raise on a missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_path(filename)

    try:
        if path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"top-level value must be a mapping, got {type(data).__name__}")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not loadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()


def load_game_config(filename=None, strict=False, **overrides) -> GameConfig:
    """
    Build the GameConfig from the settings file.

    Args:
        filename: Settings file (defaults to the bundled settings.yaml)
        strict: Propagate missing/invalid file errors
        **overrides: Final per-field overrides (e.g. from the command line)
    """
    data = load_config(filename or DEFAULT_SETTINGS_FILE, strict=strict)
    return game_config_from_settings(data, **overrides)


def game_config_from_settings(data, **overrides) -> GameConfig:
    """
    Flatten the ``gameplay`` section of loaded settings over the GameConfig
    defaults. Unknown keys are reported and ignored; an empty or
    non-mapping section falls back to the defaults.
    """
    gameplay = settings_section(data, "gameplay")

    unknown = set(gameplay) - GameConfig.field_names()
    for key in sorted(unknown):
        DebugLogger.warn(f"Unknown gameplay setting '{key}' ignored", category="loading")

    gameplay.update(overrides)
    config = GameConfig.from_dict(gameplay)
    DebugLogger.init_entry("GameConfig")
    return config


def settings_section(data, name):
    """Return a copy of one top-level settings section, or {} if it is empty."""
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        DebugLogger.warn(f"Settings section '{name}' is not a mapping - using defaults",
                         category="loading")
        return {}
    return dict(value)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_path(filename):
    """Return filename if it exists, else its location under DATA_ROOT."""
    if os.path.isabs(filename) or os.path.exists(filename):
        return filename
    candidate = os.path.join(DATA_ROOT, filename.replace("\\", "/").lstrip("/"))
    if os.path.exists(candidate):
        return candidate
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
