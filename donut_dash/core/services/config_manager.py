"""
config_manager.py
-----------------
Reads settings override files and applies them to the settings classes.

Supported formats (chosen by suffix):
- .yaml / .yml   parsed with yaml.safe_load
- .json
- .py            executed; its SETTINGS dict is used

Relative names are looked up in the working directory first, then in the
packaged config directory. Keys named '_notes' are comments and are skipped
everywhere.

Override files are nested by section, matching SETTINGS_SECTIONS:

    enemy:
      spawn_chance: 0.5
    boss:
      max_health: 400
"""

import json
import runpy
from pathlib import Path

import yaml

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import SETTINGS_SECTIONS


PACKAGE_CONFIG_ROOT = Path(__file__).resolve().parents[2] / "config"

SEARCH_DIRS = [
    Path("."),
    PACKAGE_CONFIG_ROOT,
    PACKAGE_CONFIG_ROOT / "ui",
]

NOTES_KEY = "_notes"


# ===========================================================
# Loading
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Read a config file and merge it over default_dict.

    Args:
        filename: Name or path of a .yaml, .yml, .json or .py file
        default_dict: Values used for anything the file does not set
        strict: Raise instead of falling back to the defaults

    Returns:
        dict: default_dict with the file's values merged in

    Raises:
        FileNotFoundError: strict and the file is missing or unusable
    """
    defaults = default_dict or {}
    path = resolve_path(filename)

    try:
        data = _read(path)
        if not isinstance(data, dict):
            raise ValueError(f"top level of {path.name} is {type(data).__name__}, expected a mapping")
    except (OSError, ValueError, yaml.YAMLError) as e:
        if strict:
            raise FileNotFoundError(f"Config not usable: {filename} ({e})") from e
        DebugLogger.warn(f"Config {filename} skipped: {e}", category="loading")
        return dict(defaults)

    DebugLogger.system(f"Loaded {path.name}", category="loading")
    return _merge_dicts(defaults, data)


def resolve_path(filename) -> Path:
    """First existing candidate for filename; the name itself if none exist."""
    path = Path(filename)
    if path.is_absolute() or path.exists():
        return path

    for directory in SEARCH_DIRS:
        candidate = directory / path
        if candidate.exists():
            return candidate
    return path


def _read(path: Path):
    suffix = path.suffix.lower()

    if suffix == ".py":
        if not path.exists():
            raise FileNotFoundError(str(path))
        try:
            namespace = runpy.run_path(str(path))
        except SyntaxError as e:
            raise ValueError(f"syntax error in {path.name}: {e}") from e
        return namespace.get("SETTINGS", {})

    with path.open("r", encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
            return {} if data is None else data
        # json.JSONDecodeError is a ValueError
        return json.load(f)


def _merge_dicts(base, override):
    """Nested merge; override wins, mappings merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


# ===========================================================
# Settings Overrides
# ===========================================================

def apply_settings_overrides(overrides):
    """
    Write {section: {key: value}} onto the settings classes.

    Section and key names are case-insensitive. Anything that does not name
    an existing setting is reported and skipped.

    Returns:
        int: Number of settings changed
    """
    applied = 0

    for section_name, values in overrides.items():
        if section_name == NOTES_KEY:
            continue

        # YAML allows non-string keys such as `1:`
        section = SETTINGS_SECTIONS.get(str(section_name).lower())
        if section is None:
            DebugLogger.warn(f"Unknown settings section '{section_name}'", category="loading")
            continue
        if not isinstance(values, dict):
            DebugLogger.warn(f"Settings section '{section_name}' is not a mapping", category="loading")
            continue

        for key, value in values.items():
            attr = str(key).upper()
            if not hasattr(section, attr):
                DebugLogger.warn(f"Unknown setting {section_name}.{key}", category="loading")
                continue
            setattr(section, attr, value)
            applied += 1

    if applied:
        DebugLogger.system(f"Applied {applied} setting override(s)", category="loading")
    return applied
