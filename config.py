"""
Project configuration for dep-tree.

Settings come from, in increasing priority: built-in defaults, a project
file (`.deptree.yaml`, `.deptree.yml`, or `[tool.deptree]` in
`pyproject.toml`), and command-line options.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


logger = logging.getLogger(__name__)

FORMATS = ("tree", "dot", "json")
STYLES = ("tree", "ascii")

DEFAULT_CONFIG: Dict[str, Any] = {
    "format": "tree",
    "entries": [],
    "external": False,
    "builtin": False,
    "depth": None,
    "color": True,
    "style": "tree",
}

YAML_CONFIG_FILES = (".deptree.yaml", ".deptree.yml")
PYPROJECT_FILE = "pyproject.toml"
PYPROJECT_SECTION = "deptree"


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def _read_pyproject(path: Path) -> Optional[Dict[str, Any]]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    section = data.get("tool", {}).get(PYPROJECT_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION}] in {path} must be a table")
    return section


def find_config_file(root: Path) -> Optional[Path]:
    """
    Locate the project configuration file in root.

    Returns:
        Path of the first YAML file found, else pyproject.toml if it has a
        `[tool.deptree]` table, else None.
    """
    for name in YAML_CONFIG_FILES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    pyproject = root / PYPROJECT_FILE
    if not pyproject.is_file():
        return None
    try:
        section = _read_pyproject(pyproject)
    except ConfigError as e:
        # pyproject.toml belongs to other tools too, so a broken one is skipped
        logger.warning("Ignoring %s: %s", pyproject, e)
        return None
    return pyproject if section is not None else None


def validate(settings: Dict[str, Any], source: str = "config") -> Dict[str, Any]:
    """
    Check setting types and values.

    Unknown keys are dropped with a warning.

    Args:
        settings: Raw settings mapping.
        source: Where the settings came from, for error messages.

    Returns:
        A new mapping with only recognised keys.

    Raises:
        ConfigError: If a value has the wrong type or is out of range.
    """
    result: Dict[str, Any] = {}
    for key, value in settings.items():
        if key not in DEFAULT_CONFIG:
            logger.warning("%s: ignoring unknown setting %r", source, key)
            continue

        if key == "format" and value not in FORMATS:
            raise ConfigError(f"{source}: format must be one of {', '.join(FORMATS)}, got {value!r}")
        if key == "style" and value not in STYLES:
            raise ConfigError(f"{source}: style must be one of {', '.join(STYLES)}, got {value!r}")
        if key in ("external", "builtin", "color") and not isinstance(value, bool):
            raise ConfigError(f"{source}: {key} must be true or false, got {value!r}")
        if key == "entries":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{source}: entries must be a list of paths")
        if key == "depth" and value is not None:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{source}: depth must be a non-negative integer, got {value!r}")

        result[key] = value
    return result


def load_config(root: Path) -> Dict[str, Any]:
    """
    Load settings for a project, merged over the defaults.

    Args:
        root: Project root directory.

    Returns:
        Complete settings mapping.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    config = dict(DEFAULT_CONFIG)
    path = find_config_file(Path(root))
    if path is None:
        return config

    if path.name == PYPROJECT_FILE:
        raw = _read_pyproject(path) or {}
    else:
        raw = _read_yaml(path)

    logger.debug("Loaded configuration from %s", path)
    config.update(validate(raw, source=str(path)))
    return config


def merge_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return config with every non-None override applied."""
    merged = dict(config)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged
