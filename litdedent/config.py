"""Configuration: project-level defaults for the dedent pass.

Read from a ``.litdedent.yaml`` file, found by walking up from the working
directory. Every key is optional::

    atomic: true       # roll back a literal's segments on violation
    fail_fast: false   # stop checking at the first error
    json_indent: 2     # indentation of the JSON tree written by `apply`
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILENAME = ".litdedent.yaml"


class ConfigError(ValueError):
    """The config file is unreadable or holds unknown/mistyped keys."""


@dataclass
class DedentConfig:
    atomic: bool = False
    fail_fast: bool = False
    json_indent: int = 2


FIELD_TYPES = {"atomic": bool, "fail_fast": bool, "json_indent": int}


def load_config(path: str | Path) -> DedentConfig:
    """Load a DedentConfig from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}") from e

    if data is None:
        return DedentConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    unknown = sorted(set(data) - set(FIELD_TYPES))
    if unknown:
        raise ConfigError(f"{path}: unknown key(s): {', '.join(unknown)}")

    for key, value in data.items():
        expected = FIELD_TYPES[key]
        # bool is an int subclass; reject it for int fields
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"{path}: '{key}' must be {expected.__name__}, got {value!r}")

    return DedentConfig(**data)


def find_config(start_dir: str | Path = ".") -> Path | None:
    """Return the nearest config file in ``start_dir`` or its parents."""
    current = Path(start_dir).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(path: str | Path | None = None, start_dir: str | Path = ".") -> DedentConfig:
    """Explicit path first, then a discovered file, then defaults."""
    if path is not None:
        return load_config(path)
    found = find_config(start_dir)
    return load_config(found) if found else DedentConfig()
