"""Layered fetch settings.

Each layer overrides the one before it: package defaults, the user file
~/.platefetch/config.yaml, the nearest platefetch.yaml at or above the
working directory, PLATEFETCH_* variables, then keyword overrides.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import yaml

from platefetch.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".platefetch" / "config.yaml"
_PROJECT_CONFIG_NAME = "platefetch.yaml"

_ENV_PREFIX = "PLATEFETCH_"


def _parse_flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


_PARSERS: dict[str, Callable[[str], Any]] = {
    "max_concurrency": int,
    "timeout": float,
    "follow_redirects": _parse_flag,
    "user_agent": str,
}

_ENV_MAP: dict[str, str] = {_ENV_PREFIX + key.upper(): key for key in _PARSERS}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Merge every config layer into one flat dict; None overrides are skipped."""
    config = get_defaults()
    for layer in _layers():
        config.update(layer)
    config.update({k: v for k, v in runtime_overrides.items() if v is not None})
    return config


def _layers() -> Iterator[dict[str, Any]]:
    for path in (_GLOBAL_CONFIG_PATH, _find_project_config()):
        if path is not None:
            yield _load_yaml_config(path) or {}
    yield _load_env_vars()


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Skipping unreadable config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping %s: top level must be a mapping", path)
        return None
    return data


def _find_project_config() -> Path | None:
    here = Path.cwd()
    for directory in (here, *here.parents):
        if (directory / _PROJECT_CONFIG_NAME).exists():
            return directory / _PROJECT_CONFIG_NAME
    return None


def _load_env_vars() -> dict[str, Any]:
    return {
        key: _coerce_env_value(key, os.environ[env_key])
        for env_key, key in _ENV_MAP.items()
        if env_key in os.environ
    }


def _coerce_env_value(key: str, value: str) -> Any:
    """Parse a raw env string for `key`; unparseable numbers stay as strings."""
    parse = _PARSERS.get(key, str)
    try:
        return parse(value)
    except ValueError:
        logger.warning(
            "Cannot parse %s%s=%r, keeping the raw string", _ENV_PREFIX, key.upper(), value
        )
        return value
