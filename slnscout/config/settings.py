"""
Discovery policy configuration.

``DiscoveryConfig`` is what the core receives. ``load_config`` builds one from
the YAML file at ``$SLNSCOUT_HOME/config/slnscout.yaml`` (or
``SLNSCOUT_CONFIG_FILE``), e.g.::

    broad_search: true
    debug: false
    ignore_targets:
      - "*/legacy/*.sln"
    prefer_targets:
      - "*/Main.sln"
      - "*.slnf"
"""

import fnmatch
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional

import yaml

from slnscout.config.constants import (
    BROAD_SEARCH_DEFAULT,
    CONFIG_FILE_NAME,
    DEBUG_DEFAULT,
    SLNSCOUT_CONFIG_FILE,
    SLNSCOUT_HOME,
)
from slnscout.utils.logger import log_debug, log_error


@dataclass
class DiscoveryConfig:
    """Options affecting discovery policy.

    Attributes:
        broad_search: Explore the whole subtree instead of listing the solution directory
        ignore_target: Predicate excluding a target; None keeps every target
        choose_target: Selector among several targets; None defers to the caller
        debug: Emit verbose traversal traces
    """

    broad_search: bool = False
    ignore_target: Optional[Callable[[Path], bool]] = None
    choose_target: Optional[Callable[[List[Path]], Optional[Path]]] = None
    debug: bool = False
    validation_errors: List[str] = field(default_factory=list)


def ignore_by_patterns(patterns: List[str]) -> Callable[[Path], bool]:
    """Predicate matching a target path against any glob pattern."""

    def predicate(target: Path) -> bool:
        path = target.as_posix()
        return any(fnmatch.fnmatch(path, pattern) for pattern in patterns)

    return predicate


def choose_by_patterns(patterns: List[str]) -> Callable[[List[Path]], Optional[Path]]:
    """Selector returning the first target matching the earliest pattern."""

    def choose(targets: List[Path]) -> Optional[Path]:
        for pattern in patterns:
            for target in targets:
                if fnmatch.fnmatch(target.as_posix(), pattern):
                    return target
        return None

    return choose


def get_config_file_path() -> Path | None:
    """Config file from SLNSCOUT_CONFIG_FILE, else under SLNSCOUT_HOME."""
    if SLNSCOUT_CONFIG_FILE:
        return Path(SLNSCOUT_CONFIG_FILE)
    if SLNSCOUT_HOME:
        return Path(SLNSCOUT_HOME) / "config" / CONFIG_FILE_NAME
    return None


def _load_raw_config(config_file: Path | None) -> dict[str, Any]:
    if config_file is None:
        return {}
    try:
        if config_file.exists():
            with open(config_file, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        log_debug(f"No config file found at {config_file}, using defaults")
    except (OSError, yaml.YAMLError) as e:
        log_error(f"Error loading configuration from {config_file}: {str(e)}")
    return {}


def _string_list(raw: dict[str, Any], key: str, errors: List[str]) -> List[str]:
    value = raw.get(key, [])
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        errors.append(f"'{key}' must be a list of glob patterns")
        return []
    return value


def _bool(raw: dict[str, Any], key: str, default: bool, errors: List[str]) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        errors.append(f"'{key}' must be a boolean")
        return default
    return value


def load_config(config_file: Path | None = None) -> DiscoveryConfig:
    """Build a DiscoveryConfig from YAML, falling back to defaults on any error."""
    if config_file is None:
        config_file = get_config_file_path()
    raw = _load_raw_config(config_file)

    errors: List[str] = []
    if not isinstance(raw, dict):
        errors.append("Configuration root must be a mapping")
        raw = {}

    ignore_patterns = _string_list(raw, "ignore_targets", errors)
    prefer_patterns = _string_list(raw, "prefer_targets", errors)
    config = DiscoveryConfig(
        broad_search=_bool(raw, "broad_search", BROAD_SEARCH_DEFAULT, errors),
        ignore_target=ignore_by_patterns(ignore_patterns) if ignore_patterns else None,
        choose_target=choose_by_patterns(prefer_patterns) if prefer_patterns else None,
        debug=_bool(raw, "debug", DEBUG_DEFAULT, errors),
        validation_errors=errors,
    )

    for error in errors:
        log_error(f"Invalid configuration in {config_file}: {error}")
    return config
