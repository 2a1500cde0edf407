"""
Layered configuration for docstore.

Sources, lowest to highest precedence: built-in defaults, consumer defaults,
a YAML or JSON file, then ``DOCSTORE_SECTION__KEY`` environment variables.

Usage:
    config = Config(config_file="docstore.yaml")
    config.get("logging.level")
    config.get_bool("store.utc_timestamps")
"""

import copy
import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .types import ConfigDict, PathLike

_DEFAULT_ENV_PREFIX = "DOCSTORE_"

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _builtin_defaults() -> ConfigDict:
    return {
        "store": {"utc_timestamps": True},
        "logging": {"level": "WARNING", "file": None},
    }


def _merge(target: dict, source: dict) -> None:
    """Merge *source* into *target* in place, descending into nested dicts."""
    for key, value in source.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge(target[key], value)
        else:
            target[key] = value


def _read_file(path: str) -> ConfigDict:
    ext = os.path.splitext(path)[1].lower()
    if ext not in (".yaml", ".yml", ".json"):
        return {}
    with open(path) as f:
        data = json.load(f) if ext == ".json" else yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
    return data


def _env_overrides(prefix: str) -> ConfigDict:
    """Nest ``PREFIX_A__B=value`` variables as ``{"a": {"b": "value"}}``."""
    overrides: ConfigDict = {}
    if not prefix:
        return overrides
    for env_key, env_value in os.environ.items():
        if not env_key.startswith(prefix):
            continue
        *parents, leaf = env_key[len(prefix) :].lower().split("__")
        node = overrides
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = env_value
    return overrides


class Config:
    """
    Read-only view over the merged configuration sources.

    Env vars use double-underscore to denote nesting:
    DOCSTORE_LOGGING__LEVEL=DEBUG -> config["logging"]["level"] = "DEBUG"
    """

    def __init__(
        self,
        config_file: PathLike | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: ConfigDict | None = None,
    ):
        """
        Args:
            config_file: Path to a YAML or JSON file. Missing files are ignored.
            env_prefix: Prefix for environment variable overrides; empty disables them.
            defaults: Consumer defaults layered over the built-in ones.
        """
        self.config_file = str(config_file) if config_file else None
        self.env_prefix = env_prefix or ""

        self.config_data = _builtin_defaults()
        _merge(self.config_data, copy.deepcopy(defaults or {}))
        if self.config_file and os.path.exists(self.config_file):
            _merge(self.config_data, _read_file(self.config_file))
        _merge(self.config_data, _env_overrides(self.env_prefix))

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value by dot-notation path, e.g. ``"logging.level"``."""
        current: Any = self.config_data
        for part in key_path.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_bool(self, key_path: str, default: bool = False) -> bool:
        """Get a boolean value, accepting the string forms env vars arrive as.

        Raises:
            ConfigurationError: If the stored value is not a recognisable boolean.
        """
        value = self.get(key_path, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise ConfigurationError(f"Expected a boolean for '{key_path}', got {value!r}")
