"""Logic for loading and merging configuration files."""

import copy
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from greeter_inventory.deep_merge import deep_merge
from greeter_inventory.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "/etc/greetd/greeter-inventory.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "login_defs": "/etc/login.defs",
        "session_dirs": "/usr/share/xsessions:/usr/share/wayland-sessions",
    },
    "sessions": {
        "pattern": "*.desktop",
    },
}

# section -> keys that must hold strings
STRING_KEYS: dict[str, tuple[str, ...]] = {
    "paths": ("login_defs", "session_dirs"),
    "sessions": ("pattern",),
}


def apply_env_overrides(
    config: dict[str, Any], environ: Mapping[str, str]
) -> dict[str, Any]:
    """Apply ``CONFIG_DIR`` and ``SESSIONS_DIR`` from the environment."""
    overrides: dict[str, Any] = {}
    config_dir = environ.get("CONFIG_DIR")
    if config_dir:
        overrides["login_defs"] = str(Path(config_dir) / "login.defs")
    sessions_dir = environ.get("SESSIONS_DIR")
    if sessions_dir:
        overrides["session_dirs"] = sessions_dir
    if not overrides:
        return config
    logger.debug("Environment overrides: %s", overrides)
    return deep_merge(config, {"paths": overrides})


def validate_config(config: dict[str, Any], source: Path | str) -> None:
    """Check that the known sections are mappings of string values."""
    for section, keys in STRING_KEYS.items():
        values = config.get(section)
        if not isinstance(values, dict):
            msg = f"'{section}' in '{source}' must be a mapping, got {values!r}"
            raise ConfigError(msg)
        for key in keys:
            if not isinstance(values.get(key), str):
                msg = (
                    f"'{section}.{key}' in '{source}' must be a string, "
                    f"got {values.get(key)!r}"
                )
                raise ConfigError(msg)


def _read_user_config(p: Path) -> dict[str, Any]:
    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except UnicodeDecodeError as exc:
        msg = f"Config file '{p}' is not UTF-8: {exc}"
        raise ConfigError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"Config file '{p}' is not valid YAML: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(user_config, dict):
        msg = f"Config file '{p}' must contain a mapping at the top level"
        raise ConfigError(msg)
    return user_config


def load_config(
    path: str | None = None, environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file is not an error. Environment overrides are applied last.
    Unparseable files and values of the wrong type raise :class:`ConfigError`.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    source: Path | str = "<defaults>"
    if path:
        p = Path(path)
        if p.exists():
            config = deep_merge(config, _read_user_config(p))
            source = p
            validate_config(config, source)
        else:
            logger.debug("No config file at %s, using defaults", p)
    config = apply_env_overrides(config, os.environ if environ is None else environ)
    validate_config(config, source)
    return config
