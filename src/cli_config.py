"""Runtime settings assembled from CLI flags, environment and config file.

Precedence: CLI flags > environment variables > YAML config file > defaults.
Invalid values are logged and ignored so a bad setting never breaks the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Resolved runtime settings."""

    api_url: str = Constants.SPRING_API
    default_java: str = Constants.DEFAULT_JAVA
    verify_version: bool = False
    backup_dir: str = Constants.DEFAULT_BACKUP_DIR
    request_timeout: float = Constants.REQUEST_TIMEOUT

    @property
    def backup_path(self) -> str:
        return os.path.expanduser(self.backup_dir)


def parse_bool(value: Any) -> bool:
    """Interpret a boolean-like value; any non-empty value not in FALSY_VALUES is true."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() not in Constants.FALSY_VALUES


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML config file; missing or unreadable files yield {}."""
    if not path:
        return {}
    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Failed to load config: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level must be a mapping", path)
        return {}
    # Accept either a flat mapping or one nested under "spring_cli"
    section = data.get("spring_cli", data)
    return section if isinstance(section, dict) else {}


def _apply(settings: Settings, key: str, value: Any, source: str) -> None:
    if value is None or value == "":
        return
    try:
        if key == "api_url":
            settings.api_url = str(value).rstrip("/")
        elif key == "default_java":
            settings.default_java = str(value).strip()
        elif key == "verify_version":
            settings.verify_version = parse_bool(value)
        elif key == "backup_dir":
            settings.backup_dir = str(value)
        elif key == "request_timeout":
            timeout = float(value)
            if timeout <= 0:
                raise ValueError("timeout must be positive")
            settings.request_timeout = timeout
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid %s value for %s: %s", source, key, exc)


_ENV_KEYS = {
    "api_url": Constants.ENV_API_URL,
    "default_java": Constants.ENV_DEFAULT_JAVA,
    "verify_version": Constants.ENV_VERIFY_VERSION,
    "backup_dir": Constants.ENV_BACKUP_DIR,
    "request_timeout": Constants.ENV_TIMEOUT,
}

_ARG_KEYS = {
    "api_url": "API_URL",
    "default_java": "DEFAULT_JAVA",
    "verify_version": "VERIFY_VERSION",
    "backup_dir": "BACKUP_DIR",
    "request_timeout": "TIMEOUT",
}


def load_settings(args: Any = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the config file, environment and parsed CLI args."""
    environ = os.environ if environ is None else environ
    settings = Settings()

    file_values = load_config_file(getattr(args, "CONFIG", None))
    for key in _ENV_KEYS:
        _apply(settings, key, file_values.get(key), "config file")

    for key, env_name in _ENV_KEYS.items():
        if env_name in environ:
            raw = environ[env_name]
            if key == "verify_version":
                # Presence of a non-empty value is the toggle
                settings.verify_version = parse_bool(raw)
            else:
                _apply(settings, key, raw, "environment")

    for key, attr in _ARG_KEYS.items():
        value = getattr(args, attr, None)
        if key == "verify_version" and value is False:
            continue
        _apply(settings, key, value, "command line")

    return settings
