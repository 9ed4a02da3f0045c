#!/usr/bin/env python3
"""
Settings Loader - optional YAML settings for the receipt analyzer

Example settings.yaml:

    url: https://example.com/receipt.json
    timeout: 5
    allow_empty: true
    log_level: INFO

Precedence (lowest to highest): config.py defaults, YAML file,
RECEIPT_ANALYZER_URL environment variable, CLI flags.
"""

import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import LOGGING, RECEIPT_URL, RECEIPT_URL_ENV, REPORT, REQUEST_TIMEOUT
from .errors import ConfigError

logger = logging.getLogger(__name__)

KNOWN_KEYS = ('url', 'timeout', 'allow_empty', 'log_level')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Settings:
    url: str = RECEIPT_URL
    timeout: Optional[float] = REQUEST_TIMEOUT
    allow_empty: bool = REPORT['allow_empty']
    log_level: str = LOGGING['level']


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML mapping; an empty file is an empty mapping"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {file_path} must contain a mapping")
    return data


def _validate(values: Dict[str, Any]) -> Dict[str, Any]:
    unknown = sorted(set(values) - set(KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

    if 'url' in values and (not isinstance(values['url'], str) or not values['url']):
        raise ConfigError("Setting 'url' must be a non-empty string")

    if 'timeout' in values:
        timeout = values['timeout']
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ConfigError("Setting 'timeout' must be a positive number or null")
            if (isinstance(timeout, float) and not math.isfinite(timeout)) or timeout <= 0:
                raise ConfigError("Setting 'timeout' must be a positive number or null")

    if 'allow_empty' in values and not isinstance(values['allow_empty'], bool):
        raise ConfigError("Setting 'allow_empty' must be true or false")

    if 'log_level' in values:
        level = str(values['log_level']).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Setting 'log_level' must be one of {', '.join(LOG_LEVELS)}")
        values = dict(values, log_level=level)

    return values


def load_settings(config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment

    Args:
        config_path: YAML settings file (optional)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigError: if the file cannot be read or holds invalid values
    """
    settings = Settings()

    if config_path is not None:
        values = _validate(_load_yaml_file(Path(config_path)))
        settings = replace(settings, **values)
        logger.debug(f"Loaded settings from {config_path}: {values}")

    environ = os.environ if environ is None else environ
    env_url = environ.get(RECEIPT_URL_ENV)
    if env_url:
        logger.debug(f"Using receipt URL from {RECEIPT_URL_ENV}")
        settings = replace(settings, url=env_url)

    return settings
