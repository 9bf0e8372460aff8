"""Python-standard logging configuration for mw-lib.

This module provides centralized logging setup using
logging.config.dictConfig() with YAML configuration files stored in
mw_lib/config/. Library modules only ever call logging.getLogger(__name__);
applications call setup_logging() once at start-up.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Any, cast

import yaml

from mw_lib.errors import LoggingError

CONFIG_DIR = Path(__file__).parent / "config"

_ENVIRONMENT_ALIASES = {
    "dev": "dev",
    "development": "dev",
    "test": "test",
    "prod": "prod",
    "production": "prod",
}


def get_config_path(
    config_name: str | None = None, environment: str | None = None
) -> Path:
    """Get the path to a logging configuration file.

    Args:
        config_name: Name of config file (without extension)
        environment: Environment (dev, test, prod) for environment-specific configs

    Returns:
        Path to the logging configuration file

    Raises:
        LoggingError: If no suitable configuration file is found

    """
    if config_name:
        config_file = f"{config_name}.yaml"
    elif environment:
        config_file = f"logging-{environment}.yaml"
    else:
        env = _ENVIRONMENT_ALIASES.get(os.getenv("MW_ENV", "").lower())
        config_file = f"logging-{env}.yaml" if env else "logging.yaml"

    config_path = CONFIG_DIR / config_file

    # Fallback to default if specific config doesn't exist
    if not config_path.exists() and config_file != "logging.yaml":
        config_path = CONFIG_DIR / "logging.yaml"

    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}"
        )

    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return cast(dict[str, Any], config)

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def _override_level(config: dict[str, Any], level: str) -> None:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")

    level = level.upper()
    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Only lower handler levels, so a more verbose override is not filtered out
    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "level" in handler_config:
            current = getattr(logging, str(handler_config["level"]), logging.INFO)
            if numeric_level < current:
                handler_config["level"] = level


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    environment: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Falls back to basic console logging if the configuration cannot be
    applied.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment for config selection (dev, test, prod)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path(environment=environment)

        config = load_config(config_path)
        if level:
            _override_level(config, level)

        logging.config.dictConfig(config)

        logging.getLogger(__name__).debug("Logging configured from: %s", config_path)

    except (LoggingError, KeyError, ValueError, TypeError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        logging.getLogger(__name__).warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _setup_basic_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )
