"""Read-only loader for the user configuration file.

The file lives at ``~/.twilio-cli/config.json`` unless the
``TWILIO_CONFIG_DIR`` environment variable points elsewhere. It is JSON,
which PyYAML's safe loader reads as-is.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from twilio_cli_core.config.models import ConfigData
from twilio_cli_core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def default_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the configuration directory for the current user."""
    env = os.environ if environ is None else environ
    override = env.get("TWILIO_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".twilio-cli"


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> ConfigData:
    """Load the configuration file into a ``ConfigData``.

    Parameters
    ----------
    path:
        Explicit file path. Defaults to ``config.json`` in
        :func:`default_config_dir`.
    environ:
        Environment mapping used to locate the default directory.

    Returns
    -------
    ConfigData
        The parsed configuration; empty when the file does not exist.

    Raises
    ------
    ConfigError
        If the file cannot be read or does not describe profiles.
    """
    config_path = Path(path) if path is not None else default_config_dir(environ) / CONFIG_FILE_NAME
    if not config_path.exists():
        logger.debug("No configuration file at %s; using empty configuration", config_path)
        return ConfigData()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Configuration file {config_path} is not valid JSON: {exc}",
            hint="Fix or remove the file, then add your profiles again.",
        ) from exc

    if data is None:
        return ConfigData()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {config_path} must contain an object")

    try:
        config = ConfigData.from_dict(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc

    logger.debug("Loaded %d profile(s) from %s", len(config.profiles), config_path)
    return config
