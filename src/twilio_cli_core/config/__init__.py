"""Configuration module.

Exports the profile/configuration model, the read-only file loader, the
per-invocation ``CommandContext`` and the profile resolver.
"""
from __future__ import annotations

from twilio_cli_core.config.context import CommandContext
from twilio_cli_core.config.loader import default_config_dir, load_config
from twilio_cli_core.config.models import ConfigData, Profile
from twilio_cli_core.config.resolver import profile_from_environment, resolve_profile

__all__ = [
    "CommandContext",
    "ConfigData",
    "Profile",
    "default_config_dir",
    "load_config",
    "profile_from_environment",
    "resolve_profile",
]
