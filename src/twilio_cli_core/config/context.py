"""Per-invocation command context."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from twilio_cli_core.config.loader import load_config
from twilio_cli_core.config.models import ConfigData


@dataclass
class CommandContext:
    """Everything a command reads from its surroundings.

    Parameters
    ----------
    user_config:
        The loaded configuration. Read-only for the command's lifetime.
    bin_name:
        Executable name shown in remediation hints.
    environ:
        Environment variables visible to the command.
    """

    user_config: ConfigData = field(default_factory=ConfigData)
    bin_name: str = "twilio"
    environ: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_environment(cls, bin_name: str = "twilio") -> "CommandContext":
        """Load the user's configuration file and capture ``os.environ``."""
        environ = dict(os.environ)
        return cls(user_config=load_config(environ=environ), bin_name=bin_name, environ=environ)
