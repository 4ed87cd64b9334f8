"""Command base classes and the helpers they build on."""
from __future__ import annotations

from twilio_cli_core.commands.base_command import BaseCommand, CommandState
from twilio_cli_core.commands.properties import camel_case, parse_properties
from twilio_cli_core.commands.resources import UpdateResult, update_resource
from twilio_cli_core.commands.twilio_client_command import TwilioClientCommand

__all__ = [
    "BaseCommand",
    "CommandState",
    "TwilioClientCommand",
    "UpdateResult",
    "camel_case",
    "parse_properties",
    "update_resource",
]
