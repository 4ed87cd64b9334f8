"""Shared click option declarations for commands."""
from __future__ import annotations

import re
from typing import Any

import click

from twilio_cli_core.services.logging import LOG_LEVELS
from twilio_cli_core.services.output import OUTPUT_FORMATS

ACCOUNT_SID_PATTERN = re.compile(r"^AC[0-9a-fA-F]{32}$")


def validate_account_sid(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Click callback rejecting values that are not shaped like an Account SID."""
    if value is None:
        return None
    if not ACCOUNT_SID_PATTERN.match(value):
        raise click.BadParameter(
            f"{value!r} is not a valid Account SID (expected AC followed by 32 hex characters)."
        )
    return value


def log_level_option() -> click.Option:
    return click.Option(
        ["-l", "--log-level"],
        type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
        default="info",
        show_default=True,
        help="Level of logging messages.",
    )


def output_option() -> click.Option:
    return click.Option(
        ["-o", "--output"],
        type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
        default="columns",
        show_default=True,
        help="Format of command output.",
    )


def profile_option() -> click.Option:
    return click.Option(
        ["-p", "--profile"],
        default=None,
        help="Shorthand identifier for your profile.",
    )


def account_sid_option() -> click.Option:
    return click.Option(
        ["--account-sid"],
        default=None,
        callback=validate_account_sid,
        help="Access resources for the specified account.",
    )


def property_option(flag_name: str, field_name: str) -> click.Option:
    """Declare a string option for an updatable resource property."""
    return click.Option(
        [f"--{flag_name}"],
        default=None,
        help=f"Sets the {field_name} property.",
    )


def flag_key(param: click.Parameter) -> str:
    """Key under which a parsed option lands in a command's flags bag."""
    return (param.name or "").replace("_", "-")
