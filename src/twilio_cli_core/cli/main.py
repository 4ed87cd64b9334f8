"""CLI entry point for twilio-cli-core.

Invoked as::

    twilio-core [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m twilio_cli_core.cli.main

Commands
--------
profiles    List the configured profiles (read-only)
version     Show version information
"""
from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from twilio_cli_core.errors import TwilioCliError

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="twilio-cli-core")
def cli() -> None:
    """Profile and client plumbing shared by twilio CLI commands."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from twilio_cli_core import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]twilio-cli-core[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# profiles command
# ---------------------------------------------------------------------------


@cli.command(name="profiles")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file to read (defaults to ~/.twilio-cli/config.json).",
)
def profiles_command(config_path: str | None) -> None:
    """List configured profiles and mark the active one."""
    from twilio_cli_core.config import load_config

    try:
        config = load_config(config_path)
    except TwilioCliError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(exc.exit_code)

    if not config.profiles:
        err_console.print(
            "[yellow]No profiles have been configured.[/yellow] "
            "To add the profile, run: twilio profiles:add",
            soft_wrap=True,
        )
        return

    active = config.get_active_profile()
    table = Table(title="Profiles")
    table.add_column("ID", style="bold")
    table.add_column("Account SID")
    table.add_column("Region")
    table.add_column("Active")
    for profile in config.profiles.values():
        table.add_row(
            escape(profile.id),
            profile.account_sid,
            profile.region or "",
            "true" if active is not None and profile.id == active.id else "",
        )
    console.print(table)


if __name__ == "__main__":
    cli()
