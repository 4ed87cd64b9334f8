"""Base class for every command.

A command is constructed from its raw argument vector and a
``CommandContext``, then driven with ``await command.run()``:

1. flags are parsed with click against the class's ``options``;
2. the log level is applied;
3. ``prepare()`` runs (subclasses resolve profiles and clients here);
4. the concrete ``run_command()`` runs.

Any failure aborts the command: known ``TwilioCliError`` subclasses are
printed with their remediation hint, anything else is reported as an
unexpected error. Both exit with status 1.
"""
from __future__ import annotations

import asyncio
import enum
import logging
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar

import click
from rich.markup import escape

from twilio_cli_core.commands.flags import flag_key, log_level_option, output_option
from twilio_cli_core.config.context import CommandContext
from twilio_cli_core.errors import ProgrammerError, TwilioCliError, UnexpectedRuntimeError
from twilio_cli_core.services import output as output_service
from twilio_cli_core.services.logging import configure_logging, err_console, get_logger


class CommandState(enum.Enum):
    """Lifecycle position of a command invocation."""

    INIT = "init"
    PROFILE_RESOLVED = "profile_resolved"
    CLIENT_BUILT = "client_built"
    RUNNING = "running"
    DONE = "done"
    ABORTED = "aborted"


class BaseCommand:
    """Parses flags, sets up logging and converts failures into exit codes.

    Parameters
    ----------
    argv:
        Raw command-line arguments (without the program name).
    context:
        Configuration and environment for this invocation.

    Raises
    ------
    ProgrammerError
        If the class does not override :meth:`run_command`.
    """

    options: ClassVar[list[click.Parameter]] = [log_level_option(), output_option()]

    def __init__(self, argv: Sequence[str], context: CommandContext | None = None) -> None:
        if type(self).run_command is BaseCommand.run_command:
            raise ProgrammerError(type(self).__name__, "run_command")
        self.argv = list(argv)
        self.context = context if context is not None else CommandContext()
        self.flags: dict[str, Any] = {}
        self.state = CommandState.INIT
        self.logger: logging.Logger = get_logger()

    @property
    def command_id(self) -> str:
        return type(self).__name__

    @classmethod
    def all_options(cls) -> list[click.Parameter]:
        """Return every option this command accepts."""
        return list(cls.options)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def run(self) -> None:
        """Run the whole lifecycle.

        Raises
        ------
        SystemExit
            With a nonzero code when the command aborts.
        """
        try:
            self.parse_flags()
            await self.prepare()
            self.state = CommandState.RUNNING
            await self.run_command()
        except SystemExit:
            self.state = CommandState.ABORTED
            raise
        except Exception as exc:  # noqa: BLE001
            self.catch(exc)
        else:
            self.state = CommandState.DONE

    def parse_flags(self) -> dict[str, Any]:
        """Parse ``argv`` into ``self.flags`` and apply the log level."""
        command = click.Command(self.command_id, params=self.all_options())
        try:
            ctx = command.make_context(self.command_id, list(self.argv))
        except click.exceptions.Exit as exc:
            raise SystemExit(exc.exit_code) from None
        except click.ClickException as exc:
            exc.show()
            raise SystemExit(exc.exit_code) from None

        self.flags = {flag_key(param): ctx.params.get(param.name) for param in command.params if param.name}
        configure_logging(self.flags.get("log-level") or "info")
        return self.flags

    async def prepare(self) -> None:
        """Hook run after flag parsing and before :meth:`run_command`."""

    async def run_command(self) -> None:
        """The command's own logic. Concrete commands must override this."""
        raise ProgrammerError(type(self).__name__, "run_command")

    def catch(self, error: BaseException) -> None:
        """Report *error* and abort with its exit code."""
        self.state = CommandState.ABORTED
        if not isinstance(error, TwilioCliError):
            self.logger.debug("Unhandled %s in %s", type(error).__name__, self.command_id, exc_info=error)
            error = UnexpectedRuntimeError(error)
        self.logger.error(str(error))
        raise SystemExit(error.exit_code) from error

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def output(self, rows: Iterable[Mapping[str, Any]], properties: Iterable[str] | None = None) -> None:
        """Print result records in the format chosen with ``-o``."""
        output_service.render(list(rows), self.flags.get("output") or "columns", properties)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    @classmethod
    def main(cls, argv: Sequence[str] | None = None, context: CommandContext | None = None, **kwargs: Any) -> None:
        """Run the command synchronously, e.g. from a console script."""
        if context is None:
            try:
                context = CommandContext.from_environment()
            except TwilioCliError as exc:
                err_console.print(f"[red]» Error:[/red] {escape(str(exc))}", soft_wrap=True)
                sys.exit(exc.exit_code)
        command = cls(sys.argv[1:] if argv is None else argv, context, **kwargs)
        asyncio.run(command.run())
