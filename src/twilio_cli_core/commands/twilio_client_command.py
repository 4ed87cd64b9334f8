"""Base class for commands that talk to the API.

Before ``run_command()`` runs, the command resolves its profile, fetches
the profile's credentials from the credential store and exposes the
result as ``self.twilio_client``.

Example
-------
::

    class UpdatePhoneNumber(TwilioClientCommand):
        options = TwilioClientCommand.options + [
            TwilioClientCommand.account_sid_option,
            click.Option(["--sid"], required=True),
        ]
        property_flags = {"friendly-name": None, "sms-url": None}

        async def run_command(self) -> None:
            result = await self.update_resource(numbers_api.get, self.flags["sid"])
            self.output([result.to_dict()])
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

import click

from twilio_cli_core.commands.base_command import BaseCommand, CommandState
from twilio_cli_core.commands.flags import account_sid_option as _account_sid_option
from twilio_cli_core.commands.flags import flag_key, profile_option, property_option
from twilio_cli_core.commands.properties import PropertyFlags, camel_case, parse_properties
from twilio_cli_core.commands.resources import ResourceFactory, UpdateResult, update_resource
from twilio_cli_core.config.context import CommandContext
from twilio_cli_core.config.models import Profile
from twilio_cli_core.config.resolver import resolve_profile
from twilio_cli_core.errors import CredentialStoreError
from twilio_cli_core.services.client import TwilioClient, build_client
from twilio_cli_core.services.credentials import CredentialProvider, Credentials, NullCredentialProvider


class TwilioClientCommand(BaseCommand):
    """A command with an authenticated client for the selected profile.

    Parameters
    ----------
    argv:
        Raw command-line arguments.
    context:
        Configuration and environment for this invocation.
    secure_storage:
        Credential store consulted for stored profiles. Without one, any
        profile that does not embed its own credentials fails to load.
    """

    options: ClassVar[list[click.Parameter]] = BaseCommand.options + [profile_option()]
    account_sid_option: ClassVar[click.Parameter] = _account_sid_option()
    property_flags: ClassVar[PropertyFlags] = {}

    def __init__(
        self,
        argv: Sequence[str],
        context: CommandContext | None = None,
        secure_storage: CredentialProvider | None = None,
    ) -> None:
        super().__init__(argv, context)
        self.secure_storage: CredentialProvider = secure_storage or NullCredentialProvider()
        self.current_profile: Profile | None = None
        self.twilio_client: TwilioClient | None = None

    @classmethod
    def all_options(cls) -> list[click.Parameter]:
        """Declared options plus a generated option for each property flag."""
        params = list(cls.options)
        declared = {flag_key(p) for p in params}
        for flag_name, field_name in cls.property_flags.items():
            if flag_name not in declared:
                params.append(property_option(flag_name, field_name or camel_case(flag_name)))
        return params

    async def prepare(self) -> None:
        config = self.context.user_config
        profile = resolve_profile(
            config,
            self.flags.get("profile"),
            bin_name=self.context.bin_name,
            environ=self.context.environ,
        )
        self.current_profile = profile
        self.state = CommandState.PROFILE_RESOLVED
        self.logger.debug("Using profile: %s", profile.id)

        credentials = await self.get_credentials(profile)
        self.twilio_client = build_client(profile, credentials, self.flags.get("account-sid"))
        self.state = CommandState.CLIENT_BUILT

    async def get_credentials(self, profile: Profile) -> Credentials:
        """Return the profile's key pair.

        Raises
        ------
        CredentialStoreError
            If the credential store fails for any reason.
        """
        if profile.has_embedded_credentials:
            return Credentials(api_key=profile.api_key or "", api_secret=profile.api_secret or "")
        try:
            return await self.secure_storage.get_credentials(profile.id)
        except Exception as exc:  # noqa: BLE001
            self.logger.debug("Credential store failure for %s: %s", profile.id, exc)
            raise CredentialStoreError(profile.id, bin_name=self.context.bin_name) from exc

    def parse_properties(self) -> dict[str, Any] | None:
        """Map this command's property flags onto API field names."""
        return parse_properties(type(self).property_flags, self.flags)

    async def update_resource(
        self,
        resource: ResourceFactory | None,
        resource_sid: str,
        properties: Mapping[str, Any] | None = None,
    ) -> UpdateResult:
        """Update one resource from *properties*, or from the flags if omitted."""
        if properties is None:
            properties = self.parse_properties()
        return await update_resource(resource, resource_sid, properties, logger=self.logger)
