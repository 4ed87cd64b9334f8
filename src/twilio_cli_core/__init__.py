"""twilio-cli-core — profile resolution, client credentials and property updates for CLI commands.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import twilio_cli_core as core

    config = core.ConfigData()
    config.add_profile("MyFirstProfile", "ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx")

    profile = core.resolve_profile(config)
    client = core.build_client(profile, core.Credentials("SK...", "secret"))

    core.parse_properties({"friendly-name": None}, {"friendly-name": "Casper"})
    # {'friendlyName': 'Casper'}

    core.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from twilio_cli_core.commands import (  # noqa: E402
    BaseCommand,
    CommandState,
    TwilioClientCommand,
    UpdateResult,
    camel_case,
    parse_properties,
    update_resource,
)
from twilio_cli_core.config import (  # noqa: E402
    CommandContext,
    ConfigData,
    Profile,
    load_config,
    resolve_profile,
)
from twilio_cli_core.errors import (  # noqa: E402
    ConfigError,
    CredentialStoreError,
    NoProfileError,
    ProgrammerError,
    ResourceUpdateError,
    TwilioCliError,
    UnexpectedRuntimeError,
)
from twilio_cli_core.services import (  # noqa: E402
    CredentialProvider,
    Credentials,
    NullCredentialProvider,
    StaticCredentialProvider,
    TwilioClient,
    build_client,
)

__all__ = [
    "__version__",
    # Commands
    "BaseCommand",
    "CommandState",
    "TwilioClientCommand",
    "UpdateResult",
    "camel_case",
    "parse_properties",
    "update_resource",
    # Configuration
    "CommandContext",
    "ConfigData",
    "Profile",
    "load_config",
    "resolve_profile",
    # Services
    "CredentialProvider",
    "Credentials",
    "NullCredentialProvider",
    "StaticCredentialProvider",
    "TwilioClient",
    "build_client",
    # Errors
    "ConfigError",
    "CredentialStoreError",
    "NoProfileError",
    "ProgrammerError",
    "ResourceUpdateError",
    "TwilioCliError",
    "UnexpectedRuntimeError",
]
