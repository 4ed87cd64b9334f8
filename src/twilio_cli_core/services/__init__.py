"""Services consumed by commands: credentials, client handles, logging, output."""
from __future__ import annotations

from twilio_cli_core.services.client import TwilioClient, build_client
from twilio_cli_core.services.credentials import (
    CredentialProvider,
    Credentials,
    NullCredentialProvider,
    StaticCredentialProvider,
)

__all__ = [
    "CredentialProvider",
    "Credentials",
    "NullCredentialProvider",
    "StaticCredentialProvider",
    "TwilioClient",
    "build_client",
]
