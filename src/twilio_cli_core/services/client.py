"""Authenticated client handle construction."""
from __future__ import annotations

from dataclasses import dataclass, field

from twilio_cli_core.config.models import Profile
from twilio_cli_core.services.credentials import Credentials


@dataclass(frozen=True)
class TwilioClient:
    """Read-only view of the coordinates an API client authenticates with.

    The REST client library itself is built from these fields by the host;
    ``username`` is the API key and ``password`` the API secret.
    """

    account_sid: str
    username: str
    password: str = field(repr=False)
    region: str | None = None


def build_client(profile: Profile, credentials: Credentials, account_sid: str | None = None) -> TwilioClient:
    """Combine a profile and its credentials into a ``TwilioClient``.

    Parameters
    ----------
    profile:
        The resolved profile.
    credentials:
        The key pair retrieved for the profile.
    account_sid:
        Optional ``--account-sid`` override; takes precedence over the
        profile's own SID. Its format is validated when flags are parsed.
    """
    return TwilioClient(
        account_sid=account_sid if account_sid is not None else profile.account_sid,
        username=credentials.api_key,
        password=credentials.api_secret,
        region=profile.region,
    )
