"""Profile resolution.

Turns an optional ``-p`` value plus the loaded configuration into the
``Profile`` a command should run against.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from twilio_cli_core.config.models import ConfigData, Profile
from twilio_cli_core.errors import NoProfileError

logger = logging.getLogger(__name__)


def profile_from_environment(environ: Mapping[str, str]) -> Profile | None:
    """Build an in-memory profile from ``TWILIO_*`` environment variables.

    An API key pair takes precedence over an auth token. Returns ``None``
    unless ``TWILIO_ACCOUNT_SID`` and one complete credential form are set.
    """
    account_sid = environ.get("TWILIO_ACCOUNT_SID")
    if not account_sid:
        return None

    region = environ.get("TWILIO_REGION") or None
    api_key = environ.get("TWILIO_API_KEY")
    api_secret = environ.get("TWILIO_API_SECRET")
    if api_key and api_secret:
        return Profile(
            id="${TWILIO_API_KEY}/${TWILIO_API_SECRET}",
            account_sid=account_sid,
            region=region,
            api_key=api_key,
            api_secret=api_secret,
        )

    auth_token = environ.get("TWILIO_AUTH_TOKEN")
    if auth_token:
        return Profile(
            id="${TWILIO_ACCOUNT_SID}/${TWILIO_AUTH_TOKEN}",
            account_sid=account_sid,
            region=region,
            api_key=account_sid,
            api_secret=auth_token,
        )
    return None


def resolve_profile(
    config: ConfigData,
    profile_name: str | None = None,
    *,
    bin_name: str = "twilio",
    environ: Mapping[str, str] | None = None,
) -> Profile:
    """Return the profile a command should use.

    Parameters
    ----------
    config:
        The loaded user configuration.
    profile_name:
        Profile explicitly requested with ``-p``, or ``None`` for the default.
    bin_name:
        Executable name used in remediation hints.
    environ:
        Environment used for the environment profile. Defaults to ``os.environ``.

    Returns
    -------
    Profile
        The matching profile.

    Raises
    ------
    NoProfileError
        If the requested or default profile does not exist.
    """
    if profile_name:
        profile = config.get_profile_by_id(profile_name)
        if profile is None:
            raise NoProfileError(profile_name, explicit=True, bin_name=bin_name)
        return profile

    profile = profile_from_environment(os.environ if environ is None else environ)
    if profile is not None:
        logger.debug("Using credentials from environment variables")
        return profile

    profile = config.get_active_profile()
    if profile is None:
        raise NoProfileError(config.active_profile, explicit=False, bin_name=bin_name)
    return profile
