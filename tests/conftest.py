"""Shared test fixtures for twilio-cli-core.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from twilio_cli_core.config import CommandContext, ConfigData
from twilio_cli_core.services.credentials import Credentials
from twilio_cli_core.services.logging import configure_logging

FAKE_ACCOUNT_SID = "AC" + "x" * 32
FAKE_API_KEY = "SK" + "y" * 32
FAKE_API_SECRET = "unguessable-secret-"


class FakeSecureStorage:
    """Credential store returning a secret derived from the profile id."""

    def __init__(self) -> None:
        self.requested: list[str] = []

    async def get_credentials(self, profile_id: str) -> Credentials:
        self.requested.append(profile_id)
        return Credentials(api_key=FAKE_API_KEY, api_secret=FAKE_API_SECRET + profile_id)


@pytest.fixture(autouse=True)
def _reset_log_level() -> None:
    """Every test starts at the default ``info`` level."""
    configure_logging("info")


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def user_config() -> ConfigData:
    config = ConfigData()
    config.add_profile("MyFirstProfile", FAKE_ACCOUNT_SID)
    config.add_profile("twilio-cli-unit-testing", FAKE_ACCOUNT_SID, "stage")
    return config


@pytest.fixture()
def context(user_config: ConfigData) -> CommandContext:
    return CommandContext(user_config=user_config, bin_name="twilio", environ={})


@pytest.fixture()
def secure_storage() -> FakeSecureStorage:
    return FakeSecureStorage()


@pytest.fixture()
def fakes() -> SimpleNamespace:
    """Fake account coordinates shared by command tests."""
    return SimpleNamespace(
        account_sid=FAKE_ACCOUNT_SID,
        api_key=FAKE_API_KEY,
        api_secret=FAKE_API_SECRET,
    )
