"""Credential providers.

Defines the ``CredentialProvider`` protocol the command lifecycle consumes
plus two small implementations:

- ``StaticCredentialProvider`` serves credentials from an in-memory mapping;
  hosts use it to bridge their own secret store, tests use it directly.
- ``NullCredentialProvider`` is the default when no store is supplied and
  fails every lookup.

The persistence medium behind a real store (OS keychain, vault, file) is
the host application's concern.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Credentials:
    """An API key pair, scoped to a single command invocation."""

    api_key: str
    api_secret: str = field(repr=False)


@runtime_checkable
class CredentialProvider(Protocol):
    """Protocol for secret stores keyed by profile id."""

    async def get_credentials(self, profile_id: str) -> Credentials:
        """Return the key pair stored for *profile_id*.

        Any exception raised here is reported to the user as a
        ``CredentialStoreError``; the lookup is never retried.
        """
        ...  # pragma: no cover


class StaticCredentialProvider:
    """Serve credentials from a mapping of profile id to ``Credentials``."""

    def __init__(self, credentials: Mapping[str, Credentials] | None = None) -> None:
        self._credentials: dict[str, Credentials] = dict(credentials or {})

    def set_credentials(self, profile_id: str, api_key: str, api_secret: str) -> None:
        self._credentials[profile_id] = Credentials(api_key=api_key, api_secret=api_secret)

    async def get_credentials(self, profile_id: str) -> Credentials:
        try:
            return self._credentials[profile_id]
        except KeyError:
            raise LookupError(f"No credentials stored for profile {profile_id!r}") from None

    def __repr__(self) -> str:
        return f"StaticCredentialProvider(profiles={sorted(self._credentials)})"


class NullCredentialProvider:
    """Provider used when the host supplies no credential store."""

    async def get_credentials(self, profile_id: str) -> Credentials:
        raise LookupError(f"No credential store is available to look up profile {profile_id!r}")
