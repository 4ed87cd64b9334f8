"""Configuration data model.

A ``ConfigData`` is an ordered collection of ``Profile`` records plus the
name of the active one. Commands only ever read it; writing profiles back
to disk belongs to the profile management commands, not to this core.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Profile:
    """A named set of account coordinates.

    Parameters
    ----------
    id:
        Unique profile name within a configuration.
    account_sid:
        The account SID the profile operates on.
    region:
        Target region, or ``None`` for the default one.
    api_key:
        Embedded API key. Only set for profiles built from environment
        variables; stored profiles keep their secrets in the credential store.
    api_secret:
        Embedded API secret, paired with ``api_key``.
    """

    id: str
    account_sid: str
    region: str | None = None
    api_key: str | None = field(default=None, repr=False)
    api_secret: str | None = field(default=None, repr=False)

    @property
    def has_embedded_credentials(self) -> bool:
        """Return True if the profile carries its own key and secret."""
        return bool(self.api_key and self.api_secret)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the stored fields (never the embedded secrets)."""
        data: dict[str, Any] = {"accountSid": self.account_sid}
        if self.region is not None:
            data["region"] = self.region
        return data


@dataclass
class ConfigData:
    """User configuration: profiles keyed by id, in insertion order."""

    profiles: dict[str, Profile] = field(default_factory=dict)
    active_profile: str | None = None

    def add_profile(self, profile_id: str, account_sid: str, region: str | None = None) -> Profile:
        """Add a profile, replacing any existing one with the same id."""
        profile = Profile(id=profile_id, account_sid=account_sid, region=region)
        self.profiles[profile_id] = profile
        return profile

    def get_profile_by_id(self, profile_id: str) -> Profile | None:
        return self.profiles.get(profile_id)

    def get_active_profile(self) -> Profile | None:
        """Return the active profile, falling back to the first one configured."""
        if self.active_profile and self.active_profile in self.profiles:
            return self.profiles[self.active_profile]
        return next(iter(self.profiles.values()), None)

    def set_active_profile(self, profile_id: str | None) -> None:
        self.active_profile = profile_id

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "profiles": {pid: p.to_dict() for pid, p in self.profiles.items()},
        }
        if self.active_profile:
            data["activeProfile"] = self.active_profile
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConfigData":
        """Build a ``ConfigData`` from the on-disk mapping layout.

        Raises
        ------
        ValueError
            If ``profiles`` is not a mapping or an entry lacks ``accountSid``.
        """
        config = cls()
        profiles = data.get("profiles") or {}
        if not isinstance(profiles, dict):
            raise ValueError("'profiles' must be a mapping of profile id to settings")
        for profile_id, settings in profiles.items():
            if not isinstance(settings, dict) or not settings.get("accountSid"):
                raise ValueError(f"Profile {profile_id!r} is missing 'accountSid'")
            config.add_profile(str(profile_id), str(settings["accountSid"]), settings.get("region"))
        active = data.get("activeProfile")
        config.set_active_profile(str(active) if active else None)
        return config
