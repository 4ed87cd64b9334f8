"""Error types for twilio-cli-core.

Every user-facing error carries an optional remediation ``hint`` so that
the command lifecycle can print a precise, actionable message before
exiting. ``ProgrammerError`` is the exception to that rule: it signals a
defect in a concrete command rather than bad user input.
"""
from __future__ import annotations

ENV_VARS_HINT = (
    "Alternatively, set the TWILIO_ACCOUNT_SID, TWILIO_API_KEY and "
    "TWILIO_API_SECRET environment variables."
)


class TwilioCliError(Exception):
    """Base class for errors that abort a command with a clean message.

    Parameters
    ----------
    message:
        Human-readable description of what went wrong.
    hint:
        Optional remediation, printed on its own line.
    exit_code:
        Process exit status requested when the error aborts a command.
    """

    exit_code: int = 1

    def __init__(self, message: str, hint: str | None = None, exit_code: int | None = None) -> None:
        self.message = message
        self.hint = hint
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n{self.hint}"
        return self.message


class ProgrammerError(TypeError):
    """Raised when a command class is missing a required capability."""

    def __init__(self, class_name: str, capability: str) -> None:
        self.class_name = class_name
        self.capability = capability
        super().__init__(
            f"{class_name} cannot be run directly: it must implement {capability}(). "
            "Subclass it and override the method."
        )


class ConfigError(TwilioCliError):
    """Raised when the configuration file exists but cannot be read."""


class NoProfileError(TwilioCliError):
    """Raised when the requested (or default) profile is not configured.

    Parameters
    ----------
    profile_name:
        The name that was looked up, or ``None`` when nothing was active.
    explicit:
        ``True`` when the user asked for the profile with ``-p``.
    bin_name:
        Executable name used in the remediation command.
    """

    def __init__(self, profile_name: str | None, explicit: bool, bin_name: str = "twilio") -> None:
        self.profile_name = profile_name
        self.explicit = explicit
        command = f"{bin_name} profiles:add"
        if explicit and profile_name:
            command += f" -p {profile_name}"
        if explicit:
            message = f'No profile configured with the name "{profile_name}".'
        else:
            message = "No profile configured."
        super().__init__(
            message,
            hint=f"To add the profile, run: {command}\n{ENV_VARS_HINT}",
        )


class CredentialStoreError(TwilioCliError):
    """Raised when the credential store cannot supply a profile's secrets."""

    def __init__(self, profile_id: str, bin_name: str = "twilio") -> None:
        self.profile_id = profile_id
        super().__init__(
            f'Could not get credentials for profile "{profile_id}".',
            hint=f"To reconfigure the profile, run: {bin_name} profiles:add -p {profile_id}",
        )


class UnexpectedRuntimeError(TwilioCliError):
    """Wraps any unclassified exception raised by a command's own logic."""

    def __init__(self, original: BaseException) -> None:
        self.original = original
        detail = str(original) or type(original).__name__
        super().__init__(f"An unexpected error occurred: {detail}")


class ResourceUpdateError(TwilioCliError):
    """A failed resource update.

    Never propagated by ``update_resource``: it is converted into an
    ``UpdateResult`` whose ``result`` is ``"Error"``.
    """

    def __init__(self, resource_sid: str, original: object) -> None:
        self.resource_sid = resource_sid
        self.original = original
        super().__init__(error_message(original))


def error_message(error: object, default: str = "Unknown error") -> str:
    """Extract a display message from an arbitrary error object.

    API client errors expose ``message``; plain exceptions fall back to
    ``str(error)``.
    """
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    text = str(error) if error is not None else ""
    return text or default
