"""Applying property updates to remote resources.

``update_resource`` never raises for API failures: the outcome of every
attempt is an ``UpdateResult`` plus a status line on the log channel, so a
command touching several resources can report each one and carry on.
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from twilio_cli_core.errors import ResourceUpdateError

NOTHING_TO_UPDATE = "Nothing to update"
SUCCESS = "Success"
ERROR = "Error"


class ResourceHandle(Protocol):
    """A remote resource that accepts partial updates."""

    def update(self, properties: Mapping[str, Any]) -> Any:
        """Apply *properties*; may return an awaitable."""
        ...  # pragma: no cover


ResourceFactory = Callable[[str], ResourceHandle]


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a single update attempt.

    Parameters
    ----------
    sid:
        The resource that was (or would have been) updated.
    result:
        ``"Nothing to update"``, ``"Success"`` or ``"Error"``.
    detail:
        The error message when ``result`` is ``"Error"``.
    """

    sid: str
    result: str
    detail: str | None = field(default=None)

    @property
    def is_error(self) -> bool:
        return self.result == ERROR

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"sid": self.sid, "result": self.result}
        if self.detail is not None:
            data["detail"] = self.detail
        return data


async def update_resource(
    resource: ResourceFactory | None,
    resource_sid: str,
    properties: Mapping[str, Any] | None,
    *,
    logger: logging.Logger,
) -> UpdateResult:
    """Send *properties* to the resource identified by *resource_sid*.

    Parameters
    ----------
    resource:
        Factory returning a handle for a SID. Not called when there is
        nothing to update, so it may be ``None`` in that case.
    resource_sid:
        SID of the resource to update.
    properties:
        Fields to change. ``None`` short-circuits to "Nothing to update";
        an empty mapping is still sent.
    logger:
        Status channel for the outcome message.

    Returns
    -------
    UpdateResult
        The outcome. API failures become ``result="Error"``.
    """
    if properties is None:
        logger.warning("Nothing to update.")
        return UpdateResult(sid=resource_sid, result=NOTHING_TO_UPDATE)

    logger.debug("Updating %s with %r", resource_sid, properties)
    try:
        if resource is None:
            raise ValueError("No resource was provided to update")
        outcome = resource(resource_sid).update(properties)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as exc:  # noqa: BLE001
        error = ResourceUpdateError(resource_sid, exc)
        logger.error(error.message)
        return UpdateResult(sid=resource_sid, result=ERROR, detail=error.message)

    logger.info(SUCCESS)
    return UpdateResult(sid=resource_sid, result=SUCCESS)
