"""Declarative mapping from command-line flags to API resource properties.

A command declares ``property_flags``: kebab-case flag names mapped to the
API field they set. ``None`` as the field name means "camel-case the flag
name", which covers almost every resource property::

    property_flags = {
        "friendly-name": None,   # -> friendlyName
        "sms-url": "smsUrl",
    }
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

PropertyFlags = Mapping[str, "str | None"]

_SEPARATOR = re.compile(r"[-_\s]+")


def camel_case(flag_name: str) -> str:
    """Convert ``sms-url`` style names to ``smsUrl``."""
    parts = [p for p in _SEPARATOR.split(flag_name.strip()) if p]
    if not parts:
        return ""
    head, *rest = parts
    return head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in rest)


def parse_properties(schema: PropertyFlags | None, flags: Mapping[str, Any]) -> dict[str, Any] | None:
    """Collect the update properties supplied on the command line.

    Parameters
    ----------
    schema:
        Flag name to API field name, in declaration order.
    flags:
        Parsed flags, keyed by kebab-case flag name. A ``None`` value means
        the flag was not given.

    Returns
    -------
    dict[str, Any] | None
        Field name to flag value, following schema order; ``None`` when the
        schema is empty or none of its flags were given. Never an empty dict.
    """
    if not schema:
        return None

    properties: dict[str, Any] | None = None
    for flag_name, field_name in schema.items():
        value = flags.get(flag_name)
        if value is None:
            continue
        if properties is None:
            properties = {}
        properties[field_name or camel_case(flag_name)] = value
    return properties
