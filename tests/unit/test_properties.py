"""Unit tests for twilio_cli_core.commands.properties."""
from __future__ import annotations

import pytest

from twilio_cli_core.commands.properties import camel_case, parse_properties

SCHEMA = {"friendly-name": "friendlyName", "sms-url": "smsUrl"}


class TestCamelCase:
    @pytest.mark.parametrize(
        ("flag_name", "expected"),
        [
            ("friendly-name", "friendlyName"),
            ("sms-url", "smsUrl"),
            ("status-callback-method", "statusCallbackMethod"),
            ("voice", "voice"),
            ("already_snake", "alreadySnake"),
            ("", ""),
        ],
    )
    def test_conversion(self, flag_name: str, expected: str) -> None:
        assert camel_case(flag_name) == expected


class TestParseProperties:
    def test_maps_present_flags(self) -> None:
        flags = {"friendly-name": "Casper", "sms-url": "https://x"}
        assert parse_properties(SCHEMA, flags) == {"friendlyName": "Casper", "smsUrl": "https://x"}

    def test_empty_schema_returns_none(self) -> None:
        assert parse_properties({}, {"friendly-name": "Casper"}) is None

    def test_missing_schema_returns_none(self) -> None:
        assert parse_properties(None, {"friendly-name": "Casper"}) is None

    def test_no_matching_flags_returns_none(self) -> None:
        assert parse_properties(SCHEMA, {"profile": "default"}) is None

    def test_unset_flags_are_skipped(self) -> None:
        flags = {"friendly-name": None, "sms-url": "https://x"}
        assert parse_properties(SCHEMA, flags) == {"smsUrl": "https://x"}

    def test_falsy_values_are_kept(self) -> None:
        schema = {"enabled": None, "count": None, "label": None}
        flags = {"enabled": False, "count": 0, "label": ""}
        assert parse_properties(schema, flags) == {"enabled": False, "count": 0, "label": ""}

    def test_none_field_name_is_camel_cased(self) -> None:
        assert parse_properties({"voice-url": None}, {"voice-url": "https://v"}) == {"voiceUrl": "https://v"}

    def test_order_follows_schema(self) -> None:
        flags = {"sms-url": "https://x", "friendly-name": "Casper"}
        assert list(parse_properties(SCHEMA, flags)) == ["friendlyName", "smsUrl"]

    def test_is_pure(self) -> None:
        flags = {"friendly-name": "Casper"}
        first = parse_properties(SCHEMA, flags)
        second = parse_properties(SCHEMA, flags)
        assert first == second
        assert first is not second
        assert flags == {"friendly-name": "Casper"}
