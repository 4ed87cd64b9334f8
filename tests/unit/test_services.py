"""Unit tests for twilio_cli_core.services — credential providers, client
construction, the logging channel and output rendering.
"""
from __future__ import annotations

import io
import json
import logging

import pytest
from rich.console import Console

from twilio_cli_core.config.models import Profile
from twilio_cli_core.services.client import TwilioClient, build_client
from twilio_cli_core.services.credentials import (
    CredentialProvider,
    Credentials,
    NullCredentialProvider,
    StaticCredentialProvider,
)
from twilio_cli_core.services.logging import LOG_LEVELS, ConsoleHandler, configure_logging, get_logger
from twilio_cli_core.services.output import render, select_columns

SID = "AC" + "1" * 32
OVERRIDE_SID = "AC" + "2" * 32
CREDS = Credentials(api_key="SKkey", api_secret="secret")


# ===========================================================================
# Credentials
# ===========================================================================


class TestCredentialProviders:
    def test_static_provider_satisfies_protocol(self) -> None:
        assert isinstance(StaticCredentialProvider(), CredentialProvider)

    def test_null_provider_satisfies_protocol(self) -> None:
        assert isinstance(NullCredentialProvider(), CredentialProvider)

    @pytest.mark.asyncio
    async def test_static_provider_returns_stored_pair(self) -> None:
        provider = StaticCredentialProvider({"default": CREDS})
        assert await provider.get_credentials("default") == CREDS

    @pytest.mark.asyncio
    async def test_static_provider_set_credentials(self) -> None:
        provider = StaticCredentialProvider()
        provider.set_credentials("p", "SK1", "s1")
        assert await provider.get_credentials("p") == Credentials("SK1", "s1")

    @pytest.mark.asyncio
    async def test_static_provider_missing_profile(self) -> None:
        with pytest.raises(LookupError, match="other"):
            await StaticCredentialProvider({"default": CREDS}).get_credentials("other")

    @pytest.mark.asyncio
    async def test_null_provider_always_fails(self) -> None:
        with pytest.raises(LookupError):
            await NullCredentialProvider().get_credentials("default")

    def test_secret_not_in_repr(self) -> None:
        assert "secret" not in repr(CREDS)


# ===========================================================================
# Client
# ===========================================================================


class TestBuildClient:
    def test_maps_profile_and_credentials(self) -> None:
        client = build_client(Profile(id="p", account_sid=SID), CREDS)
        assert client == TwilioClient(account_sid=SID, username="SKkey", password="secret", region=None)

    def test_region_passes_through(self) -> None:
        client = build_client(Profile(id="p", account_sid=SID, region="stage"), CREDS)
        assert client.region == "stage"

    def test_override_takes_precedence(self) -> None:
        client = build_client(Profile(id="p", account_sid=SID), CREDS, OVERRIDE_SID)
        assert client.account_sid == OVERRIDE_SID

    def test_password_not_in_repr(self) -> None:
        assert "secret" not in repr(build_client(Profile(id="p", account_sid=SID), CREDS))

    def test_empty_override_is_kept(self) -> None:
        client = build_client(Profile(id="p", account_sid=SID), CREDS, "")
        assert client.account_sid == ""

    def test_none_override_uses_profile_sid(self) -> None:
        assert build_client(Profile(id="p", account_sid=SID), CREDS, None).account_sid == SID


# ===========================================================================
# Logging
# ===========================================================================


class TestLogging:
    def test_levels(self) -> None:
        assert LOG_LEVELS["warn"] == logging.WARNING
        assert LOG_LEVELS["none"] > logging.CRITICAL

    def test_configure_sets_level(self) -> None:
        assert configure_logging("debug").level == logging.DEBUG
        assert configure_logging("ERROR").level == logging.ERROR

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match="verbose"):
            configure_logging("verbose")

    def test_handler_attached_once(self) -> None:
        get_logger()
        logger = get_logger()
        assert sum(isinstance(h, ConsoleHandler) for h in logger.handlers) == 1

    def test_labels_warnings_and_errors(self, capsys) -> None:
        logger = get_logger()
        logger.info("plain message")
        logger.warning("careful")
        logger.error("broken [not markup]")
        err = capsys.readouterr().err
        assert "plain message" in err
        assert "Warning: careful" in err
        assert "Error: broken [not markup]" in err

    def test_long_lines_are_not_wrapped(self) -> None:
        buffer = io.StringIO()
        handler = ConsoleHandler(Console(file=buffer, width=20))
        handler.setFormatter(logging.Formatter("%(message)s"))
        message = "To reconfigure the profile, run: twilio profiles:add -p a-very-long-profile-name"
        handler.emit(logging.LogRecord("t", logging.INFO, __file__, 1, message, None, None))
        assert message in buffer.getvalue()


# ===========================================================================
# Output
# ===========================================================================


ROWS = [
    {"sid": "PN1", "result": "Success"},
    {"sid": "PN2", "result": "Error", "detail": "bad"},
]


class TestOutput:
    def test_select_columns_first_seen_order(self) -> None:
        assert select_columns(ROWS) == ["sid", "result", "detail"]

    def test_select_columns_explicit(self) -> None:
        assert select_columns(ROWS, ["result"]) == ["result"]

    def test_json(self, capsys) -> None:
        render(ROWS, "json")
        assert json.loads(capsys.readouterr().out) == ROWS

    def test_tsv(self, capsys) -> None:
        render(ROWS, "tsv")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "sid\tresult\tdetail"
        assert lines[1] == "PN1\tSuccess\t"
        assert lines[2] == "PN2\tError\tbad"

    def test_columns(self, capsys) -> None:
        render(ROWS, "columns", ["sid", "result"])
        out = capsys.readouterr().out
        assert "Sid" in out
        assert "Result" in out
        assert "PN2" in out
        assert "bad" not in out

    def test_empty_rows_print_nothing(self, capsys) -> None:
        render([], "columns")
        assert capsys.readouterr().out == ""

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            render(ROWS, "xml")

    def test_columns_keep_bracketed_values(self, capsys) -> None:
        render([{"sid": "PN1", "friendlyName": "[bold]Casper"}], "columns", ["sid", "friendlyName"])
        assert "[bold]Casper" in capsys.readouterr().out

    def test_columns_accept_unbalanced_closing_tags(self, capsys) -> None:
        render([{"sid": "PN1", "friendlyName": "oops [/x]"}], "columns")
        assert "oops [/x]" in capsys.readouterr().out

    def test_columns_header_keeps_brackets(self, capsys) -> None:
        render([{"[note]": "x"}], "columns")
        assert "[note]" in capsys.readouterr().out

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("sid", "Sid"),
            ("friendlyName", "Friendly Name"),
            ("accountSID", "Account SID"),
            ("date_created", "Date Created"),
            ("sms-url", "Sms Url"),
        ],
    )
    def test_column_headers(self, key: str, expected: str, capsys) -> None:
        render([{key: "v"}], "columns")
        assert expected in capsys.readouterr().out
