import json

import pytest
from click.testing import CliRunner

import dymo_check
from dymoapi.exceptions import AuthenticationError
from dymoapi.rules import DenyRule, RuleDecision


@pytest.fixture(autouse=True)
def _quiet(monkeypatch):
    monkeypatch.setattr("dymoapi.config.load_dotenv", lambda: None)
    monkeypatch.setattr(dymo_check, "setup_logging", lambda *a, **k: None)


def _fake_check(decision=None, exc=None, seen=None):
    def check_email(self, address, rules=None):
        if seen is not None:
            seen["address"] = address
            seen["rules"] = rules
        if exc is not None:
            raise exc
        return decision

    return check_email


def test_allowed_verdict(monkeypatch):
    seen = {}
    monkeypatch.setattr(
        "dymoapi.client.DymoAPI.check_email", _fake_check(RuleDecision(True), seen=seen)
    )

    result = CliRunner().invoke(dymo_check.main, ["jane@acme.io"])

    assert result.exit_code == 0
    assert "OK TO SEND" in result.output
    assert seen["address"] == "jane@acme.io"
    assert seen["rules"] == (
        DenyRule.FRAUD,
        DenyRule.INVALID,
        DenyRule.NO_MX_RECORDS,
        DenyRule.NO_REPLY_EMAIL,
    )


def test_rule_options_and_json_output(monkeypatch):
    seen = {}
    monkeypatch.setattr(
        "dymoapi.client.DymoAPI.check_email",
        _fake_check(RuleDecision(False, DenyRule.ROLE_ACCOUNT), seen=seen),
    )

    result = CliRunner().invoke(
        dymo_check.main, ["info@acme.io", "--rule", "role_account", "--rule", "FRAUD", "--json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "email": "info@acme.io",
        "allowed": False,
        "violation": "ROLE_ACCOUNT",
    }
    assert seen["rules"] == (DenyRule.ROLE_ACCOUNT, DenyRule.FRAUD)


def test_denied_verdict_names_rule(monkeypatch):
    monkeypatch.setattr(
        "dymoapi.client.DymoAPI.check_email",
        _fake_check(RuleDecision(False, DenyRule.NO_MX_RECORDS)),
    )

    result = CliRunner().invoke(dymo_check.main, ["jane@acme.io"])

    assert "DO NOT SEND" in result.output
    assert "NO_MX_RECORDS" in result.output


def test_client_error_exits_non_zero(monkeypatch):
    monkeypatch.setattr(
        "dymoapi.client.DymoAPI.check_email",
        _fake_check(exc=AuthenticationError("Invalid private token.")),
    )

    result = CliRunner().invoke(dymo_check.main, ["jane@acme.io"])

    assert result.exit_code == 1


def test_bad_timeout_setting_reports_error(monkeypatch):
    monkeypatch.setenv("DYMO_TIMEOUT", "soon")

    result = CliRunner().invoke(dymo_check.main, ["jane@acme.io"])

    assert result.exit_code == 1
    assert "DYMO_TIMEOUT must be a number" in result.output
    assert not isinstance(result.exception, ValueError)
