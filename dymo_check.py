#!/usr/bin/env python3
"""
dymo_check.py - email verdict from the Dymo verification API

Features
- Remote verification through DymoAPI.check_email
- Deny rules selectable on the command line (default: FRAUD, INVALID,
  NO_MX_RECORDS, NO_REPLY_EMAIL)
- Credentials loaded from .env
- Clear CLI output, or JSON with --json

Environment (.env)
  DYMO_API_KEY=...
  DYMO_ROOT_API_KEY=...        (optional)
  DYMO_ORGANIZATION=...        (optional)
  DYMO_LOCAL=true              (optional, use http://localhost:3050)

Usage
  python dymo_check.py EMAIL [--rule RULE ...] [--local] [--json]
"""

from __future__ import annotations

import json
import sys
from typing import Tuple

import click

from dymoapi import DenyRule, DymoAPI, DymoAPIError
from dymoapi.config import load_settings
from dymoapi.logging import setup_logging
from dymoapi.rules import RuleDecision, parse_rules

# --------------------------
# Output
# --------------------------

RULE_HINTS = {
    DenyRule.FRAUD: "Address flagged as fraudulent.",
    DenyRule.INVALID: "Address is not valid.",
    DenyRule.NO_MX_RECORDS: "Domain has no MX records.",
    DenyRule.PROXIED_EMAIL: "Address is a proxied/forwarding alias.",
    DenyRule.FREE_SUBDOMAIN: "Domain is a free subdomain.",
    DenyRule.PERSONAL_EMAIL: "Address is a personal (non-corporate) mailbox.",
    DenyRule.CORPORATE_EMAIL: "Address is a corporate mailbox.",
    DenyRule.NO_REPLY_EMAIL: "Address is a no-reply mailbox.",
    DenyRule.ROLE_ACCOUNT: "Address is a role account.",
    DenyRule.NO_REACHABLE: "Mailbox is not reachable.",
    DenyRule.HIGH_RISK_SCORE: "Risk score is 80 or higher.",
}


def print_decision(email: str, rules: Tuple[DenyRule, ...], decision: RuleDecision) -> None:
    print("\n================ Email Check =================")
    print(f"📧 Email:           {email}")
    print(f"📋 Rules:           {', '.join(r.value for r in rules) or '-'}")
    print("============================================")
    if decision.allowed:
        print("✅ Verdict: OK TO SEND")
        print("💡 Why:    No deny rule matched.")
    else:
        print("🚫 Verdict: DO NOT SEND")
        print(f"💡 Why:    {decision.violation.value}: {RULE_HINTS[decision.violation]}")
    print("============================================\n")


# --------------------------
# CLI
# --------------------------


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("email")
@click.option(
    "--rule",
    "rules",
    multiple=True,
    type=click.Choice([r.value for r in DenyRule], case_sensitive=False),
    help="Deny rule to apply (repeatable). Defaults to the standard rule set.",
)
@click.option("--local", is_flag=True, help="Use the local development server.")
@click.option("--json", "as_json", is_flag=True, help="Print the decision as JSON.")
def main(email: str, rules: Tuple[str, ...], local: bool, as_json: bool) -> None:
    try:
        settings = load_settings()
    except DymoAPIError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    setup_logging(settings.log_level, settings.log_format)

    overrides = {"local": True} if local else {}
    client = DymoAPI.from_env(settings, **overrides)
    parsed = parse_rules(rules or None)

    try:
        decision = client.check_email(email, parsed)
    except DymoAPIError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if as_json:
        print(
            json.dumps(
                {
                    "email": email,
                    "allowed": decision.allowed,
                    "violation": decision.violation.value if decision.violation else None,
                }
            )
        )
        return

    print_decision(email, parsed, decision)


if __name__ == "__main__":
    main()
