"""Deny rules that turn a raw email verification branch into accept/reject."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from .exceptions import ValidationError
from .logging import get_logger

logger = get_logger(__name__)

HIGH_RISK_THRESHOLD = 80


class DenyRule(str, Enum):
    FRAUD = "FRAUD"
    INVALID = "INVALID"
    NO_MX_RECORDS = "NO_MX_RECORDS"
    PROXIED_EMAIL = "PROXIED_EMAIL"
    FREE_SUBDOMAIN = "FREE_SUBDOMAIN"
    PERSONAL_EMAIL = "PERSONAL_EMAIL"
    CORPORATE_EMAIL = "CORPORATE_EMAIL"
    NO_REPLY_EMAIL = "NO_REPLY_EMAIL"
    ROLE_ACCOUNT = "ROLE_ACCOUNT"
    NO_REACHABLE = "NO_REACHABLE"
    HIGH_RISK_SCORE = "HIGH_RISK_SCORE"


# Evaluation order, independent of the order the caller lists rules in.
PRIORITY: Tuple[DenyRule, ...] = tuple(DenyRule)

DEFAULT_RULES: Tuple[DenyRule, ...] = (
    DenyRule.FRAUD,
    DenyRule.INVALID,
    DenyRule.NO_MX_RECORDS,
    DenyRule.NO_REPLY_EMAIL,
)

RULE_PLUGINS: Dict[DenyRule, str] = {
    DenyRule.NO_MX_RECORDS: "mxRecords",
    DenyRule.ROLE_ACCOUNT: "roleAccount",
    DenyRule.NO_REACHABLE: "reachability",
    DenyRule.HIGH_RISK_SCORE: "riskScore",
}


def _plugins(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    plugins = raw.get("plugins")
    return plugins if isinstance(plugins, Mapping) else {}


def _risk_score(raw: Mapping[str, Any]) -> float:
    score = _plugins(raw).get("riskScore")
    try:
        return float(score) if score is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


# rule -> predicate returning True when the rule is violated
PREDICATES: Dict[DenyRule, Callable[[Mapping[str, Any]], bool]] = {
    DenyRule.INVALID: lambda raw: not raw.get("valid"),
    DenyRule.FRAUD: lambda raw: bool(raw.get("fraud")),
    DenyRule.PROXIED_EMAIL: lambda raw: bool(raw.get("proxiedEmail")),
    DenyRule.FREE_SUBDOMAIN: lambda raw: bool(raw.get("freeSubdomain")),
    DenyRule.PERSONAL_EMAIL: lambda raw: not raw.get("corporate"),
    DenyRule.CORPORATE_EMAIL: lambda raw: bool(raw.get("corporate")),
    DenyRule.NO_MX_RECORDS: lambda raw: not _plugins(raw).get("mxRecords"),
    DenyRule.NO_REPLY_EMAIL: lambda raw: bool(raw.get("noReply")),
    DenyRule.ROLE_ACCOUNT: lambda raw: bool(_plugins(raw).get("roleAccount")),
    DenyRule.NO_REACHABLE: lambda raw: not _plugins(raw).get("reachable"),
    DenyRule.HIGH_RISK_SCORE: lambda raw: _risk_score(raw) >= HIGH_RISK_THRESHOLD,
}


@dataclass(frozen=True)
class RuleDecision:
    allowed: bool
    violation: Optional[DenyRule] = None  # first violated rule in priority order

    def __bool__(self) -> bool:
        return self.allowed


def parse_rules(
    rules: Optional[Iterable[Union[DenyRule, str]]] = None,
) -> Tuple[DenyRule, ...]:
    """Coerce rule names to DenyRule, dropping duplicates; None means defaults."""
    if rules is None:
        return DEFAULT_RULES
    if isinstance(rules, (str, DenyRule)):
        rules = [rules]

    parsed = []
    for rule in rules:
        if isinstance(rule, DenyRule):
            parsed.append(rule)
            continue
        try:
            parsed.append(DenyRule(str(rule).strip().upper()))
        except ValueError:
            raise ValidationError(f"Unknown deny rule: {rule!r}.") from None
    if not parsed:
        # an empty rule set would accept every address
        raise ValidationError("You must provide at least one deny rule.")
    return tuple(dict.fromkeys(parsed))


def required_plugins(rules: Iterable[DenyRule]) -> Tuple[str, ...]:
    """Plugins the verify call must activate for these rules to be decidable."""
    plugins = [RULE_PLUGINS[rule] for rule in rules if rule in RULE_PLUGINS]
    return tuple(dict.fromkeys(plugins))


def evaluate(raw: Mapping[str, Any], rules: Iterable[DenyRule]) -> RuleDecision:
    """Check rules in priority order and stop at the first violation."""
    active = set(rules)
    if not isinstance(raw, Mapping):
        raw = {}
    for rule in PRIORITY:
        if rule in active and PREDICATES[rule](raw):
            logger.debug("deny_rule_violated", rule=rule.value)
            return RuleDecision(allowed=False, violation=rule)
    return RuleDecision(allowed=True)


def is_allowed(raw: Mapping[str, Any], rules: Iterable[DenyRule] = DEFAULT_RULES) -> bool:
    return evaluate(raw, rules).allowed
