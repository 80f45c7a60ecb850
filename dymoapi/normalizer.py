"""
Reshape raw verification payloads into a fully populated VerificationResult.

The remote service returns one nested object per requested entity, camelCased,
with any field possibly missing. ``normalize`` always returns all seven
sub-records: a branch that is absent (or not an object) becomes the
zero-value record, and absent leaves become ``None``. It never raises for a
JSON object, including ``{}``.
"""

from typing import Any, Dict, Mapping, Type

from .models import (
    DomainResult,
    EmailResult,
    IpResult,
    PhoneResult,
    UrlResult,
    UserAgentResult,
    VerificationResult,
    WalletResult,
)

# source keys that are reserved words in Python (and several other targets)
RESERVED_IP_FIELDS = {"as": "_as", "class": "_class"}

# attribute name -> raw key, per entity; "valid" and "plugins" are handled apart
FIELD_MAPS: Dict[Type, Dict[str, str]] = {
    UrlResult: {
        "fraud": "fraud",
        "free_subdomain": "freeSubdomain",
        "custom_tld": "customTLD",
        "url": "url",
        "domain": "domain",
    },
    EmailResult: {
        "fraud": "fraud",
        "proxied_email": "proxiedEmail",
        "free_subdomain": "freeSubdomain",
        "corporate": "corporate",
        "email": "email",
        "real_user": "realUser",
        "did_you_mean": "didYouMean",
        "no_reply": "noReply",
        "custom_tld": "customTLD",
        "domain": "domain",
        "role_account": "roleAccount",
    },
    PhoneResult: {
        "fraud": "fraud",
        "phone": "phone",
        "prefix": "prefix",
        "number": "number",
        "line_type": "lineType",
        "carrier": "carrier",
        "country": "country",
        "country_code": "countryCode",
    },
    DomainResult: {
        "fraud": "fraud",
        "free_subdomain": "freeSubdomain",
        "custom_tld": "customTLD",
        "domain": "domain",
    },
    IpResult: {
        "fraud": "fraud",
        "ip": "ip",
        "type": "type",
        "_class": "_class",
        "continent": "continent",
        "continent_code": "continentCode",
        "country": "country",
        "country_code": "countryCode",
        "region": "region",
        "region_name": "regionName",
        "city": "city",
        "district": "district",
        "zip_code": "zipCode",
        "lat": "lat",
        "lon": "lon",
        "timezone": "timezone",
        "offset": "offset",
        "currency": "currency",
        "isp": "isp",
        "org": "org",
        "_as": "_as",
        "asname": "asname",
        "mobile": "mobile",
        "proxy": "proxy",
        "hosting": "hosting",
    },
    WalletResult: {
        "fraud": "fraud",
        "wallet": "wallet",
        "type": "type",
    },
    UserAgentResult: {
        "fraud": "fraud",
        "type": "type",
        "client_slug": "clientSlug",
        "client_name": "clientName",
        "version": "version",
        "user_agent": "ua",
        "bot": "bot",
        "os": "os",
        "device": "device",
    },
}

# VerificationResult attribute -> (raw key, record type)
ENTITY_BRANCHES = (
    ("url", "url", UrlResult),
    ("email", "email", EmailResult),
    ("phone", "phone", PhoneResult),
    ("domain", "domain", DomainResult),
    ("ip", "ip", IpResult),
    ("wallet", "wallet", WalletResult),
    ("user_agent", "userAgent", UserAgentResult),
)


def rename_reserved_fields(ip: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of an ip branch with as/class moved to _as/_class."""
    renamed = dict(ip)
    for source, target in RESERVED_IP_FIELDS.items():
        if source in renamed:
            renamed[target] = renamed.pop(source)
    return renamed


def _build(record_type: Type, raw: Any):
    if not isinstance(raw, Mapping):
        return record_type()

    plugins = raw.get("plugins")
    kwargs = {attr: raw.get(key) for attr, key in FIELD_MAPS[record_type].items()}
    return record_type(
        valid=bool(raw.get("valid")),
        plugins=dict(plugins) if isinstance(plugins, Mapping) else {},
        **kwargs,
    )


def normalize(raw: Mapping[str, Any]) -> VerificationResult:
    """Build a VerificationResult from a raw verify response."""
    if not isinstance(raw, Mapping):
        return VerificationResult()

    branches = {}
    for attr, key, record_type in ENTITY_BRANCHES:
        branch = raw.get(key)
        if record_type is IpResult and isinstance(branch, Mapping):
            branch = rename_reserved_fields(branch)
        branches[attr] = _build(record_type, branch)
    return VerificationResult(**branches)
