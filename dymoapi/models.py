"""Verification request and result models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .attachments import AttachmentSpec
from .exceptions import ValidationError

PluginValue = Union[str, bool, int, float, None]

PLUGINS = frozenset(
    {
        "blocklist",
        "compromiseDetector",
        "gravatar",
        "mxRecords",
        "nsfw",
        "reachability",
        "reputation",
        "riskScore",
        "roleAccount",
        "torNetwork",
        "typosquatting",
        "urlShortener",
    }
)


# --------------------------
# Request
# --------------------------


@dataclass(frozen=True)
class PhoneData:
    iso: str
    phone: str

    def to_payload(self) -> Dict[str, str]:
        return {"iso": self.iso, "phone": self.phone}


@dataclass(frozen=True)
class CreditCardData:
    pan: str
    expiration_date: Optional[str] = None
    cvc: Optional[str] = None
    cvv: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload = {"pan": self.pan}
        if self.expiration_date is not None:
            payload["expirationDate"] = self.expiration_date
        if self.cvc is not None:
            payload["cvc"] = self.cvc
        if self.cvv is not None:
            payload["cvv"] = self.cvv
        return payload


@dataclass(frozen=True)
class VerificationRequest:
    url: Optional[str] = None
    email: Optional[str] = None
    phone: Union[PhoneData, str, None] = None
    domain: Optional[str] = None
    credit_card: Union[CreditCardData, str, None] = None
    ip: Optional[str] = None
    wallet: Optional[str] = None
    user_agent: Optional[str] = None
    plugins: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        entities = (
            self.url,
            self.email,
            self.phone,
            self.domain,
            self.credit_card,
            self.ip,
            self.wallet,
            self.user_agent,
        )
        if all(value is None for value in entities):
            raise ValidationError("You must provide at least one parameter.")

        plugins = () if self.plugins is None else self.plugins
        if not isinstance(plugins, (list, tuple)) or not all(isinstance(p, str) for p in plugins):
            raise ValidationError("'plugins' must be a list of plugin names.")
        unknown = [p for p in plugins if p not in PLUGINS]
        if unknown:
            raise ValidationError(f"Unknown plugin(s): {', '.join(map(str, unknown))}.")
        # frozen: bypass __setattr__ to store the de-duplicated tuple
        object.__setattr__(self, "plugins", tuple(dict.fromkeys(plugins)))

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for key, value in (
            ("url", self.url),
            ("email", self.email),
            ("phone", self.phone),
            ("domain", self.domain),
            ("creditCard", self.credit_card),
            ("ip", self.ip),
            ("wallet", self.wallet),
            ("userAgent", self.user_agent),
        ):
            if value is None:
                continue
            payload[key] = value.to_payload() if hasattr(value, "to_payload") else value
        if self.plugins:
            payload["plugins"] = list(self.plugins)
        return payload


# --------------------------
# Result
# --------------------------


@dataclass
class UrlResult:
    valid: bool = False
    fraud: Optional[bool] = None
    free_subdomain: Optional[bool] = None
    custom_tld: Optional[bool] = None
    url: Optional[str] = None
    domain: Optional[str] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class EmailResult:
    valid: bool = False
    fraud: Optional[bool] = None
    proxied_email: Optional[bool] = None
    free_subdomain: Optional[bool] = None
    corporate: Optional[bool] = None
    email: Optional[str] = None
    real_user: Optional[str] = None
    did_you_mean: Optional[str] = None
    no_reply: Optional[bool] = None
    custom_tld: Optional[bool] = None
    domain: Optional[str] = None
    role_account: Optional[bool] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class PhoneResult:
    valid: bool = False
    fraud: Optional[bool] = None
    phone: Optional[str] = None
    prefix: Optional[str] = None
    number: Optional[str] = None
    line_type: Optional[str] = None
    carrier: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class DomainResult:
    valid: bool = False
    fraud: Optional[bool] = None
    free_subdomain: Optional[bool] = None
    custom_tld: Optional[bool] = None
    domain: Optional[str] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class IpResult:
    valid: bool = False
    fraud: Optional[bool] = None
    ip: Optional[str] = None
    type: Optional[str] = None
    _class: Optional[str] = None  # source key "class"
    continent: Optional[str] = None
    continent_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    region: Optional[str] = None
    region_name: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    zip_code: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    timezone: Optional[str] = None
    offset: Optional[int] = None
    currency: Optional[str] = None
    isp: Optional[str] = None
    org: Optional[str] = None
    _as: Optional[str] = None  # source key "as"
    asname: Optional[str] = None
    mobile: Optional[bool] = None
    proxy: Optional[bool] = None
    hosting: Optional[bool] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class WalletResult:
    valid: bool = False
    fraud: Optional[bool] = None
    wallet: Optional[str] = None
    type: Optional[str] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class UserAgentResult:
    valid: bool = False
    fraud: Optional[bool] = None
    type: Optional[str] = None
    client_slug: Optional[str] = None
    client_name: Optional[str] = None
    version: Optional[str] = None
    user_agent: Optional[str] = None
    bot: Optional[bool] = None
    os: Optional[str] = None
    device: Optional[str] = None
    plugins: Dict[str, PluginValue] = field(default_factory=dict)


@dataclass
class VerificationResult:
    url: UrlResult = field(default_factory=UrlResult)
    email: EmailResult = field(default_factory=EmailResult)
    phone: PhoneResult = field(default_factory=PhoneResult)
    domain: DomainResult = field(default_factory=DomainResult)
    ip: IpResult = field(default_factory=IpResult)
    wallet: WalletResult = field(default_factory=WalletResult)
    user_agent: UserAgentResult = field(default_factory=UserAgentResult)


# --------------------------
# Email
# --------------------------


@dataclass(frozen=True)
class EmailMessage:
    sender: str  # "from" on the wire
    to: str
    subject: str
    html: str
    attachments: Tuple[AttachmentSpec, ...] = ()
