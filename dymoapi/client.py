"""DymoAPI: the public entry point composing tokens, builders and decoders."""

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from . import private, public
from .config import DEFAULT_TIMEOUT, Settings, get_base_url, load_settings
from .exceptions import AuthenticationError, ValidationError
from .logging import get_logger
from .models import EmailMessage, VerificationRequest, VerificationResult
from .normalizer import normalize
from .responses import (
    PasswordResponse,
    PrayerTimesResponse,
    SatinizeResponse,
    SendEmailResponse,
    SRNGResponse,
    UrlEncryptResponse,
)
from .rules import DenyRule, RuleDecision, evaluate, parse_rules, required_plugins
from .tokens import Credentials, TokenCache, shared_token_cache
from .transport import Transport

logger = get_logger(__name__)


class DymoAPI:
    def __init__(
        self,
        organization: Optional[str] = None,
        root_api_key: Optional[str] = None,
        api_key: Optional[str] = None,
        server_email_config: Optional[Mapping[str, Any]] = None,
        local: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        token_cache: Optional[TokenCache] = None,
        transport: Optional[Transport] = None,
    ):
        self.credentials = Credentials(organization, root_api_key, api_key)
        self.server_email_config = server_email_config
        self.transport = transport or Transport(get_base_url(local), timeout=timeout)
        self.token_cache = token_cache if token_cache is not None else shared_token_cache

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None, **overrides: Any) -> "DymoAPI":
        """Build a client from DYMO_* environment variables (and .env)."""
        if settings is None:
            settings = load_settings()
        kwargs = {
            "organization": settings.organization,
            "root_api_key": settings.root_api_key,
            "api_key": settings.api_key,
            "local": settings.local,
            "timeout": settings.timeout,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def _private_token(self) -> str:
        """Validate (or reuse cached validation of) the keys; return the private key."""
        if not self.credentials.api_key:
            raise AuthenticationError("Invalid private token.")
        self.token_cache.ensure_valid(self.credentials, self.transport)
        return self.credentials.api_key

    # --------------------------
    # Verification
    # --------------------------

    def is_valid_data(self, request: VerificationRequest) -> VerificationResult:
        """Verify every entity in the request and return normalized results."""
        token = self._private_token()
        raw = private.is_valid_data(self.transport, token, request)
        return normalize(raw)

    verify = is_valid_data

    def check_email(
        self,
        address: str,
        rules: Optional[Iterable[Union[DenyRule, str]]] = None,
    ) -> RuleDecision:
        """Verify an address and apply deny rules; the decision names the violation."""
        if not address:
            raise ValidationError("You must provide an email address.")
        parsed = parse_rules(rules)
        request = VerificationRequest(email=address, plugins=required_plugins(parsed))
        token = self._private_token()
        raw = private.is_valid_data(self.transport, token, request)
        branch = raw.get("email")
        decision = evaluate(branch if isinstance(branch, Mapping) else {}, parsed)
        logger.info(
            "email_checked",
            allowed=decision.allowed,
            violation=decision.violation.value if decision.violation else None,
        )
        return decision

    def is_valid_email(
        self,
        address: str,
        rules: Optional[Iterable[Union[DenyRule, str]]] = None,
    ) -> bool:
        return self.check_email(address, rules).allowed

    # --------------------------
    # Private utilities
    # --------------------------

    def send_email(self, message: EmailMessage) -> SendEmailResponse:
        if not self.server_email_config:
            raise AuthenticationError("You must configure the email client settings.")
        payload = private.build_email_payload(message, self.server_email_config)
        token = self._private_token()
        return SendEmailResponse.from_dict(private.send_email(self.transport, token, payload))

    def get_random(
        self, minimum: Optional[int], maximum: Optional[int], quantity: int = 1
    ) -> SRNGResponse:
        body = private.build_random_body(minimum, maximum, quantity)
        token = self._private_token()
        return SRNGResponse.from_dict(private.get_random(self.transport, token, body))

    # --------------------------
    # Public utilities
    # --------------------------

    def get_prayer_times(self, lat: Optional[float], lon: Optional[float]) -> PrayerTimesResponse:
        return PrayerTimesResponse.from_dict(public.get_prayer_times(self.transport, lat, lon))

    def satinize(self, value: Optional[str]) -> SatinizeResponse:
        return SatinizeResponse.from_dict(public.satinize(self.transport, value))

    def is_valid_pwd(
        self,
        password: Optional[str],
        email: Optional[str] = None,
        banned_words: Union[str, Sequence[str], None] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> PasswordResponse:
        data = public.is_valid_pwd(
            self.transport, password, email, banned_words, min_length, max_length
        )
        return PasswordResponse.from_dict(data)

    def new_url_encrypt(self, url: Optional[str]) -> UrlEncryptResponse:
        return UrlEncryptResponse.from_dict(public.new_url_encrypt(self.transport, url))
