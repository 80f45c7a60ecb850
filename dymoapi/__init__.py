"""Python client for the Dymo verification and utility API."""

from .attachments import AttachmentSpec, EncodedAttachment
from .client import DymoAPI
from .config import __version__
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DymoAPIError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .models import (
    CreditCardData,
    EmailMessage,
    PhoneData,
    VerificationRequest,
    VerificationResult,
)
from .rules import DEFAULT_RULES, DenyRule, RuleDecision
from .tokens import Credentials, TokenCache

__all__ = [
    "APIError",
    "AttachmentSpec",
    "AuthenticationError",
    "ConfigurationError",
    "Credentials",
    "CreditCardData",
    "DEFAULT_RULES",
    "DenyRule",
    "DymoAPI",
    "DymoAPIError",
    "EmailMessage",
    "EncodedAttachment",
    "PhoneData",
    "RateLimitError",
    "RuleDecision",
    "TokenCache",
    "TransportError",
    "ValidationError",
    "VerificationRequest",
    "VerificationResult",
    "__version__",
]
