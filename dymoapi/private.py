"""Private endpoints: require an API key and validate input before posting."""

from typing import Any, Dict, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from . import attachments as attachment_pipeline
from .exceptions import ValidationError
from .models import EmailMessage, VerificationRequest
from .transport import Transport

VERIFY_PATH = "/v1/private/secure/verify"
SEND_EMAIL_PATH = "/v1/private/sender/sendEmail"
SRNG_PATH = "/v1/private/srng"

RANDOM_BOUND = 1_000_000_000
MAX_RANDOM_QUANTITY = 10


def is_valid_data(transport: Transport, token: str, request: VerificationRequest) -> Dict[str, Any]:
    """POST a verification request and return the raw response."""
    return transport.post(VERIFY_PATH, request.to_payload(), token=token)


def _check_address(value: str, label: str) -> None:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(f"The '{label}' address is not valid: {e}") from None


def build_email_payload(
    message: EmailMessage, server_email_config: Mapping[str, Any]
) -> Dict[str, Any]:
    if not message.sender:
        raise ValidationError("You must provide an email address from which the following will be sent.")
    if not message.to:
        raise ValidationError("You must provide an email to be sent to.")
    if not message.subject:
        raise ValidationError("You must provide a subject for the email to be sent.")
    if not message.html:
        raise ValidationError("You must provide HTML.")
    _check_address(message.sender, "from")
    _check_address(message.to, "to")

    attachments = () if message.attachments is None else message.attachments
    encoded = attachment_pipeline.process(attachments)
    payload: Dict[str, Any] = {
        "from": message.sender,
        "to": message.to,
        "subject": message.subject,
        "html": message.html,
        "serverEmailConfig": dict(server_email_config),
    }
    if encoded:
        payload["attachments"] = [a.to_payload() for a in encoded]
    return payload


def send_email(transport: Transport, token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """POST a payload produced by build_email_payload."""
    return transport.post(SEND_EMAIL_PATH, payload, token=token)


def _check_bound(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{name}' must be an integer.")
    if not -RANDOM_BOUND <= value <= RANDOM_BOUND:
        raise ValidationError(
            f"'{name}' must be an integer in the interval [-{RANDOM_BOUND}, {RANDOM_BOUND}]."
        )
    return value


def build_random_body(
    minimum: Optional[int], maximum: Optional[int], quantity: int = 1
) -> Dict[str, int]:
    if minimum is None or maximum is None:
        raise ValidationError("Both 'min' and 'max' parameters must be defined.")
    _check_bound(minimum, "min")
    _check_bound(maximum, "max")
    if minimum >= maximum:
        raise ValidationError("'min' must be less than 'max'.")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_RANDOM_QUANTITY:
        raise ValidationError(f"'quantity' must be an integer in the interval [1, {MAX_RANDOM_QUANTITY}].")
    return {"min": minimum, "max": maximum, "quantity": quantity}


def get_random(transport: Transport, token: str, body: Dict[str, int]) -> Dict[str, Any]:
    """Cryptographically secure random integers in [min, max]."""
    return transport.post(SRNG_PATH, body, token=token)
