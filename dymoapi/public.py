"""Public (unauthenticated) endpoints: input checks, then a GET."""

from typing import Any, Dict, List, Optional, Sequence, Union

from email_validator import EmailNotValidError, validate_email

from .exceptions import ValidationError
from .transport import Transport

MAX_BANNED_WORDS = 10


def get_prayer_times(transport: Transport, lat: Optional[float], lon: Optional[float]) -> Dict[str, Any]:
    if lat is None or lon is None:
        raise ValidationError("You must provide a latitude and longitude.")
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        raise ValidationError("Latitude and longitude must be numbers.") from None
    if not -90 <= lat <= 90:
        raise ValidationError("Latitude must be in the interval [-90, 90].")
    if not -180 <= lon <= 180:
        raise ValidationError("Longitude must be in the interval [-180, 180].")

    return transport.get("/v1/public/islam/prayertimes", {"lat": lat, "lon": lon})


def satinize(transport: Transport, value: Optional[str]) -> Dict[str, Any]:
    """Ask the service which formats the input matches and what it contains."""
    if not value:
        raise ValidationError("You must specify the input.")
    return transport.get("/v1/public/inputSatinizer", {"input": value})


def _banned_words(words: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(words, str):
        words = [w.strip() for w in words.strip("[]").split(",") if w.strip()]
    if not isinstance(words, (list, tuple)) or len(words) > MAX_BANNED_WORDS:
        raise ValidationError(
            "If you provide a list of banned words; the list may not exceed "
            f"{MAX_BANNED_WORDS} words and must be of array type."
        )
    if any(not isinstance(w, str) for w in words) or len(set(words)) != len(words):
        raise ValidationError(
            "If you provide a list of banned words; all elements must be non-repeated strings."
        )
    return list(words)


def is_valid_pwd(
    transport: Transport,
    password: Optional[str],
    email: Optional[str] = None,
    banned_words: Union[str, Sequence[str], None] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> Dict[str, Any]:
    if not password:
        raise ValidationError("You must specify at least the password.")
    params: Dict[str, Any] = {"password": password}

    if email:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            raise ValidationError("If you provide an email address it must be valid.") from None
        params["email"] = email

    if banned_words:
        params["bannedWords"] = ",".join(_banned_words(banned_words))

    # bool is an int subclass; exclude it explicitly
    if min_length is not None:
        if isinstance(min_length, bool) or not isinstance(min_length, int) or not 8 <= min_length <= 32:
            raise ValidationError("If you provide a minimum it must be valid.")
        params["min"] = min_length

    if max_length is not None:
        if isinstance(max_length, bool) or not isinstance(max_length, int) or not 32 <= max_length <= 100:
            raise ValidationError("If you provide a maximum it must be valid.")
        params["max"] = max_length

    return transport.get("/v1/public/validPwd", params)


def new_url_encrypt(transport: Transport, url: Optional[str]) -> Dict[str, Any]:
    if not url or not url.startswith(("https://", "http://")):
        raise ValidationError("You must provide a valid url.")
    return transport.get("/v1/public/url-encrypt", {"url": url})
