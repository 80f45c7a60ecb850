"""Constants and environment-backed settings."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

__version__ = "0.1.0"

BASE_URL = "https://api.tpeoficial.com"
LOCAL_BASE_URL = "http://localhost:3050"

SDK_HEADERS = {
    "User-Agent": "DymoAPISDK/1.0.0",
    "X-Dymo-SDK-Env": "Python",
    "X-Dymo-SDK-Version": __version__,
}

DEFAULT_TIMEOUT = 15.0
TOKEN_TTL_SECONDS = 300
MAX_ATTACHMENTS_BYTES = 40 * 1024 * 1024


def get_base_url(local: bool) -> str:
    return LOCAL_BASE_URL if local else BASE_URL


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    organization: Optional[str]
    root_api_key: Optional[str]
    api_key: Optional[str]
    local: bool
    timeout: float
    log_level: str
    log_format: str


def load_settings(dotenv: bool = True) -> Settings:
    """Read client settings from the environment (and .env, unless disabled)."""
    if dotenv:
        load_dotenv()

    raw_timeout = os.getenv("DYMO_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigurationError(f"DYMO_TIMEOUT must be a number, got {raw_timeout!r}.") from None

    return Settings(
        organization=os.getenv("DYMO_ORGANIZATION") or None,
        root_api_key=os.getenv("DYMO_ROOT_API_KEY") or None,
        api_key=os.getenv("DYMO_API_KEY") or None,
        local=_flag(os.getenv("DYMO_LOCAL")),
        timeout=timeout,
        log_level=os.getenv("LOG_LEVEL", "warning"),
        log_format=os.getenv("LOG_FORMAT", "console"),
    )
