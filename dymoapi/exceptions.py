"""Error types raised by the Dymo API client."""

from typing import Optional

PRODUCT_PREFIX = "[Dymo API] "


class DymoAPIError(Exception):
    """Base error; the message is always prefixed with the product name."""

    def __init__(self, message: str):
        self.detail = message
        super().__init__(PRODUCT_PREFIX + message)


class AuthenticationError(DymoAPIError):
    pass


class ValidationError(DymoAPIError):
    pass


class TransportError(DymoAPIError):
    pass


class APIError(DymoAPIError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(APIError):
    pass


class ConfigurationError(DymoAPIError):
    pass
