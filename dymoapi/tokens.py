"""TTL-gated cache of validated root/private token status."""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .config import TOKEN_TTL_SECONDS
from .exceptions import AuthenticationError
from .logging import get_logger
from .transport import Transport

logger = get_logger(__name__)

TOKENS_PATH = "/v1/dvr/tokens"


@dataclass(frozen=True)
class Credentials:
    organization: Optional[str] = None
    root_key: Optional[str] = None
    api_key: Optional[str] = None


@dataclass(frozen=True)
class TokenCacheEntry:
    validated_at: float
    root_valid: bool
    private_valid: bool


class TokenCache:
    """
    Remembers, per credential pair, when the keys were last validated remotely.

    A fresh entry (younger than ``ttl`` seconds) short-circuits validation.
    This is a freshness check only: a key revoked server-side inside the
    window is not noticed until the entry expires. Entries are replaced
    whole under a lock; concurrent refreshes may issue a redundant call but
    never leave a half-written entry.
    """

    def __init__(
        self,
        ttl: float = TOKEN_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[Tuple[Optional[str], Optional[str]], TokenCacheEntry] = {}

    def get(self, creds: Credentials) -> Optional[TokenCacheEntry]:
        with self._lock:
            return self._entries.get((creds.root_key, creds.api_key))

    def is_fresh(self, creds: Credentials) -> bool:
        entry = self.get(creds)
        return entry is not None and self._clock() - entry.validated_at < self.ttl

    def invalidate(self) -> None:
        with self._lock:
            self._entries.clear()

    def ensure_valid(self, creds: Credentials, transport: Transport) -> None:
        """Validate the configured keys unless a fresh entry exists."""
        if not creds.root_key and not creds.api_key:
            return
        if self.is_fresh(creds):
            return

        tokens = {}
        if creds.root_key:
            tokens["root"] = f"Bearer {creds.root_key}"
        if creds.api_key:
            tokens["private"] = f"Bearer {creds.api_key}"

        validated_at = self._clock()
        response = transport.post(TOKENS_PATH, {"tokens": tokens})

        root_valid = response.get("root") is True
        private_valid = response.get("private") is True
        if creds.root_key and not root_valid:
            raise AuthenticationError("Invalid root token.")
        if creds.api_key and not private_valid:
            raise AuthenticationError("Invalid private token.")

        entry = TokenCacheEntry(validated_at, root_valid, private_valid)
        with self._lock:
            self._entries[(creds.root_key, creds.api_key)] = entry
        logger.info("tokens_validated", root=root_valid, private=private_valid)


# Shared by every DymoAPI instance that is not given its own cache.
shared_token_cache = TokenCache()
