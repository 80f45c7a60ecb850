"""
Shared test helpers for the Dymo API client.

  - FakeTransport: records calls and answers from a path -> response map
  - FakeClock: manually advanced monotonic clock for TokenCache
  - make_client: DymoAPI wired to a FakeTransport and a private TokenCache

Import in tests as:
    from helpers import FakeTransport, FakeClock, make_client
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from dymoapi import DymoAPI
from dymoapi.tokens import TokenCache

TOKENS_OK = {"root": True, "private": True}

Responder = Union[Dict[str, Any], Callable[[Dict[str, Any]], Dict[str, Any]], Exception]


class FakeTransport:
    """Minimal stand-in for dymoapi.transport.Transport."""

    def __init__(self, responses: Optional[Dict[str, Responder]] = None) -> None:
        self.responses: Dict[str, Responder] = {"/v1/dvr/tokens": TOKENS_OK, **(responses or {})}
        self.calls: List[Tuple[str, str, Any, Optional[str]]] = []

    def _answer(self, path: str, payload: Any) -> Dict[str, Any]:
        if path not in self.responses:
            raise AssertionError(f"unexpected request to {path}")
        answer = self.responses[path]
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(payload)
        return answer

    def post(self, path: str, body: Dict[str, Any], token: Optional[str] = None) -> Dict[str, Any]:
        self.calls.append(("POST", path, body, token))
        return self._answer(path, body)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.calls.append(("GET", path, params, None))
        return self._answer(path, params)

    def paths(self) -> List[str]:
        return [c[1] for c in self.calls]


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_client(
    responses: Optional[Dict[str, Responder]] = None,
    *,
    api_key: Optional[str] = "pk-test",
    root_api_key: Optional[str] = None,
    server_email_config: Optional[Dict[str, Any]] = None,
    clock: Optional[FakeClock] = None,
) -> Tuple[DymoAPI, FakeTransport]:
    transport = FakeTransport(responses)
    client = DymoAPI(
        root_api_key=root_api_key,
        api_key=api_key,
        server_email_config=server_email_config,
        transport=transport,
        token_cache=TokenCache(clock=clock or FakeClock()),
    )
    return client, transport


# ── Sample payloads ──────────────────────────────────────

CLEAN_EMAIL = {
    "valid": True,
    "fraud": False,
    "proxiedEmail": False,
    "freeSubdomain": False,
    "corporate": True,
    "email": "jane@acme.io",
    "noReply": False,
    "domain": "acme.io",
    "plugins": {"mxRecords": True},
}
