import threading

import pytest

from helpers import FakeClock, FakeTransport

from dymoapi.exceptions import APIError, AuthenticationError
from dymoapi.tokens import Credentials, TokenCache

BOTH = Credentials(root_key="rk", api_key="pk")


def test_second_call_within_ttl_skips_network():
    clock = FakeClock()
    cache = TokenCache(clock=clock)
    transport = FakeTransport()

    cache.ensure_valid(BOTH, transport)
    clock.advance(299.9)
    cache.ensure_valid(BOTH, transport)

    assert transport.paths() == ["/v1/dvr/tokens"]


def test_call_at_exactly_ttl_revalidates():
    clock = FakeClock()
    cache = TokenCache(clock=clock)
    transport = FakeTransport()

    cache.ensure_valid(BOTH, transport)
    clock.advance(300)
    cache.ensure_valid(BOTH, transport)

    assert transport.paths() == ["/v1/dvr/tokens", "/v1/dvr/tokens"]


def test_both_tokens_sent_in_one_request():
    transport = FakeTransport()
    TokenCache(clock=FakeClock()).ensure_valid(BOTH, transport)

    _, _, body, token = transport.calls[0]
    assert body == {"tokens": {"root": "Bearer rk", "private": "Bearer pk"}}
    assert token is None


def test_only_configured_tokens_sent():
    transport = FakeTransport({"/v1/dvr/tokens": {"private": True}})
    TokenCache(clock=FakeClock()).ensure_valid(Credentials(api_key="pk"), transport)

    assert transport.calls[0][2] == {"tokens": {"private": "Bearer pk"}}


def test_no_keys_means_no_call():
    transport = FakeTransport()
    TokenCache(clock=FakeClock()).ensure_valid(Credentials(), transport)
    assert transport.calls == []


def test_missing_root_flag_raises():
    transport = FakeTransport({"/v1/dvr/tokens": {"private": True}})
    cache = TokenCache(clock=FakeClock())

    with pytest.raises(AuthenticationError, match=r"^\[Dymo API\] Invalid root token\.$"):
        cache.ensure_valid(BOTH, transport)
    assert cache.get(BOTH) is None


def test_false_private_flag_raises():
    transport = FakeTransport({"/v1/dvr/tokens": {"root": True, "private": False}})
    with pytest.raises(AuthenticationError, match="Invalid private token"):
        TokenCache(clock=FakeClock()).ensure_valid(BOTH, transport)


def test_failed_validation_is_retried_next_call():
    responses = iter([{"root": True}, {"root": True, "private": True}])
    transport = FakeTransport({"/v1/dvr/tokens": lambda _body: next(responses)})
    cache = TokenCache(clock=FakeClock())

    with pytest.raises(AuthenticationError):
        cache.ensure_valid(BOTH, transport)
    cache.ensure_valid(BOTH, transport)

    assert len(transport.calls) == 2
    assert cache.get(BOTH).private_valid is True


def test_transport_errors_propagate_unchanged():
    transport = FakeTransport({"/v1/dvr/tokens": APIError("boom", status_code=500)})
    with pytest.raises(APIError) as exc_info:
        TokenCache(clock=FakeClock()).ensure_valid(BOTH, transport)
    assert exc_info.value.status_code == 500


def test_entries_are_per_credential_pair():
    clock = FakeClock()
    cache = TokenCache(clock=clock)
    transport = FakeTransport()

    cache.ensure_valid(BOTH, transport)
    cache.ensure_valid(Credentials(root_key="rk", api_key="other"), transport)

    assert len(transport.calls) == 2


def test_entry_replaced_whole_on_refresh():
    clock = FakeClock()
    cache = TokenCache(clock=clock)
    transport = FakeTransport()

    cache.ensure_valid(BOTH, transport)
    first = cache.get(BOTH)
    clock.advance(301)
    cache.ensure_valid(BOTH, transport)
    second = cache.get(BOTH)

    assert first is not second
    assert second.validated_at == first.validated_at + 301


def test_invalidate_forces_refresh():
    cache = TokenCache(clock=FakeClock())
    transport = FakeTransport()

    cache.ensure_valid(BOTH, transport)
    cache.invalidate()
    cache.ensure_valid(BOTH, transport)

    assert len(transport.calls) == 2


def test_concurrent_refresh_leaves_consistent_entry():
    cache = TokenCache(clock=FakeClock())
    transport = FakeTransport()
    errors = []

    def worker():
        try:
            cache.ensure_valid(BOTH, transport)
        except Exception as e:  # pragma: no cover - surfaced below
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    entry = cache.get(BOTH)
    assert entry.root_valid and entry.private_valid
    assert 1 <= len(transport.calls) <= 8
