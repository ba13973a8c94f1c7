import logging

import pytest
from django.core.cache import caches

from activities.services import IdempotencyStore


class BrokenCache:
    """
    A cache backend whose server has gone away
    """

    def get(self, key, default=None):
        raise ConnectionError("cache unavailable")

    def set(self, key, value, timeout=None):
        raise ConnectionError("cache unavailable")


def test_key_format():
    store = IdempotencyStore()
    assert store.key(123, "abc") == "idempotency:status:123:abc"


def test_default_ttl(settings):
    settings.IDEMPOTENCY_TTL = 3600
    assert IdempotencyStore().ttl == 3600
    assert IdempotencyStore(ttl=5).ttl == 5


def test_record_and_lookup():
    store = IdempotencyStore()
    assert store.lookup(1, "token") is None
    store.record(1, "token", 987654321)
    assert store.lookup(1, "token") == 987654321
    assert caches["default"].get("idempotency:status:1:token") == 987654321
    # Keys are per author
    assert store.lookup(2, "token") is None


def test_record_overwrites():
    store = IdempotencyStore()
    store.record(1, "token", 1)
    store.record(1, "token", 2)
    assert store.lookup(1, "token") == 2


def test_malformed_value_is_a_miss():
    caches["default"].set("idempotency:status:1:bad", "not-a-number")
    assert IdempotencyStore().lookup(1, "bad") is None


@pytest.mark.parametrize("method", ["lookup", "record"])
def test_broken_cache_fails_open(method):
    """
    An unavailable cache never stops a submission
    """
    store = IdempotencyStore(cache=BrokenCache())
    if method == "lookup":
        assert store.lookup(1, "token") is None
    else:
        store.record(1, "token", 42)


class RecordingCache:
    def __init__(self):
        self.calls = []

    def get(self, key, default=None):
        return None

    def set(self, key, value, timeout=None):
        self.calls.append((key, value, timeout))


def test_record_passes_ttl(settings):
    settings.IDEMPOTENCY_TTL = 3600
    cache = RecordingCache()
    store = IdempotencyStore(cache=cache)
    store.record(7, "abc", 99)
    store.record(7, "abc", 99, ttl=60)
    assert cache.calls == [
        ("idempotency:status:7:abc", 99, 3600),
        ("idempotency:status:7:abc", 99, 60),
    ]


def test_broken_cache_logged_once(caplog):
    store = IdempotencyStore(cache=BrokenCache())
    with caplog.at_level(logging.DEBUG):
        store.lookup(1, "token")
    messages = [r.getMessage() for r in caplog.records]
    assert len([m for m in messages if "cache unavailable" in m]) == 1
