# nosec B101


from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from domain.models.currency import RateSnapshot
from infrastructure.cache.memory_cache import DEFAULT_TTL_SECONDS, RateCache

T0 = 1_760_000_000


def test_empty_cache_returns_none():
    cache = RateCache()

    assert cache.get_usable(T0) is None
    assert cache.entry is None


def test_store_sets_expiry_from_fetch_time(snapshot):
    cache = RateCache()

    entry = cache.store(snapshot, fetched_at=T0)

    assert entry.snapshot is snapshot
    assert entry.fetched_at == T0
    assert entry.expires_at == T0 + 1800
    assert DEFAULT_TTL_SECONDS == 1800


def test_expiry_ignores_snapshot_timestamp(snapshot):
    cache = RateCache()

    entry = cache.store(snapshot, fetched_at=T0)

    assert snapshot.timestamp != T0
    assert entry.expires_at == T0 + cache.ttl_seconds


def test_entry_usable_until_last_second(snapshot):
    cache = RateCache()
    entry = cache.store(snapshot, fetched_at=T0)

    assert cache.get_usable(T0) is entry
    assert cache.get_usable(T0 + 1799) is entry


def test_entry_unusable_at_expiry(snapshot):
    cache = RateCache()
    cache.store(snapshot, fetched_at=T0)

    assert cache.get_usable(T0 + 1800) is None
    assert cache.get_usable(T0 + 86400) is None


def test_store_replaces_previous_entry(snapshot):
    cache = RateCache()
    cache.store(snapshot, fetched_at=T0)
    newer = RateSnapshot(base='USD', timestamp=T0 + 2000, rates=dict(snapshot.rates))

    entry = cache.store(newer, fetched_at=T0 + 2000)

    assert cache.get_usable(T0 + 2001) is entry
    assert cache.entry.snapshot is newer


def test_custom_ttl(snapshot):
    cache = RateCache(ttl_seconds=60)
    cache.store(snapshot, fetched_at=T0)

    assert cache.get_usable(T0 + 59) is not None
    assert cache.get_usable(T0 + 60) is None


def test_clear_empties_slot(snapshot):
    cache = RateCache()
    cache.store(snapshot, fetched_at=T0)

    cache.clear()

    assert cache.get_usable(T0) is None


def test_snapshot_is_immutable(snapshot):
    with pytest.raises(FrozenInstanceError):
        snapshot.timestamp = 0

    with pytest.raises(TypeError):
        snapshot.rates['BTC'] = Decimal('1')


def test_snapshot_does_not_alias_source_dict():
    rates = {'BTC': Decimal('0.000023'), 'GBP': Decimal('0.79'), 'JPY': Decimal('149.5')}
    snap = RateSnapshot(base='USD', timestamp=T0, rates=rates)

    rates['BTC'] = Decimal('1')

    assert snap.rates['BTC'] == Decimal('0.000023')
