import uuid
from unittest.mock import MagicMock

import pytest

from src.ichor.entities.core.currency import (
    CachedCurrencyRepository,
    CurrencyNotFoundError,
    CurrencyRepository,
    CurrencyService,
    NewCurrency,
    UpdateCurrency,
    new_currency_cache,
)


@pytest.fixture
def cache():
    return new_currency_cache(max_size=100, ttl_seconds=60)


@pytest.fixture
def store(session, cache):
    return CachedCurrencyRepository(CurrencyRepository(session), cache)


@pytest.fixture
def service(store):
    return CurrencyService(store)


def _new(code: str) -> NewCurrency:
    return NewCurrency(code=code, name=code, symbol="$", locale="en-US", decimal_places=2)


class TestCachedCurrencyRepository:
    def test_create_populates_cache(self, service, cache):
        currency = service.create(_new("USD"))
        assert cache[currency.id] == currency

    def test_hit_skips_database(self, cache):
        """A cached id is served without touching the wrapped store."""
        inner = MagicMock(spec=CurrencyRepository)
        store = CachedCurrencyRepository(inner, cache)
        currency_id = uuid.uuid4()
        cache[currency_id] = sentinel = object()

        assert store.query_by_id(currency_id) is sentinel
        inner.query_by_id.assert_not_called()

    def test_miss_loads_and_caches(self, service, store, cache):
        currency = service.create(_new("EUR"))
        cache.clear()

        assert store.query_by_id(currency.id) == currency
        assert currency.id in cache

    def test_update_refreshes_entry(self, service, cache):
        currency = service.create(_new("GBP"))
        updated = service.update(currency, UpdateCurrency(name="Pound Sterling"))
        assert cache[currency.id].name == "Pound Sterling"
        assert service.query_by_id(currency.id) == updated

    def test_delete_evicts(self, service, cache):
        currency = service.create(_new("JPY"))
        service.delete(currency)

        assert currency.id not in cache
        with pytest.raises(CurrencyNotFoundError):
            service.query_by_id(currency.id)

    def test_query_by_ids_mixes_hits_and_misses(self, service, store, cache):
        """Only the misses go to the database; input order is preserved."""
        first = service.create(_new("CAD"))
        second = service.create(_new("MXN"))
        cache.pop(second.id)

        found = store.query_by_ids([second.id, uuid.uuid4(), first.id])

        assert [c.code for c in found] == ["MXN", "CAD"]
        assert second.id in cache

    def test_with_session_shares_cache(self, session, store, cache):
        rebound = store.with_session(session)
        currency = CurrencyService(rebound).create(_new("CHF"))
        assert currency.id in cache
