"""Read-through cache in front of the currency store.

Writes go to the database first and then refresh the cached entry, deletes
evict it. The cache and its lock are owned by the application so every
request-scoped store shares them.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from threading import RLock

from cachetools import TTLCache
from loguru import logger
from sqlmodel import Session

from src.ichor.core.sdk.order import OrderBy
from src.ichor.core.sdk.page import Page
from src.ichor.entities.core.currency.entity import Currency, CurrencyFilter
from src.ichor.entities.core.currency.repository import CurrencyRepository


def new_currency_cache(max_size: int, ttl_seconds: int) -> TTLCache:
    return TTLCache(maxsize=max_size, ttl=ttl_seconds)


class CachedCurrencyRepository:
    def __init__(
        self,
        storer: CurrencyRepository,
        cache: TTLCache,
        lock: RLock | None = None,
    ) -> None:
        self._storer = storer
        self._cache = cache
        self._lock = lock or RLock()

    def with_session(self, session: Session) -> CachedCurrencyRepository:
        return CachedCurrencyRepository(
            self._storer.with_session(session), self._cache, self._lock
        )

    def _get(self, currency_id: uuid.UUID) -> Currency | None:
        with self._lock:
            return self._cache.get(currency_id)

    def _set(self, currency: Currency) -> None:
        with self._lock:
            self._cache[currency.id] = currency

    def _evict(self, currency_id: uuid.UUID) -> None:
        with self._lock:
            self._cache.pop(currency_id, None)

    def create(self, currency: Currency) -> None:
        self._storer.create(currency)
        self._set(currency)

    def update(self, currency: Currency) -> None:
        self._storer.update(currency)
        self._set(currency)

    def delete(self, currency: Currency) -> None:
        self._storer.delete(currency)
        self._evict(currency.id)

    def query(self, flt: CurrencyFilter, order_by: OrderBy, page: Page) -> list[Currency]:
        return self._storer.query(flt, order_by, page)

    def count(self, flt: CurrencyFilter) -> int:
        return self._storer.count(flt)

    def query_by_id(self, currency_id: uuid.UUID) -> Currency:
        cached = self._get(currency_id)
        if cached is not None:
            return cached

        currency = self._storer.query_by_id(currency_id)
        self._set(currency)
        return currency

    def query_by_ids(self, ids: Sequence[uuid.UUID]) -> list[Currency]:
        found: dict[uuid.UUID, Currency] = {}
        misses: list[uuid.UUID] = []
        for currency_id in ids:
            cached = self._get(currency_id)
            if cached is None:
                misses.append(currency_id)
            else:
                found[currency_id] = cached

        if misses:
            logger.debug("currency cache: {} hit(s), {} miss(es)", len(found), len(misses))
            for currency in self._storer.query_by_ids(misses):
                self._set(currency)
                found[currency.id] = currency

        return [found[currency_id] for currency_id in ids if currency_id in found]

    def query_all(self) -> list[Currency]:
        currencies = self._storer.query_all()
        for currency in currencies:
            self._set(currency)
        return currencies

    def query_by_code(self, code: str) -> Currency:
        return self._storer.query_by_code(code)
