"""SQL store behaviour exercised through real domain repositories.

Uses in-memory SQLite with foreign keys enabled.
"""

import uuid

import pytest

from src.ichor.core.sdk.order import ASC, DESC, OrderBy
from src.ichor.core.sdk.page import Page
from src.ichor.core.services.database.sqldb import DBNotFoundError
from src.ichor.entities.core.currency import (
    CurrencyFilter,
    CurrencyNotFoundError,
    CurrencyRepository,
    CurrencyService,
    CurrencyUniqueError,
    NewCurrency,
)
from src.ichor.entities.geography.country import CountryRepository, CountryService, NewCountry
from src.ichor.entities.geography.region import (
    NewRegion,
    RegionFilter,
    RegionForeignKeyError,
    RegionRepository,
    RegionService,
)
from src.ichor.entities.procurement.po_line_item_status import (
    NewPurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatusNotFoundError,
    PurchaseOrderLineItemStatusRepository,
    PurchaseOrderLineItemStatusService,
)


def _currency(code: str, sort_order: int = 0, is_active: bool = True) -> NewCurrency:
    return NewCurrency(
        code=code,
        name=f"{code} currency",
        symbol=code[0],
        locale="en-US",
        decimal_places=2,
        sort_order=sort_order,
        is_active=is_active,
    )


@pytest.fixture
def currencies(session) -> CurrencyService:
    return CurrencyService(CurrencyRepository(session))


class TestCurrencyRepository:
    def test_query_by_id_round_trip(self, currencies):
        created = currencies.create(_currency("USD"))
        assert currencies.query_by_id(created.id) == created

    def test_not_found(self, currencies):
        with pytest.raises(CurrencyNotFoundError, match="currency not found") as exc:
            currencies.query_by_id(uuid.uuid4())
        assert isinstance(exc.value.__cause__, DBNotFoundError)

    def test_unique_code(self, currencies):
        """A duplicate code surfaces as the domain's unique error."""
        currencies.create(_currency("USD"))
        with pytest.raises(CurrencyUniqueError):
            currencies.create(_currency("USD"))

    def test_paging_and_count(self, currencies):
        """25 rows at 10 per page: pages of 10, 10, 5 and a total of 25."""
        for i in range(25):
            currencies.create(_currency(f"C{i:02d}", sort_order=i))

        flt = CurrencyFilter()
        order_by = OrderBy.new("sort_order", ASC)
        pages = [currencies.query(flt, order_by, Page(n, 10)) for n in (1, 2, 3, 4)]

        assert [len(p) for p in pages] == [10, 10, 5, 0]
        assert currencies.count(flt) == 25
        assert pages[0][0].code == "C00"
        assert pages[2][-1].code == "C24"

    def test_order_direction(self, currencies):
        for i, code in enumerate(["AAA", "BBB", "CCC"]):
            currencies.create(_currency(code, sort_order=i))

        rows = currencies.query(CurrencyFilter(), OrderBy.new("code", DESC), Page(1, 10))

        assert [c.code for c in rows] == ["CCC", "BBB", "AAA"]

    def test_filters(self, currencies):
        currencies.create(_currency("USD"))
        currencies.create(_currency("EUR", is_active=False))

        inactive = currencies.query(
            CurrencyFilter(is_active=False), OrderBy.new("code"), Page(1, 10)
        )
        partial = currencies.query(CurrencyFilter(code="us"), OrderBy.new("code"), Page(1, 10))

        assert [c.code for c in inactive] == ["EUR"]
        assert [c.code for c in partial] == ["USD"]
        assert currencies.count(CurrencyFilter(is_active=True)) == 1

    def test_query_by_ids_and_all(self, currencies):
        """Batch lookups skip unknown ids and follow the default order."""
        usd = currencies.create(_currency("USD", sort_order=2))
        eur = currencies.create(_currency("EUR", sort_order=1))

        found = currencies.query_by_ids([usd.id, uuid.uuid4(), eur.id])

        assert [c.code for c in found] == ["EUR", "USD"]
        assert currencies.query_by_ids([]) == []
        assert [c.code for c in currencies.query_all()] == ["EUR", "USD"]

    def test_query_by_code(self, currencies):
        currencies.create(_currency("GBP"))
        assert currencies.query_by_code("GBP").name == "GBP currency"


class TestForeignKeys:
    def test_region_requires_country(self, session):
        regions = RegionService(RegionRepository(session))
        with pytest.raises(RegionForeignKeyError):
            regions.create(NewRegion(country_id=uuid.uuid4(), name="Nowhere", code="NW"))

    def test_region_with_country(self, session):
        country = CountryService(CountryRepository(session)).create(
            NewCountry(number=840, name="United States", alpha_2="US", alpha_3="USA")
        )
        regions = RegionService(RegionRepository(session))

        region = regions.create(NewRegion(country_id=country.id, name="Texas", code="TX"))

        assert regions.count(RegionFilter(country_id=country.id)) == 1
        assert regions.query_by_id(region.id).name == "Texas"


class TestQueryByName:
    def test_exact_match_only(self, session):
        """A name that is a substring of another row is still reported missing."""
        statuses = PurchaseOrderLineItemStatusRepository(session)
        partial = PurchaseOrderLineItemStatusService(statuses).create(
            NewPurchaseOrderLineItemStatus(name="PARTIALLY_RECEIVED", sort_order=0)
        )

        assert statuses.query_by_name("PARTIALLY_RECEIVED").id == partial.id
        with pytest.raises(PurchaseOrderLineItemStatusNotFoundError):
            statuses.query_by_name("RECEIVED")
