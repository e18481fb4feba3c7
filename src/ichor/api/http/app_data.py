"""Process-wide dependencies shared by every request."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from threading import RLock
from typing import TypeVar

from cachetools import TTLCache
from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session

from src.ichor.core.sdk.crud import CrudService
from src.ichor.core.sdk.delegate import Delegate
from src.ichor.core.sdk.errors import NotFoundError
from src.ichor.core.services.auth import Auth
from src.ichor.core.services.database.db_session import DbSessionService
from src.ichor.core.services.workflow import DelegateHandler, EventPublisher
from src.ichor.entities.assets import asset_tag, tag
from src.ichor.entities.config import form
from src.ichor.entities.core import currency, user
from src.ichor.entities.geography import city, country, region, street
from src.ichor.entities.hr import office
from src.ichor.entities.inventory import inventory_transaction, lot_trackings
from src.ichor.entities.procurement import po_line_item_status, supplier, supplier_product
from src.ichor.entities.sales import order_line_item
from src.ichor.runtime.config.config_data import ConfigData

S = TypeVar("S", bound=CrudService)

# Business service -> SQL store, plus the entity name used for workflow events.
SERVICE_STORES: dict[type[CrudService], tuple[type, str]] = {
    currency.CurrencyService: (currency.CurrencyRepository, "currencies"),
    user.UserService: (user.UserRepository, "users"),
    form.FormService: (form.FormRepository, "forms"),
    tag.TagService: (tag.TagRepository, "tags"),
    asset_tag.AssetTagService: (asset_tag.AssetTagRepository, "asset_tags"),
    country.CountryService: (country.CountryRepository, "countries"),
    region.RegionService: (region.RegionRepository, "regions"),
    city.CityService: (city.CityRepository, "cities"),
    street.StreetService: (street.StreetRepository, "streets"),
    office.OfficeService: (office.OfficeRepository, "offices"),
    supplier.SupplierService: (supplier.SupplierRepository, "suppliers"),
    supplier_product.SupplierProductService: (
        supplier_product.SupplierProductRepository,
        "supplier_products",
    ),
    po_line_item_status.PurchaseOrderLineItemStatusService: (
        po_line_item_status.PurchaseOrderLineItemStatusRepository,
        "purchase_order_line_item_statuses",
    ),
    inventory_transaction.InventoryTransactionService: (
        inventory_transaction.InventoryTransactionRepository,
        "inventory_transactions",
    ),
    lot_trackings.LotTrackingsService: (
        lot_trackings.LotTrackingsRepository,
        "lot_trackings",
    ),
    order_line_item.OrderLineItemService: (
        order_line_item.OrderLineItemRepository,
        "order_line_items",
    ),
}


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    auth: Auth
    delegate: Delegate
    event_publisher: EventPublisher
    currency_cache: TTLCache | None = None
    currency_cache_lock: RLock = field(default_factory=RLock)

    def service(self, service_cls: type[S], session: Session) -> S:
        """Build ``service_cls`` over a store bound to ``session``."""
        store_cls, _ = SERVICE_STORES[service_cls]
        storer = store_cls(session)
        if service_cls is currency.CurrencyService and self.currency_cache is not None:
            storer = currency.CachedCurrencyRepository(
                storer, self.currency_cache, self.currency_cache_lock
            )
        return service_cls(storer, self.delegate)


def _user_enabled_lookup(database_service: DbSessionService):
    def user_enabled(user_id: uuid.UUID) -> bool:
        with database_service.get_session() as session:
            try:
                return user.UserRepository(session).query_by_id(user_id).enabled
            except NotFoundError:
                return False

    return user_enabled


def build_dependencies(
    config: ConfigData, engine: Engine | None = None
) -> ApplicationDependencies:
    """Wire the database, auth, delegate and workflow bridge for one process."""
    database_service = DbSessionService(engine)
    delegate = Delegate()
    publisher = EventPublisher(max_size=config.workflow.queue_size)

    if config.workflow.enabled:
        handler = DelegateHandler(publisher)
        for service_cls, (_, entity_name) in SERVICE_STORES.items():
            handler.register_domain(delegate, service_cls.domain, entity_name)
        logger.info("Workflow bridge registered for {} domains", len(SERVICE_STORES))

    currency_cache = None
    if config.cache.enabled:
        currency_cache = currency.new_currency_cache(
            config.cache.max_size, config.cache.ttl_seconds
        )

    return ApplicationDependencies(
        database_service=database_service,
        auth=Auth(config.auth, _user_enabled_lookup(database_service)),
        delegate=delegate,
        event_publisher=publisher,
        currency_cache=currency_cache,
    )
