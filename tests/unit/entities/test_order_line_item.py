"""Line total pricing for order line items."""

import uuid
from decimal import Decimal

import pytest

from src.ichor.entities.sales.order_line_item import (
    DISCOUNT_FLAT,
    DISCOUNT_PERCENT,
    NewOrderLineItem,
    OrderLineItemRepository,
    OrderLineItemService,
    UpdateOrderLineItem,
    line_total,
)


class TestLineTotal:
    @pytest.mark.parametrize(
        ("quantity", "price", "discount", "kind", "expected"),
        [
            (3, "10.00", "0", DISCOUNT_FLAT, "30.00"),
            (3, "10.00", "5", DISCOUNT_FLAT, "25.00"),
            (4, "12.50", "10", DISCOUNT_PERCENT, "45.00"),
            (1, "9.99", "33.333", DISCOUNT_PERCENT, "6.66"),
            (2, "1.005", "0", DISCOUNT_FLAT, "2.01"),
        ],
    )
    def test_computation(self, quantity, price, discount, kind, expected):
        assert line_total(quantity, Decimal(price), Decimal(discount), kind) == Decimal(
            expected
        )

    def test_never_negative(self):
        """A flat discount larger than the gross amount floors at zero."""
        assert line_total(1, Decimal("5"), Decimal("20"), DISCOUNT_FLAT) == Decimal("0.00")
        assert line_total(1, Decimal("5"), Decimal("150"), DISCOUNT_PERCENT) == Decimal(
            "0.00"
        )


class TestOrderLineItemService:
    @pytest.fixture
    def service(self, session):
        return OrderLineItemService(OrderLineItemRepository(session))

    def _new(self, **overrides) -> NewOrderLineItem:
        data = {
            "order_id": uuid.uuid4(),
            "product_id": uuid.uuid4(),
            "quantity": 2,
            "unit_price": Decimal("15.00"),
            "line_item_fulfillment_statuses_id": uuid.uuid4(),
            "created_by": uuid.uuid4(),
        }
        data.update(overrides)
        return NewOrderLineItem(**data)

    def test_total_computed_when_omitted(self, service):
        item = service.create(self._new(discount=Decimal("10"), discount_type=DISCOUNT_PERCENT))
        assert item.line_total == Decimal("27.00")
        assert item.updated_by == item.created_by

    def test_explicit_total_kept(self, service):
        item = service.create(self._new(line_total=Decimal("29.50")))
        assert item.line_total == Decimal("29.50")

    def test_repricing_recomputes_total(self, service):
        item = service.create(self._new())
        updated = service.update(item, UpdateOrderLineItem(quantity=5))
        assert updated.line_total == Decimal("75.00")

    def test_other_changes_keep_total(self, service):
        item = service.create(self._new(line_total=Decimal("1.00")))
        updated = service.update(item, UpdateOrderLineItem(description="gift wrap"))
        assert updated.line_total == Decimal("1.00")
