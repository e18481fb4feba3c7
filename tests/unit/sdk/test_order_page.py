"""Tests for ORDER BY and paging parameter parsing."""

import pytest

from src.ichor.core.sdk import order, page
from src.ichor.core.sdk.order import ASC, DESC, OrderBy

FIELDS = {"name": "name", "created": "created_date"}
DEFAULT = OrderBy.new("name", ASC)


class TestOrderParse:
    """Test order.parse against an allow-list."""

    def test_empty_value_returns_default(self):
        """An absent orderBy falls back to the domain default."""
        assert order.parse(FIELDS, None, DEFAULT) is DEFAULT
        assert order.parse(FIELDS, "", DEFAULT) is DEFAULT

    def test_field_only_is_ascending(self):
        assert order.parse(FIELDS, "name", DEFAULT) == OrderBy("name", ASC)

    def test_public_name_maps_to_business_key(self):
        """Clients send public names; the parsed value carries the store key."""
        assert order.parse(FIELDS, "created,DESC", DEFAULT) == OrderBy(
            "created_date", DESC
        )

    def test_direction_is_case_insensitive(self):
        assert order.parse(FIELDS, "name,desc", DEFAULT).direction == DESC

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="unknown order: bogus"):
            order.parse(FIELDS, "bogus", DEFAULT)

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValueError, match="unknown direction: sideways"):
            order.parse(FIELDS, "name,sideways", DEFAULT)

    @pytest.mark.parametrize("value", ["name,", "name, "])
    def test_empty_direction_rejected(self, value):
        with pytest.raises(ValueError, match="unknown direction"):
            order.parse(FIELDS, value, DEFAULT)

    def test_too_many_parts_rejected(self):
        with pytest.raises(ValueError, match="invalid order by format"):
            order.parse(FIELDS, "name,ASC,extra", DEFAULT)

    def test_new_validates_direction(self):
        assert OrderBy.new("name", "desc").direction == DESC
        with pytest.raises(ValueError):
            OrderBy.new("name", "UP")


class TestPageParse:
    """Test page.parse bounds and defaults."""

    def test_defaults(self):
        pg = page.parse(None, None)
        assert pg.number == 1
        assert pg.rows_per_page == page.DEFAULT_ROWS
        assert pg.offset == 0

    def test_offset(self):
        """Page 3 of 10 starts after the first 20 rows."""
        assert page.parse("3", "10").offset == 20

    @pytest.mark.parametrize(
        ("number", "rows", "message"),
        [
            ("0", "10", "page value too small"),
            ("1", "0", "rows value too small"),
            ("1", "101", "rows value too large"),
            ("abc", "10", "page conversion"),
            ("1", "ten", "rows conversion"),
        ],
    )
    def test_invalid_values(self, number, rows, message):
        with pytest.raises(ValueError, match=message):
            page.parse(number, rows)

    def test_custom_max_rows(self):
        with pytest.raises(ValueError, match="must be less than 5"):
            page.parse("1", "6", max_rows=5)
        assert page.parse("1", "5", max_rows=5).rows_per_page == 5

    def test_must_raises_for_invalid_bounds(self):
        assert page.Page.must(2, 25).offset == 25
        with pytest.raises(ValueError):
            page.Page.must(0, 10)
