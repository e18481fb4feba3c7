"""ORDER BY parsing against a per-domain allow-list of fields."""

from __future__ import annotations

from dataclasses import dataclass

ASC = "ASC"
DESC = "DESC"

_DIRECTIONS = {ASC, DESC}


@dataclass(frozen=True)
class OrderBy:
    """A validated ordering: business field key plus direction."""

    field: str
    direction: str = ASC

    @classmethod
    def new(cls, field: str, direction: str = ASC) -> OrderBy:
        direction = direction.upper()
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction: {direction}")
        return cls(field, direction)


def parse(field_mappings: dict[str, str], order_by: str | None, default: OrderBy) -> OrderBy:
    """Parse ``field`` or ``field,direction`` from a query string value.

    ``field_mappings`` maps the public names clients send to the business
    field keys the store understands. An empty value yields ``default``;
    anything supplied but invalid raises ``ValueError``.
    """
    if not order_by:
        return default

    parts = [part.strip() for part in order_by.split(",")]
    if len(parts) > 2:
        raise ValueError(f"invalid order by format: {order_by}")

    name = parts[0]
    if name not in field_mappings:
        raise ValueError(f"unknown order: {name}")

    direction = ASC
    if len(parts) == 2:
        direction = parts[1].upper()
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction: {parts[1]}")

    return OrderBy(field_mappings[name], direction)
