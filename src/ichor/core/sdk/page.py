"""Offset paging bounds."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ROWS = 10
MAX_ROWS = 100


@dataclass(frozen=True)
class Page:
    number: int = 1
    rows_per_page: int = DEFAULT_ROWS

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.rows_per_page

    @classmethod
    def must(cls, number: int, rows_per_page: int) -> Page:
        """Build a page for internal callers; invalid bounds are a programming error."""
        return parse(str(number), str(rows_per_page))


def _to_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} conversion: {value!r} is not a number") from e


def parse(
    page: str | None,
    rows_per_page: str | None,
    max_rows: int = MAX_ROWS,
    default_rows: int = DEFAULT_ROWS,
) -> Page:
    number = 1
    if page:
        number = _to_int("page", page)

    rows = default_rows
    if rows_per_page:
        rows = _to_int("rows", rows_per_page)

    if number <= 0:
        raise ValueError("page value too small, must be larger than 0")
    if rows <= 0:
        raise ValueError("rows value too small, must be larger than 0")
    if rows > max_rows:
        raise ValueError(f"rows value too large, must be less than {max_rows}")

    return Page(number, rows)
