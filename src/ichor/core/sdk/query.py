"""Paged query result envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.ichor.core.sdk.page import Page

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """One page of items plus the total number of matching rows."""

    items: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    rows_per_page: int = 10


def new_result(items: list[T], total: int, page: Page) -> Result[T]:
    return Result(
        items=items,
        total=total,
        page=page.number,
        rows_per_page=page.rows_per_page,
    )
