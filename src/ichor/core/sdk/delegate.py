"""In-process event fan-out between business domains.

Business services call :meth:`Delegate.call` after a successful write. Other
components register callbacks per ``(domain, action)`` pair. Delivery is
synchronous and best effort: a failing callback never undoes the write that
produced the event.
"""

from __future__ import annotations

import json
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import BaseModel

ACTION_CREATED = "created"
ACTION_UPDATED = "updated"
ACTION_DELETED = "deleted"


@dataclass(frozen=True)
class DelegateData:
    domain: str
    action: str
    raw_params: bytes

    def params(self) -> dict[str, Any]:
        return json.loads(self.raw_params) if self.raw_params else {}


DelegateFunc = Callable[[DelegateData], None]


class DelegateError(Exception):
    """Raised when at least one registered callback failed."""

    def __init__(self, data: DelegateData, errors: list[BaseException]):
        self.data = data
        self.errors = errors
        super().__init__(
            f"delegate {data.domain}.{data.action}: {len(errors)} callback(s) failed: "
            + "; ".join(str(e) for e in errors)
        )


class Delegate:
    """Registry of callbacks keyed by domain and action."""

    def __init__(self) -> None:
        self._funcs: dict[str, dict[str, list[DelegateFunc]]] = defaultdict(
            lambda: defaultdict(list)
        )

    def register(self, domain: str, action: str, fn: DelegateFunc) -> None:
        self._funcs[domain][action].append(fn)
        logger.debug("delegate registered: {}.{}", domain, action)

    def call(self, data: DelegateData) -> None:
        funcs = self._funcs.get(data.domain, {}).get(data.action, [])
        errors: list[BaseException] = []
        for fn in funcs:
            try:
                fn(data)
            except Exception as e:
                errors.append(e)
        if errors:
            raise DelegateError(data, errors) from errors[0]

    def registered(self, domain: str, action: str) -> int:
        return len(self._funcs.get(domain, {}).get(action, []))


def _snapshot(entity: BaseModel) -> dict[str, Any]:
    return entity.model_dump(mode="json")


def _user_id(entity: BaseModel, *fields: str) -> str | None:
    for name in fields:
        value = getattr(entity, name, None)
        if value:
            return str(value)
    return None


def _encode(params: dict[str, Any]) -> bytes:
    return json.dumps(params, separators=(",", ":")).encode("utf-8")


def created_data(domain: str, entity: BaseModel) -> DelegateData:
    return DelegateData(
        domain=domain,
        action=ACTION_CREATED,
        raw_params=_encode(
            {
                "entityID": str(entity.id),
                "userID": _user_id(entity, "created_by"),
                "entity": _snapshot(entity),
            }
        ),
    )


def updated_data(domain: str, before: BaseModel, after: BaseModel) -> DelegateData:
    return DelegateData(
        domain=domain,
        action=ACTION_UPDATED,
        raw_params=_encode(
            {
                "entityID": str(after.id),
                "userID": _user_id(after, "updated_by", "created_by"),
                "entity": _snapshot(after),
                "beforeEntity": _snapshot(before),
            }
        ),
    )


def deleted_data(domain: str, entity: BaseModel) -> DelegateData:
    return DelegateData(
        domain=domain,
        action=ACTION_DELETED,
        raw_params=_encode(
            {
                "entityID": str(entity.id),
                "userID": _user_id(entity, "updated_by", "created_by"),
                "entity": _snapshot(entity),
            }
        ),
    )
