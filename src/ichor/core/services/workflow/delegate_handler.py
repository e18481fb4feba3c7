"""Bridge from business delegate events to workflow trigger events."""

from typing import Any

from loguru import logger

from src.ichor.core.sdk.delegate import (
    ACTION_CREATED,
    ACTION_DELETED,
    ACTION_UPDATED,
    Delegate,
    DelegateData,
)
from src.ichor.core.services.workflow.events import (
    EVENT_ON_CREATE,
    EVENT_ON_DELETE,
    EVENT_ON_UPDATE,
    FieldChange,
    TriggerEvent,
)
from src.ichor.core.services.workflow.publisher import EventPublisher

_EVENT_TYPES = {
    ACTION_CREATED: EVENT_ON_CREATE,
    ACTION_UPDATED: EVENT_ON_UPDATE,
    ACTION_DELETED: EVENT_ON_DELETE,
}

# Audit columns change on every write and carry no business meaning.
_IGNORED_FIELDS = {"updated_date", "updated_by"}


def field_changes(before: dict[str, Any], after: dict[str, Any]) -> dict[str, FieldChange]:
    changes = {}
    for name in before.keys() | after.keys():
        if name in _IGNORED_FIELDS:
            continue
        old, new = before.get(name), after.get(name)
        if old != new:
            changes[name] = FieldChange(old_value=old, new_value=new)
    return changes


class DelegateHandler:
    def __init__(self, publisher: EventPublisher) -> None:
        self._publisher = publisher

    def register_domain(self, delegate: Delegate, domain: str, entity_name: str) -> None:
        """Subscribe to ``domain``'s write events and publish them as ``entity_name``."""
        for action in _EVENT_TYPES:
            delegate.register(domain, action, self._handler(entity_name))
        logger.debug("workflow events enabled for {} as {}", domain, entity_name)

    def _handler(self, entity_name: str):
        def handle(data: DelegateData) -> None:
            self._publisher.publish(self.to_event(entity_name, data))

        return handle

    @staticmethod
    def to_event(entity_name: str, data: DelegateData) -> TriggerEvent:
        params = data.params()
        entity = params.get("entity") or {}

        changes: dict[str, FieldChange] = {}
        if data.action == ACTION_UPDATED:
            changes = field_changes(params.get("beforeEntity") or {}, entity)
        elif data.action == ACTION_CREATED:
            changes = {
                name: FieldChange(new_value=value) for name, value in entity.items()
            }

        return TriggerEvent(
            event_type=_EVENT_TYPES[data.action],
            entity_name=entity_name,
            entity_id=params.get("entityID"),
            field_changes=changes,
            raw_data=entity,
            user_id=params.get("userID"),
        )
