"""Trigger events emitted for workflow automation."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from src.ichor.core.sdk.clock import utcnow

EVENT_ON_CREATE = "on_create"
EVENT_ON_UPDATE = "on_update"
EVENT_ON_DELETE = "on_delete"

EventType = Literal["on_create", "on_update", "on_delete"]


class FieldChange(BaseModel):
    old_value: Any = None
    new_value: Any = None


class TriggerEvent(BaseModel):
    event_type: EventType
    entity_name: str
    entity_id: str | None = None
    field_changes: dict[str, FieldChange] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=utcnow)
    raw_data: dict[str, Any] = Field(default_factory=dict)
    user_id: str | None = None
