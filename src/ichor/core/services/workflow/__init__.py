from .delegate_handler import DelegateHandler, field_changes
from .events import FieldChange, TriggerEvent
from .publisher import EventPublisher, PublisherMetrics

__all__ = [
    "DelegateHandler",
    "EventPublisher",
    "FieldChange",
    "PublisherMetrics",
    "TriggerEvent",
    "field_changes",
]
