"""Bounded in-memory queue of trigger events."""

from collections import deque
from threading import Lock

from loguru import logger
from pydantic import BaseModel

from src.ichor.core.services.workflow.events import TriggerEvent


class PublisherMetrics(BaseModel):
    total_enqueued: int = 0
    total_dropped: int = 0
    pending: int = 0


class EventPublisher:
    """Holds published events until a consumer drains them.

    When the queue is full the oldest event is discarded; nothing is retried.
    """

    def __init__(self, max_size: int = 1000) -> None:
        self._queue: deque[TriggerEvent] = deque()
        self._max_size = max_size
        self._lock = Lock()
        self._enqueued = 0
        self._dropped = 0

    def publish(self, event: TriggerEvent) -> None:
        with self._lock:
            if len(self._queue) >= self._max_size:
                dropped = self._queue.popleft()
                self._dropped += 1
                logger.warning(
                    "workflow queue full, dropped {} event for {}",
                    dropped.event_type,
                    dropped.entity_name,
                )
            self._queue.append(event)
            self._enqueued += 1

    def drain(self, limit: int | None = None) -> list[TriggerEvent]:
        with self._lock:
            count = len(self._queue) if limit is None else min(limit, len(self._queue))
            return [self._queue.popleft() for _ in range(count)]

    def metrics(self) -> PublisherMetrics:
        with self._lock:
            return PublisherMetrics(
                total_enqueued=self._enqueued,
                total_dropped=self._dropped,
                pending=len(self._queue),
            )
