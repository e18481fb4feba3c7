"""Delegate-to-workflow bridge and the bounded event publisher."""

import uuid

from src.ichor.core.sdk import delegate as dlg
from src.ichor.core.sdk.delegate import Delegate
from src.ichor.core.services.workflow import (
    DelegateHandler,
    EventPublisher,
    TriggerEvent,
    field_changes,
)
from src.ichor.entities.assets.tag import NewTag, TagRepository, TagService, UpdateTag


def _event(name: str = "tags") -> TriggerEvent:
    return TriggerEvent(event_type="on_create", entity_name=name)


class TestEventPublisher:
    def test_publish_and_drain(self):
        publisher = EventPublisher(max_size=10)
        publisher.publish(_event("a"))
        publisher.publish(_event("b"))

        assert [e.entity_name for e in publisher.drain(limit=1)] == ["a"]
        assert [e.entity_name for e in publisher.drain()] == ["b"]
        assert publisher.drain() == []

    def test_full_queue_drops_oldest(self, log_messages):
        """Publishing never blocks; the oldest pending event makes room."""
        publisher = EventPublisher(max_size=2)
        for name in ("first", "second", "third"):
            publisher.publish(_event(name))

        metrics = publisher.metrics()
        assert metrics.total_enqueued == 3
        assert metrics.total_dropped == 1
        assert metrics.pending == 2
        assert [e.entity_name for e in publisher.drain()] == ["second", "third"]
        assert any("workflow queue full" in str(m) for m in log_messages)


class TestFieldChanges:
    def test_detects_differences(self):
        changes = field_changes(
            {"name": "old", "code": "X", "updated_date": "t1"},
            {"name": "new", "code": "X", "updated_date": "t2", "extra": 1},
        )
        assert set(changes) == {"name", "extra"}
        assert changes["name"].old_value == "old"
        assert changes["name"].new_value == "new"
        assert changes["extra"].old_value is None


class TestDelegateHandler:
    def test_to_event_for_update(self):
        entity_id = str(uuid.uuid4())
        data = dlg.DelegateData(
            "tag",
            dlg.ACTION_UPDATED,
            (
                '{"entityID":"%s","userID":"u-1",'
                '"entity":{"name":"new"},"beforeEntity":{"name":"old"}}' % entity_id
            ).encode(),
        )

        event = DelegateHandler.to_event("tags", data)

        assert event.event_type == "on_update"
        assert event.entity_name == "tags"
        assert event.entity_id == entity_id
        assert event.user_id == "u-1"
        assert event.raw_data == {"name": "new"}
        assert event.field_changes["name"].old_value == "old"

    def test_service_writes_reach_publisher(self, session):
        """Create, update and delete on a registered domain each enqueue an event."""
        publisher = EventPublisher()
        delegate = Delegate()
        DelegateHandler(publisher).register_domain(delegate, "tag", "tags")
        service = TagService(TagRepository(session), delegate)

        tag = service.create(NewTag(name="fragile"))
        service.update(tag, UpdateTag(description="handle with care"))
        service.delete(tag)

        events = publisher.drain()
        assert [e.event_type for e in events] == ["on_create", "on_update", "on_delete"]
        assert {e.entity_id for e in events} == {str(tag.id)}
        assert events[0].field_changes["name"].new_value == "fragile"
        assert set(events[1].field_changes) == {"description"}
