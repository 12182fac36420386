"""Tests for Event entity."""

from datetime import datetime, timezone

import pytest

from scribe.domain.entities import Event, EventType


class TestEventIdentityKey:
    """Event.get_identity_key tests."""

    def test_message_key_is_per_message(self) -> None:
        first = Event(
            type=EventType.MESSAGE,
            payload={"room_topic": "general", "message_id": "1"},
        )
        second = Event(
            type=EventType.MESSAGE,
            payload={"room_topic": "general", "message_id": "2"},
        )
        assert first.get_identity_key() == "message:general:1"
        assert first.get_identity_key() != second.get_identity_key()

    def test_trigger_check_key_is_shared(self) -> None:
        first = Event(type=EventType.TRIGGER_CHECK, payload={})
        second = Event(type=EventType.TRIGGER_CHECK, payload={})
        assert first.get_identity_key() == second.get_identity_key()

    def test_created_at_defaults_to_utc_now(self) -> None:
        event = Event(type=EventType.TRIGGER_CHECK, payload={})
        assert event.created_at.tzinfo == timezone.utc

    def test_is_frozen(self) -> None:
        event = Event(
            type=EventType.TRIGGER_CHECK,
            payload={},
            created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
        )
        with pytest.raises(AttributeError):
            event.type = EventType.MESSAGE  # type: ignore[misc]
