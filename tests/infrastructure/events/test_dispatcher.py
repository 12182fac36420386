"""Tests for EventDispatcher."""

import pytest

from scribe.domain.entities.event import Event, EventType
from scribe.infrastructure.events.dispatcher import EventDispatcher, event_handler


@pytest.fixture
def dispatcher() -> EventDispatcher:
    """Create an EventDispatcher instance."""
    return EventDispatcher()


@pytest.fixture
def tick() -> Event:
    return Event(type=EventType.TRIGGER_CHECK, payload={})


class TestEventHandlerDecorator:
    """event_handler decorator tests."""

    def test_sets_event_type(self) -> None:
        @event_handler(EventType.MESSAGE)
        async def handler(event: Event) -> None:
            pass

        assert handler._event_type == EventType.MESSAGE  # type: ignore[attr-defined]


class TestEventDispatcher:
    """EventDispatcher tests."""

    async def test_dispatch_to_registered_handler(
        self, dispatcher: EventDispatcher, tick: Event
    ) -> None:
        received: list[Event] = []

        async def handler(event: Event) -> None:
            received.append(event)

        dispatcher.register(EventType.TRIGGER_CHECK, handler)
        await dispatcher.dispatch(tick)

        assert received == [tick]

    async def test_dispatch_only_matching_type(
        self, dispatcher: EventDispatcher, tick: Event
    ) -> None:
        received: list[Event] = []

        async def handler(event: Event) -> None:
            received.append(event)

        dispatcher.register(EventType.MESSAGE, handler)
        await dispatcher.dispatch(tick)

        assert received == []

    async def test_register_decorated_method(
        self, dispatcher: EventDispatcher, tick: Event
    ) -> None:
        class Handler:
            def __init__(self) -> None:
                self.calls = 0

            @event_handler(EventType.TRIGGER_CHECK)
            async def handle(self, event: Event) -> None:
                self.calls += 1

        handler = Handler()
        dispatcher.register_handler(handler.handle)
        await dispatcher.dispatch(tick)

        assert handler.calls == 1
        assert dispatcher.has_handlers(EventType.TRIGGER_CHECK)

    def test_register_undecorated_raises(self, dispatcher: EventDispatcher) -> None:
        async def handler(event: Event) -> None:
            pass

        with pytest.raises(ValueError):
            dispatcher.register_handler(handler)

    async def test_handler_error_does_not_stop_others(
        self, dispatcher: EventDispatcher, tick: Event
    ) -> None:
        received: list[Event] = []

        async def failing(event: Event) -> None:
            raise RuntimeError("boom")

        async def working(event: Event) -> None:
            received.append(event)

        dispatcher.register(EventType.TRIGGER_CHECK, failing)
        dispatcher.register(EventType.TRIGGER_CHECK, working)
        await dispatcher.dispatch(tick)

        assert received == [tick]

    async def test_dispatch_without_handlers(
        self, dispatcher: EventDispatcher, tick: Event
    ) -> None:
        await dispatcher.dispatch(tick)
        assert not dispatcher.has_handlers(EventType.TRIGGER_CHECK)
