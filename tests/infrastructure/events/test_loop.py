"""Tests for EventLoop."""

import asyncio
import logging

import pytest

from scribe.domain.entities.event import Event, EventType
from scribe.infrastructure.events.dispatcher import EventDispatcher
from scribe.infrastructure.events.loop import EventLoop
from scribe.infrastructure.events.queue import EventQueue


class TestEventLoop:
    """Tests for EventLoop."""

    @pytest.fixture
    def queue(self) -> EventQueue:
        return EventQueue()

    @pytest.fixture
    def dispatcher(self) -> EventDispatcher:
        return EventDispatcher()

    @pytest.fixture
    def loop(self, queue: EventQueue, dispatcher: EventDispatcher) -> EventLoop:
        return EventLoop(queue, dispatcher, poll_interval=0.05)

    def _message(self, message_id: str) -> Event:
        return Event(
            type=EventType.MESSAGE,
            payload={"room_topic": "general", "message_id": message_id},
        )

    async def test_is_running_initially_false(self, loop: EventLoop) -> None:
        assert not loop.is_running

    async def test_start_and_stop(self, loop: EventLoop) -> None:
        task = asyncio.create_task(loop.start())
        await asyncio.sleep(0.05)
        assert loop.is_running

        await loop.stop()
        await task

        assert not loop.is_running

    async def test_processes_events(
        self, loop: EventLoop, queue: EventQueue, dispatcher: EventDispatcher
    ) -> None:
        received: list[Event] = []

        async def handler(event: Event) -> None:
            received.append(event)

        dispatcher.register(EventType.MESSAGE, handler)
        task = asyncio.create_task(loop.start())

        event = self._message("1")
        await queue.enqueue(event)
        await asyncio.sleep(0.1)

        await loop.stop()
        await task

        assert received == [event]

    async def test_processes_one_event_at_a_time(
        self, loop: EventLoop, queue: EventQueue, dispatcher: EventDispatcher
    ) -> None:
        """A slow handler finishes before the next event starts."""
        log: list[str] = []

        async def handler(event: Event) -> None:
            message_id = event.payload["message_id"]
            log.append(f"start {message_id}")
            await asyncio.sleep(0.05)
            log.append(f"end {message_id}")

        dispatcher.register(EventType.MESSAGE, handler)
        task = asyncio.create_task(loop.start())

        await queue.enqueue(self._message("1"))
        await queue.enqueue(self._message("2"))
        await asyncio.sleep(0.3)

        await loop.stop()
        await task

        assert log == ["start 1", "end 1", "start 2", "end 2"]

    async def test_handler_error_does_not_stop_loop(
        self, loop: EventLoop, queue: EventQueue, dispatcher: EventDispatcher
    ) -> None:
        received: list[str] = []

        async def handler(event: Event) -> None:
            if event.payload["message_id"] == "bad":
                raise RuntimeError("boom")
            received.append(event.payload["message_id"])

        dispatcher.register(EventType.MESSAGE, handler)
        task = asyncio.create_task(loop.start())

        await queue.enqueue(self._message("bad"))
        await queue.enqueue(self._message("good"))
        await asyncio.sleep(0.1)

        await loop.stop()
        await task

        assert received == ["good"]

    async def test_counts_processed_events(
        self, loop: EventLoop, queue: EventQueue, dispatcher: EventDispatcher
    ) -> None:
        async def handler(event: Event) -> None:
            pass

        dispatcher.register(EventType.MESSAGE, handler)
        task = asyncio.create_task(loop.start())

        await queue.enqueue(self._message("1"))
        await queue.enqueue(self._message("2"))
        await asyncio.sleep(0.1)

        await loop.stop()
        await task

        assert loop.processed_count == 2

    async def test_reports_slow_events(
        self,
        queue: EventQueue,
        dispatcher: EventDispatcher,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A long summary is visible as a warning with the waiting backlog."""
        loop = EventLoop(
            queue, dispatcher, poll_interval=0.05, slow_event_seconds=0.05
        )

        async def slow_handler(event: Event) -> None:
            if event.payload["message_id"] == "slow":
                await queue.enqueue(self._message("waiting"))
                await asyncio.sleep(0.1)

        dispatcher.register(EventType.MESSAGE, slow_handler)
        task = asyncio.create_task(loop.start())

        with caplog.at_level(
            logging.WARNING, logger="scribe.infrastructure.events.loop"
        ):
            await queue.enqueue(self._message("slow"))
            await asyncio.sleep(0.3)

        await loop.stop()
        await task

        assert any(
            "message:general:slow" in record.getMessage()
            and "1 events waiting" in record.getMessage()
            for record in caplog.records
        )
        assert loop.processed_count == 2
