"""Periodic trigger-check scheduler."""

import asyncio
import logging

from scribe.domain.entities.event import Event, EventType
from scribe.infrastructure.events.queue import EventQueue

logger = logging.getLogger(__name__)


class EventScheduler:
    """Enqueues a TRIGGER_CHECK event at a fixed interval.

    The scheduler only produces events; the checks themselves run on the
    event loop like any other event, never concurrently with message
    handling. The first tick fires one full interval after start.
    """

    def __init__(self, queue: EventQueue, interval_seconds: float) -> None:
        """Initialize the scheduler.

        Args:
            queue: The event queue to enqueue events to.
            interval_seconds: Seconds between TRIGGER_CHECK events.

        Raises:
            ValueError: If the interval is not positive.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._queue = queue
        self._interval = interval_seconds
        # set() means stopped
        self._stop_event = asyncio.Event()
        self._stop_event.set()

    async def start(self) -> None:
        """Run the scheduler until stop() is called."""
        if not self._stop_event.is_set():
            logger.warning("EventScheduler already running")
            return

        self._stop_event.clear()
        logger.info("EventScheduler started (interval: %.0fs)", self._interval)

        while not self._stop_event.is_set():
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
                break
            except asyncio.TimeoutError:
                pass
            except asyncio.CancelledError:
                break

            try:
                await self._enqueue_trigger_check()
            except Exception:
                logger.exception("Error in event scheduler")

        logger.info("EventScheduler stopped")

    async def _enqueue_trigger_check(self) -> None:
        event = Event(type=EventType.TRIGGER_CHECK, payload={})
        await self._queue.enqueue(event)
        logger.debug("Enqueued trigger check event")

    async def stop(self) -> None:
        """Stop the scheduler."""
        logger.info("Stopping EventScheduler")
        self._stop_event.set()

    @property
    def is_running(self) -> bool:
        return not self._stop_event.is_set()
