"""Single consumer of the event queue."""

import asyncio
import logging

from scribe.domain.entities.event import Event
from scribe.infrastructure.events.dispatcher import EventDispatcher
from scribe.infrastructure.events.queue import EventQueue

logger = logging.getLogger(__name__)


class EventLoop:
    """Runs queued events through the dispatcher strictly one at a time.

    Buffer mutation and trigger evaluation therefore never interleave.
    The price is that a summary's LLM call holds up intake for every room
    until it returns (at most ``llm.timeout_seconds``); messages received
    meanwhile wait in the queue and are buffered after the clear, so none
    are lost. Events that take longer than ``slow_event_seconds`` are
    logged as warnings.
    """

    def __init__(
        self,
        queue: EventQueue,
        dispatcher: EventDispatcher,
        poll_interval: float = 1.0,
        slow_event_seconds: float = 10.0,
    ) -> None:
        """Initialize the loop.

        Args:
            queue: Queue fed by Slack intake and the scheduler.
            dispatcher: Routes each event to its handlers.
            poll_interval: Seconds between stop checks while the queue is idle.
            slow_event_seconds: Handling time above which an event is reported.
        """
        self._queue = queue
        self._dispatcher = dispatcher
        self._poll_interval = poll_interval
        self._slow_event_seconds = slow_event_seconds
        self._running = False
        self._processed_count = 0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def processed_count(self) -> int:
        """Number of events handled since start."""
        return self._processed_count

    async def start(self) -> None:
        """Consume events until stop() is called."""
        if self._running:
            logger.warning("EventLoop already running")
            return

        self._running = True
        logger.info("EventLoop started")
        try:
            while self._running:
                try:
                    event = await asyncio.wait_for(
                        self._queue.dequeue(), timeout=self._poll_interval
                    )
                except asyncio.TimeoutError:
                    continue
                await self._process(event)
        except asyncio.CancelledError:
            pass
        finally:
            self._running = False
            logger.info("EventLoop stopped after %d events", self._processed_count)

    async def _process(self, event: Event) -> None:
        key = event.get_identity_key()
        loop = asyncio.get_running_loop()
        started = loop.time()

        self._queue.mark_processing(event)
        try:
            await self._dispatcher.dispatch(event)
        except Exception:
            logger.exception("Unexpected error while processing %s", key)
        finally:
            self._queue.mark_done(event)
            self._processed_count += 1

        elapsed = loop.time() - started
        if elapsed >= self._slow_event_seconds:
            logger.warning(
                "Event %s took %.1fs; %d events waiting",
                key,
                elapsed,
                self._queue.pending_count,
            )
        else:
            logger.debug("Processed %s in %.3fs", key, elapsed)

    async def stop(self) -> None:
        """Stop after the current event and drop events still waiting."""
        logger.info("Stopping EventLoop")
        self._running = False
        self._queue.clear()
