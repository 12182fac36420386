"""Single-consumer event queue shared by intake and scheduler."""

import asyncio
import logging

from scribe.domain.entities.event import Event

logger = logging.getLogger(__name__)


class EventQueue:
    """In-memory FIFO event queue with replacement of pending duplicates.

    When an event is enqueued while another event with the same identity key
    is still waiting, the waiting one is dropped and the newer one is
    delivered in its place. Events whose key is being processed are not
    affected, so a new tick can queue up behind a running one.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        # identity_key -> newest event waiting in the queue
        self._pending: dict[str, Event] = {}
        # identity_key -> event currently being handled
        self._processing: dict[str, Event] = {}

    async def enqueue(self, event: Event) -> None:
        """Add an event to the queue.

        Args:
            event: The event to enqueue.
        """
        identity_key = event.get_identity_key()
        if identity_key in self._pending:
            logger.debug("Replacing pending event: key=%s", identity_key)

        self._pending[identity_key] = event
        await self._queue.put(event)

    async def dequeue(self) -> Event:
        """Wait for the next current event.

        Stale entries that were replaced (or dropped by clear()) are skipped.

        Returns:
            The next event to process.
        """
        while True:
            event = await self._queue.get()
            if self._pending.get(event.get_identity_key()) is event:
                return event
            self._queue.task_done()

    def mark_processing(self, event: Event) -> None:
        """Move an event from pending to processing.

        Args:
            event: The event being processed.
        """
        identity_key = event.get_identity_key()
        self._pending.pop(identity_key, None)
        self._processing[identity_key] = event

    def mark_done(self, event: Event) -> None:
        """Mark an event as done processing.

        Args:
            event: The event that finished processing.
        """
        identity_key = event.get_identity_key()
        if self._pending.get(identity_key) is event:
            self._pending.pop(identity_key)
        if self._processing.get(identity_key) is event:
            self._processing.pop(identity_key)
        self._queue.task_done()

    def is_processing(self, event: Event) -> bool:
        return self._processing.get(event.get_identity_key()) is event

    @property
    def pending_count(self) -> int:
        """Number of current events waiting to be processed."""
        return len(self._pending)

    def clear(self) -> None:
        """Drop all waiting events.

        Entries left in the underlying queue become stale and are skipped.
        """
        dropped = len(self._pending)
        self._pending.clear()
        self._processing.clear()
        logger.info("EventQueue cleared (%d pending events dropped)", dropped)
