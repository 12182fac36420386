"""Slack event handlers."""

import logging
from typing import Any

from slack_bolt.async_app import AsyncApp

from scribe.domain.entities import Event, EventType
from scribe.infrastructure.events import EventQueue
from scribe.infrastructure.slack import SlackEventAdapter

logger = logging.getLogger(__name__)


def register_handlers(
    app: AsyncApp,
    event_adapter: SlackEventAdapter,
    queue: EventQueue,
) -> None:
    """Register Slack event handlers.

    Incoming messages are normalized and enqueued as MESSAGE events; all
    buffering and summarizing happens on the event loop.

    Args:
        app: AsyncApp instance.
        event_adapter: Adapter for converting events to buffered messages.
        queue: Event queue feeding the event loop.
    """

    @app.event("app_mention")
    async def handle_app_mention(event: dict[str, Any]) -> None:
        """Acknowledge app_mention events (no-op).

        The same text also arrives as a message event, which is where it
        gets buffered.
        """
        logger.debug("Received app_mention event: %s", event.get("ts"))

    @app.event("message")
    async def handle_message(event: dict[str, Any]) -> None:
        """Handle message events.

        Args:
            event: Slack event payload.
        """
        try:
            inbound = await event_adapter.to_inbound_message(event)
        except Exception:
            logger.exception("Error converting event to message")
            return

        if inbound is None:
            return

        message = inbound.message
        logger.debug(
            "Enqueueing message %s from room '%s'", message.id, message.room_topic
        )
        await queue.enqueue(
            Event(
                type=EventType.MESSAGE,
                payload={
                    "room_topic": message.room_topic,
                    "message_id": message.id,
                    "message": message,
                    "triggered_by_keyword": inbound.triggered_by_keyword,
                },
            )
        )
