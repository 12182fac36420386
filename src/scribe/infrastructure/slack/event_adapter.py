"""Slack event adapter."""

import logging
from datetime import datetime, timezone
from typing import Any

from scribe.config import BotConfig, SummaryTriggerConfig
from scribe.domain.entities import BufferedMessage, InboundMessage
from scribe.domain.services.intake_filter import (
    contains_keyword,
    is_blank,
    is_target_room,
)
from scribe.infrastructure.slack.directory import SlackDirectory

logger = logging.getLogger(__name__)

# Subtypes that carry a new user message; edits and deletions are ignored.
_ACCEPTED_SUBTYPES = frozenset({None, "thread_broadcast"})
_ROOM_CHANNEL_TYPES = frozenset({"channel", "group", None})


class SlackEventAdapter:
    """Convert Slack message events into buffered-message records.

    This adapter filters out events that must not be buffered and
    translates the rest into platform-independent InboundMessage values.
    """

    def __init__(
        self,
        directory: SlackDirectory,
        bot_config: BotConfig,
        trigger_config: SummaryTriggerConfig,
        bot_user_id: str,
    ) -> None:
        """Initialize the adapter.

        Args:
            directory: Cached channel and user name lookup.
            bot_config: Bot configuration (target rooms).
            trigger_config: Trigger configuration (keyword).
            bot_user_id: The bot's own user ID.
        """
        self._directory = directory
        self._target_rooms = bot_config.target_rooms
        self._keyword = trigger_config.keyword
        self._bot_user_id = bot_user_id

    def _is_self_authored(self, event: dict[str, Any]) -> bool:
        return event.get("user") == self._bot_user_id or "bot_id" in event

    async def to_inbound_message(self, event: dict[str, Any]) -> InboundMessage | None:
        """Convert a Slack message event.

        Args:
            event: Slack message event payload.

        Returns:
            InboundMessage, or None if the event is not buffered.
        """
        ts = event.get("ts")
        if event.get("subtype") not in _ACCEPTED_SUBTYPES:
            logger.debug("Ignoring message subtype %s: %s", event.get("subtype"), ts)
            return None
        if self._is_self_authored(event):
            return None
        if event.get("channel_type") not in _ROOM_CHANNEL_TYPES:
            return None

        text = event.get("text")
        user_id = event.get("user")
        channel_id = event.get("channel")
        if is_blank(text) or not user_id or not channel_id or not ts:
            return None

        try:
            room_topic = await self._directory.get_channel_name(channel_id)
        except Exception:
            logger.exception("Error resolving channel %s", channel_id)
            return None

        if not is_target_room(room_topic, self._target_rooms):
            logger.debug("Ignoring message from non-target room '%s'", room_topic)
            return None

        try:
            sender = await self._directory.get_user_name(user_id)
        except Exception:
            logger.exception("Error resolving user %s", user_id)
            return None

        message = BufferedMessage(
            id=ts,
            timestamp=datetime.fromtimestamp(float(ts), tz=timezone.utc),
            sender=sender,
            content=text,
            room_topic=room_topic,
        )
        return InboundMessage(
            message=message,
            triggered_by_keyword=contains_keyword(text, self._keyword),
        )
