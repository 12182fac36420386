"""Cached lookup of Slack channel and user names."""

import logging
import re

from slack_sdk.web.async_client import AsyncWebClient

logger = logging.getLogger(__name__)

CHANNEL_ID_PATTERN = re.compile(r"[CGD][A-Z0-9]{8,}")


class SlackDirectory:
    """Resolves channel IDs to names (and back) and user IDs to display names.

    Rooms are keyed by channel name, while the Slack API speaks channel IDs,
    so both directions are cached for the lifetime of the process.
    """

    def __init__(self, client: AsyncWebClient) -> None:
        """Initialize the directory.

        Args:
            client: Slack AsyncWebClient for API calls.
        """
        self._client = client
        self._channel_names: dict[str, str] = {}
        self._channel_ids: dict[str, str] = {}
        self._user_names: dict[str, str] = {}

    def _remember_channel(self, channel_id: str, name: str) -> None:
        self._channel_names[channel_id] = name
        self._channel_ids[name] = channel_id

    async def sync_channels(self) -> int:
        """Load every channel the bot has joined.

        Returns:
            Number of channels cached. 0 if the API call fails.
        """
        try:
            response = await self._client.users_conversations(
                types="public_channel,private_channel"
            )
        except Exception as e:
            logger.warning("Failed to sync channels from Slack: %s", e)
            return 0

        channels = response.get("channels", [])
        for channel in channels:
            self._remember_channel(channel["id"], channel.get("name") or channel["id"])
        logger.info("Synced %d channels from Slack", len(channels))
        return len(channels)

    async def get_channel_name(self, channel_id: str) -> str:
        """Get a channel's name, fetching it on first use.

        Args:
            channel_id: Slack channel ID.

        Returns:
            Channel name, or the ID itself if the channel has no name.
        """
        cached = self._channel_names.get(channel_id)
        if cached is not None:
            return cached

        response = await self._client.conversations_info(channel=channel_id)
        name = response["channel"].get("name") or channel_id
        self._remember_channel(channel_id, name)
        return name

    async def find_channel_id(self, room: str) -> str | None:
        """Find the channel ID of a room.

        Args:
            room: Channel name (optionally prefixed with "#") or channel ID.

        Returns:
            Channel ID, or None if the room is unknown even after a resync.
        """
        if room in self._channel_names or CHANNEL_ID_PATTERN.fullmatch(room):
            return room
        channel_id = self._channel_ids.get(room.lstrip("#"))
        if channel_id is None:
            await self.sync_channels()
            channel_id = self._channel_ids.get(room.lstrip("#"))
        return channel_id

    async def get_user_name(self, user_id: str) -> str:
        """Get a user's display name, fetching it on first use.

        Prefers the profile display name, then the real name, then the
        account name.

        Args:
            user_id: Slack user ID.

        Returns:
            Display name.
        """
        cached = self._user_names.get(user_id)
        if cached is not None:
            return cached

        response = await self._client.users_info(user=user_id)
        user = response["user"]
        profile = user.get("profile") or {}
        name = (
            profile.get("display_name")
            or user.get("real_name")
            or profile.get("real_name")
            or user.get("name")
            or user_id
        )
        self._user_names[user_id] = name
        return name
