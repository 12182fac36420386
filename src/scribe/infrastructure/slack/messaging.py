"""Slack messaging service."""

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from scribe.domain.exceptions import ChannelNotAccessibleError
from scribe.infrastructure.slack.directory import SlackDirectory

# Error codes that indicate the channel is not accessible
_CHANNEL_NOT_ACCESSIBLE_ERRORS = frozenset(
    {
        "not_in_channel",
        "channel_not_found",
        "is_archived",
    }
)


class SlackMessagingService:
    """Slack implementation of MessagingService.

    Rooms are addressed by channel name and resolved to channel IDs
    through the directory before posting.
    """

    def __init__(self, client: AsyncWebClient, directory: SlackDirectory) -> None:
        """Initialize the service.

        Args:
            client: Slack AsyncWebClient instance.
            directory: Channel name lookup.
        """
        self._client = client
        self._directory = directory
        self._bot_user_id: str | None = None

    async def send_message(self, room: str, text: str) -> None:
        """Post a message to a room.

        Args:
            room: Room topic (channel name) or channel ID.
            text: Message content.

        Raises:
            ChannelNotAccessibleError: If the room is unknown or the channel
                is not accessible (not_in_channel, channel_not_found,
                is_archived).
            SlackApiError: If the API call fails for other reasons.
        """
        channel_id = await self._directory.find_channel_id(room)
        if channel_id is None:
            raise ChannelNotAccessibleError(room, f"Unknown room: {room}")

        try:
            await self._client.chat_postMessage(channel=channel_id, text=text)
        except SlackApiError as e:
            error_code = (
                e.response.get("error", "") if isinstance(e.response, dict) else ""
            )
            if error_code in _CHANNEL_NOT_ACCESSIBLE_ERRORS:
                raise ChannelNotAccessibleError(
                    channel_id, f"Cannot access channel {room}: {error_code}"
                ) from e
            raise

    async def get_bot_user_id(self) -> str:
        """Get the bot's user ID (cached after the first call)."""
        if self._bot_user_id is None:
            response = await self._client.auth_test()
            self._bot_user_id = response["user_id"]
        return self._bot_user_id
