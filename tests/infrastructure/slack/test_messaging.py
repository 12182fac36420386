"""Tests for SlackMessagingService."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from scribe.domain.exceptions import ChannelNotAccessibleError
from scribe.infrastructure.slack import SlackDirectory, SlackMessagingService


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.chat_postMessage = AsyncMock(return_value={"ok": True})
    client.auth_test = AsyncMock(return_value={"user_id": "U_BOT"})
    return client


@pytest.fixture
def mock_directory() -> MagicMock:
    directory = MagicMock(spec=SlackDirectory)
    directory.find_channel_id = AsyncMock(return_value="C0000000001")
    return directory


@pytest.fixture
def service(mock_client: MagicMock, mock_directory: MagicMock) -> SlackMessagingService:
    return SlackMessagingService(mock_client, mock_directory)


class TestSendMessage:
    """send_message tests."""

    async def test_posts_to_resolved_channel(
        self,
        service: SlackMessagingService,
        mock_client: MagicMock,
        mock_directory: MagicMock,
    ) -> None:
        await service.send_message("general", "# Meeting Minutes")

        mock_directory.find_channel_id.assert_awaited_once_with("general")
        mock_client.chat_postMessage.assert_awaited_once_with(
            channel="C0000000001", text="# Meeting Minutes"
        )

    async def test_unknown_room(
        self,
        service: SlackMessagingService,
        mock_client: MagicMock,
        mock_directory: MagicMock,
    ) -> None:
        mock_directory.find_channel_id.return_value = None

        with pytest.raises(ChannelNotAccessibleError):
            await service.send_message("nowhere", "text")
        mock_client.chat_postMessage.assert_not_awaited()

    @pytest.mark.parametrize(
        "error_code", ["not_in_channel", "channel_not_found", "is_archived"]
    )
    async def test_inaccessible_channel(
        self,
        service: SlackMessagingService,
        mock_client: MagicMock,
        error_code: str,
    ) -> None:
        mock_client.chat_postMessage.side_effect = SlackApiError(
            message=error_code,
            response={"error": error_code},
        )

        with pytest.raises(ChannelNotAccessibleError) as exc_info:
            await service.send_message("general", "text")

        assert exc_info.value.channel_id == "C0000000001"

    async def test_other_api_error_propagates(
        self, service: SlackMessagingService, mock_client: MagicMock
    ) -> None:
        mock_client.chat_postMessage.side_effect = SlackApiError(
            message="rate_limited",
            response={"error": "rate_limited"},
        )

        with pytest.raises(SlackApiError):
            await service.send_message("general", "text")


class TestGetBotUserId:
    """get_bot_user_id tests."""

    async def test_cached_after_first_call(
        self, service: SlackMessagingService, mock_client: MagicMock
    ) -> None:
        assert await service.get_bot_user_id() == "U_BOT"
        assert await service.get_bot_user_id() == "U_BOT"

        mock_client.auth_test.assert_awaited_once()
