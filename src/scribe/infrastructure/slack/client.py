"""Slack Bolt app and its Socket Mode connection."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from scribe.config import SlackConfig

logger = logging.getLogger(__name__)


class SlackAppRunner:
    """Owns the Bolt app and the Socket Mode connection serving it.

    connect() returns as soon as the WebSocket is open; the handler keeps
    receiving events in the background until shutdown(). Listeners must be
    registered on ``app`` before connecting.
    """

    def __init__(
        self,
        config: SlackConfig,
        handler_factory: Callable[[AsyncApp, str], Any] = AsyncSocketModeHandler,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Slack tokens (bot token for the Web API, app token for
                Socket Mode).
            handler_factory: Builds the Socket Mode handler from the app and
                the app token.
        """
        self._app = AsyncApp(token=config.bot_token)
        self._app_token = config.app_token
        self._handler_factory = handler_factory
        self._handler: Any = None

    @property
    def app(self) -> AsyncApp:
        return self._app

    @property
    def is_connected(self) -> bool:
        return self._handler is not None

    async def connect(self) -> None:
        """Open the Socket Mode connection.

        Does nothing if already connected.
        """
        if self._handler is not None:
            logger.warning("Slack Socket Mode already connected")
            return

        handler = self._handler_factory(self._app, self._app_token)
        await handler.connect_async()
        self._handler = handler
        logger.info("Connected to Slack via Socket Mode")

    async def shutdown(self, timeout: float = 5.0) -> bool:
        """Close the Socket Mode connection.

        Args:
            timeout: Maximum seconds to wait for the close handshake.

        Returns:
            True if closed (or never connected), False if the close timed out.
        """
        if self._handler is None:
            return True

        handler, self._handler = self._handler, None
        try:
            await asyncio.wait_for(handler.close_async(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Slack connection close timed out after %.0fs", timeout)
            return False

        logger.info("Disconnected from Slack")
        return True
