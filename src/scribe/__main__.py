"""アプリケーションのエントリポイント"""

import asyncio
import logging
import os
import signal
import sys
from pathlib import Path

from scribe.application.handlers import MessageEventHandler, TriggerCheckEventHandler
from scribe.application.services import RoomBufferStore
from scribe.application.use_cases import SummarizeRoomUseCase, SummaryGenerator
from scribe.config import ConfigError, LoggingConfig, load_config
from scribe.infrastructure.events import (
    EventDispatcher,
    EventLoop,
    EventQueue,
    EventScheduler,
)
from scribe.infrastructure.llm import LLMClient, LLMSummarizer
from scribe.infrastructure.slack import (
    SlackAppRunner,
    SlackDirectory,
    SlackEventAdapter,
    SlackMessagingService,
)
from scribe.presentation import register_handlers

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    for logger_name, logger_level in (config.loggers or {}).items():
        logging.getLogger(logger_name).setLevel(
            getattr(logging, logger_level.upper(), logging.INFO)
        )
        logger.debug("Set logger '%s' to level %s", logger_name, logger_level.upper())


def resolve_config_path(argv: list[str]) -> Path:
    """Config path: first CLI argument, then $SCRIBE_CONFIG, then config.yaml."""
    if len(argv) > 1:
        return Path(argv[1])
    return Path(os.environ.get("SCRIBE_CONFIG", "config.yaml"))


async def main() -> None:
    """アプリケーションを起動する"""
    config_path = resolve_config_path(sys.argv)
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.error("Config file not found: %s", config_path)
        sys.exit(1)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    configure_logging(config.logging)
    logger.info("Configuration loaded successfully")
    for line in config.describe():
        logger.info("  - %s", line)

    debug_llm_messages = bool(config.logging and config.logging.debug_llm_messages)
    try:
        summarizer = LLMSummarizer(
            LLMClient(config.llm),
            config.summary,
            debug_llm_messages=debug_llm_messages,
        )
    except OSError as e:
        logger.error("Failed to load system prompt: %s", e)
        sys.exit(1)

    runner = SlackAppRunner(config.slack)
    app = runner.app
    directory = SlackDirectory(app.client)
    messaging_service = SlackMessagingService(app.client, directory)
    bot_user_id = await messaging_service.get_bot_user_id()
    logger.info("Bot user ID: %s", bot_user_id)
    await directory.sync_channels()

    # Build dependencies
    buffer = RoomBufferStore(config)
    generator = SummaryGenerator(buffer, summarizer)
    summarize_room = SummarizeRoomUseCase(
        buffer,
        generator,
        messaging_service,
        destination=config.summary.destination,
    )

    queue = EventQueue()
    dispatcher = EventDispatcher()
    dispatcher.register_handler(MessageEventHandler(buffer, summarize_room).handle)
    dispatcher.register_handler(TriggerCheckEventHandler(buffer, summarize_room).handle)
    event_loop = EventLoop(queue, dispatcher)

    event_adapter = SlackEventAdapter(
        directory=directory,
        bot_config=config.bot,
        trigger_config=config.summary_trigger,
        bot_user_id=bot_user_id,
    )
    register_handlers(app, event_adapter, queue)

    scheduler: EventScheduler | None = None
    interval_minutes = config.summary_trigger.interval_minutes
    if interval_minutes > 0:
        scheduler = EventScheduler(queue, interval_seconds=interval_minutes * 60)

    logger.info("Starting %s...", config.bot.name)
    tasks = [
        asyncio.create_task(event_loop.start()),
    ]
    if scheduler is not None:
        logger.info("Starting interval timer (%d minutes)", interval_minutes)
        tasks.append(asyncio.create_task(scheduler.start()))

    await runner.connect()

    # Setup signal handlers for graceful shutdown
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)

    await stop_event.wait()

    logger.info("Shutting down...")

    if scheduler is not None:
        await scheduler.stop()
    await event_loop.stop()

    if not await runner.shutdown(timeout=5.0):
        logger.warning("Slack connection did not close cleanly")

    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)

    logger.info("Shutdown complete")


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
