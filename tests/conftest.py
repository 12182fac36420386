"""Common fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from scribe.config import (
    Config,
    LLMConfig,
    SlackConfig,
    SummaryTriggerConfig,
)
from scribe.domain.entities import BufferedMessage


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def trigger_config() -> SummaryTriggerConfig:
    """Create trigger config with every trigger enabled."""
    return SummaryTriggerConfig(
        interval_minutes=30,
        message_count=10,
        keyword="@bot summary",
        min_messages_for_summary=3,
    )


def make_config(
    trigger: SummaryTriggerConfig | None = None, max_buffer_size: int = 200
) -> Config:
    return Config(
        slack=SlackConfig(bot_token="xoxb-test", app_token="xapp-test"),
        llm=LLMConfig(model="gpt-4o-mini", api_key="sk-test"),
        summary_trigger=trigger or SummaryTriggerConfig(),
        max_buffer_size=max_buffer_size,
    )


@pytest.fixture
def config(trigger_config: SummaryTriggerConfig) -> Config:
    """Create application config."""
    return make_config(trigger_config, max_buffer_size=20)


@pytest.fixture
def clock() -> FakeClock:
    """Create a clock fixed at a known time (naive, local)."""
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0))


@pytest.fixture
def make_message() -> Callable[..., BufferedMessage]:
    """Create a factory for buffered messages.

    Message n is sent at 09:00 + n minutes (naive, local time).
    """
    counter = 0

    def factory(
        content: str = "hello",
        sender: str = "alice",
        room_topic: str = "general",
        timestamp: datetime | None = None,
    ) -> BufferedMessage:
        nonlocal counter
        counter += 1
        return BufferedMessage(
            id=f"msg-{counter}",
            timestamp=timestamp or datetime(2024, 1, 15, 9, 0) + timedelta(minutes=counter),
            sender=sender,
            content=content,
            room_topic=room_topic,
        )

    return factory


@pytest.fixture
def config_factory() -> Callable[..., Config]:
    """Create a factory for configs with custom triggers and buffer size."""
    return make_config
