"""Slack integration."""

from scribe.infrastructure.slack.client import SlackAppRunner
from scribe.infrastructure.slack.directory import SlackDirectory
from scribe.infrastructure.slack.event_adapter import SlackEventAdapter
from scribe.infrastructure.slack.messaging import SlackMessagingService

__all__ = [
    "SlackAppRunner",
    "SlackDirectory",
    "SlackEventAdapter",
    "SlackMessagingService",
]
