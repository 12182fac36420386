"""Application services."""

from scribe.application.services.room_buffer import (
    FormattedMessages,
    RoomBufferState,
    RoomBufferStore,
)

__all__ = ["FormattedMessages", "RoomBufferState", "RoomBufferStore"]
