"""Inbound message filtering rules."""

from collections.abc import Sequence


def is_target_room(room_topic: str, target_rooms: Sequence[str]) -> bool:
    """Check whether a room is in the allow-list.

    Matching is a case-insensitive substring match against each configured
    target name. An empty allow-list accepts every room.

    Args:
        room_topic: Room name.
        target_rooms: Configured target room names.

    Returns:
        True if the room should be tracked.
    """
    if not target_rooms:
        return True

    room_lower = room_topic.lower()
    return any(target.lower() in room_lower for target in target_rooms)


def contains_keyword(text: str, keyword: str) -> bool:
    """Check whether the raw text contains the summary keyword.

    Args:
        text: Raw message text.
        keyword: Configured keyword; empty disables the keyword trigger.

    Returns:
        True if the keyword trigger should fire.
    """
    if not keyword:
        return False
    return keyword in text


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()
