# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Realtime frame categories understood by the event reconciler."""

from enum import Enum


class EnumRealtimeEventCategory(str, Enum):
    """Category of a decoded realtime frame.

    Attributes:
        SESSION_CHANGED: Carries or references the session member list.
        MESSAGE: A chat message addressed to the host.
        FRIEND_ADDED: Social graph notification, members added.
        FRIEND_REMOVED: Social graph notification, members removed.
        UNKNOWN: Anything else. Ignored by the reconciler.
    """

    SESSION_CHANGED = "session_changed"
    MESSAGE = "message"
    FRIEND_ADDED = "friend_added"
    FRIEND_REMOVED = "friend_removed"
    UNKNOWN = "unknown"


__all__: list[str] = ["EnumRealtimeEventCategory"]
