# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal domain event names.

The string values are the public event names and must stay stable, since
handlers written against the portal subscribe by these names.
"""

from enum import Enum


class EnumPortalEvent(str, Enum):
    """Domain events emitted by ``BedrockPortal``.

    Attributes:
        SESSION_CREATED: Two-phase publish finished (payload: ModelSessionRecord).
        SESSION_UPDATED: A referenced session change was fetched (payload: ModelSessionRecord).
        REALTIME_EVENT: Any accepted realtime frame (payload: ModelRealtimeFrame).
        PLAYER_JOIN: A member appeared in the session (payload: ModelPlayer).
        PLAYER_LEAVE: A member disappeared from the session (payload: ModelPlayer).
        MESSAGE_RECEIVED: A chat message arrived (payload: ModelChatMessage).
        FRIEND_ADDED: Someone was added to the friend list (payload: ModelPlayer).
        FRIEND_REMOVED: Someone was removed from the friend list (payload: ModelPlayer).
    """

    SESSION_CREATED = "sessionCreated"
    SESSION_UPDATED = "sessionUpdated"
    REALTIME_EVENT = "realtimeEvent"
    PLAYER_JOIN = "playerJoin"
    PLAYER_LEAVE = "playerLeave"
    MESSAGE_RECEIVED = "messageReceived"
    FRIEND_ADDED = "friendAdded"
    FRIEND_REMOVED = "friendRemoved"


__all__: list[str] = ["EnumPortalEvent"]
