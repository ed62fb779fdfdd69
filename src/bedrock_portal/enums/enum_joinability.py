# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session Joinability Enumeration.

Defines who may discover and join the advertised session. Each value maps
to exactly one directory-service visibility triple, see
``bedrock_portal.constants.JOINABILITY_CONFIG``.
"""

from enum import Enum


class EnumJoinability(str, Enum):
    """Visibility policy of the hosted session.

    Attributes:
        INVITE_ONLY: Only explicitly invited players can join.
        FRIENDS_ONLY: Players the host follows can join.
        FRIENDS_OF_FRIENDS: Friends and their friends can join.
    """

    INVITE_ONLY = "invite_only"
    FRIENDS_ONLY = "friends_only"
    FRIENDS_OF_FRIENDS = "friends_of_friends"


__all__ = ["EnumJoinability"]
