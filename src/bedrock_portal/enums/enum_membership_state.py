# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Player membership state enumeration."""

from enum import Enum


class EnumMembershipState(str, Enum):
    """Whether a player is currently a member of the hosted session.

    Attributes:
        JOINED: Player is present in the session member list.
        LEFT: Player is not (or no longer) present in the session.
    """

    JOINED = "joined"
    LEFT = "left"


__all__: list[str] = ["EnumMembershipState"]
