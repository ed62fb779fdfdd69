# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Player model handed out to event handlers and registry readers."""

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.enums import EnumMembershipState


class ModelPlayer(BaseModel):
    """Read-only view of a tracked member.

    Attributes:
        member_id: Stable member identifier (XUID).
        display_name: Gamertag, empty when the source did not carry one.
        membership_state: JOINED while present in the session, LEFT otherwise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    member_id: str = Field(..., min_length=1)
    display_name: str = Field(default="")
    membership_state: EnumMembershipState = Field(default=EnumMembershipState.JOINED)


__all__ = ["ModelPlayer"]
