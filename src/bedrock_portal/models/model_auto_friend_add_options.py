# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Options of the auto friend add module."""

from pydantic import BaseModel, ConfigDict, Field


class ModelAutoFriendAddOptions(BaseModel):
    """Follow-back options.

    Attributes:
        invite_on_add: Invite each newly added friend to the session.
        check_interval: Seconds between follower checks.
        add_limit: Maximum number of friends added per check.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    invite_on_add: bool = Field(default=False, alias="inviteOnAdd")
    check_interval: float = Field(default=30.0, gt=0, alias="checkInterval")
    add_limit: int = Field(default=10, ge=1, alias="addLimit")


__all__ = ["ModelAutoFriendAddOptions"]
