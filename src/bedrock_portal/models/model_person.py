# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Person entry from the people hub (followers and friends lists)."""

from pydantic import BaseModel, ConfigDict, Field


class ModelPerson(BaseModel):
    """Subset of a people hub person the portal modules use."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    member_id: str = Field(..., min_length=1, alias="xuid")
    gamertag: str = Field(default="")
    is_following_caller: bool = Field(default=False, alias="isFollowingCaller")
    is_followed_by_caller: bool = Field(default=False, alias="isFollowedByCaller")


__all__ = ["ModelPerson"]
