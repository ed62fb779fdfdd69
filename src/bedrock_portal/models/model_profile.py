# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resolved directory profile."""

from pydantic import BaseModel, ConfigDict, Field


class ModelProfile(BaseModel):
    """A profile resolved from a gamertag or member id.

    Attributes:
        member_id: Stable member identifier (XUID).
        gamertag: Display name of the member.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    member_id: str = Field(..., min_length=1)
    gamertag: str = Field(default="")


__all__ = ["ModelProfile"]
