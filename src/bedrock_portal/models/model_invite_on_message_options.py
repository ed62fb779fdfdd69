# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Options of the invite on message module."""

from pydantic import BaseModel, ConfigDict, Field


class ModelInviteOnMessageOptions(BaseModel):
    """Chat command that triggers an invite (matched case-insensitively)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = Field(default="invite", min_length=1)


__all__ = ["ModelInviteOnMessageOptions"]
