# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Joinability mapping model: the directory-facing visibility triple."""

from pydantic import BaseModel, ConfigDict, Field


class ModelJoinabilityMapping(BaseModel):
    """Visibility triple the directory service understands for one joinability.

    Attributes:
        join_restriction: ``properties.system.joinRestriction`` value
        broadcast_setting: ``properties.custom.BroadcastSetting`` value
        joinability_label: ``properties.custom.Joinability`` value
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    join_restriction: str = Field(..., min_length=1)
    broadcast_setting: int = Field(..., ge=0)
    joinability_label: str = Field(..., min_length=1)


__all__ = ["ModelJoinabilityMapping"]
