# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Social graph notification (friends added or removed)."""

from pydantic import BaseModel, ConfigDict, Field


class ModelFriendNotification(BaseModel):
    """``{"NotificationType": "Added", "Xuids": [...]}``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    notification_type: str = Field(..., alias="NotificationType")
    member_ids: list[str] = Field(default_factory=list, alias="Xuids")


__all__ = ["ModelFriendNotification"]
