# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Payload of a session-changed frame."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.models.model_shoulder_tap import ModelShoulderTap


class ModelSessionChangedPayload(BaseModel):
    """Either an inline member list or shoulder taps referencing the session."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    members: Optional[dict[str, Any]] = None
    shoulder_taps: list[ModelShoulderTap] = Field(
        default_factory=list, alias="shoulderTaps"
    )


__all__ = ["ModelSessionChangedPayload"]
