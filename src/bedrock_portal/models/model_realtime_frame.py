# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decoded realtime notification frame."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.enums import EnumRealtimeEventCategory


class ModelRealtimeFrame(BaseModel):
    """One notification delivered over the realtime connection.

    Attributes:
        subscription_id: Subscription the frame was delivered on.
        category: Classified event category.
        payload: Decoded JSON payload, interpreted per category.
        sequence: Arrival counter assigned by the transport.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    subscription_id: str
    category: EnumRealtimeEventCategory = EnumRealtimeEventCategory.UNKNOWN
    payload: dict[str, Any] = Field(default_factory=dict)
    sequence: int = 0


__all__ = ["ModelRealtimeFrame"]
