# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of a realtime subscribe handshake."""

from pydantic import BaseModel, ConfigDict, Field


class ModelSubscribeResult(BaseModel):
    """Subscription handle and connection id returned by the transport."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    subscription_id: str = Field(..., min_length=1)
    connection_id: str = Field(..., min_length=1)


__all__ = ["ModelSubscribeResult"]
