# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handle of the currently published session."""

from pydantic import BaseModel, ConfigDict, Field


class ModelSessionRef(BaseModel):
    """Session name and the subscription it was published with.

    The name is generated once per ``start()`` and never changes until the
    next ``start()`` replaces the whole ref.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    subscription_id: str = Field(default="")


__all__ = ["ModelSessionRef"]
