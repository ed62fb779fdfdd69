# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Module registration entry kept by the module runtime."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.enums import EnumModuleStatus


class ModelModuleRegistration(BaseModel):
    """One registered module and its lifecycle status.

    Created by ``use()`` and kept for the life of the portal; stopping a
    module changes ``status`` but never removes the entry.

    Attributes:
        name: Unique module name.
        module: The module object itself.
        options: Configuration applied at registration.
        status: Current lifecycle status.
        last_error: Message of the last run failure, if any.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    name: str = Field(..., min_length=1)
    module: Any
    options: dict[str, Any] = Field(default_factory=dict)
    status: EnumModuleStatus = EnumModuleStatus.IDLE
    last_error: Optional[str] = None


__all__ = ["ModelModuleRegistration"]
