# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session record as returned by the directory service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.models.model_session_member import (
    ModelSessionMember,
    parse_member_list,
)


class ModelSessionRecord(BaseModel):
    """Materialized session including server-assigned properties.

    Only ``properties`` and ``members`` are interpreted. Every other field
    the directory returns (``constants``, ``servers``, branch and change
    markers) is kept as extra data so nothing is lost on republish.
    """

    model_config = ConfigDict(extra="allow")

    properties: dict[str, Any] = Field(default_factory=dict)
    members: dict[str, Any] = Field(default_factory=dict)

    def member_list(self) -> list[ModelSessionMember]:
        """Return parsed members in directory order."""
        return parse_member_list(self.members)


__all__ = ["ModelSessionRecord"]
