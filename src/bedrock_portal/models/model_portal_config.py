# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal Configuration Model.

Validated once when a ``BedrockPortal`` is constructed. A missing redirect
address or an unknown joinability never gets past construction.

Example:
    >>> config = ModelPortalConfig(address="203.0.113.5")
    >>> config.port
    19132
    >>> config.joinability
    <EnumJoinability.FRIENDS_OF_FRIENDS: 'friends_of_friends'>
"""

from __future__ import annotations

import re

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from bedrock_portal.enums import EnumJoinability
from bedrock_portal.models.model_world_config import ModelWorldConfig


def _normalize_joinability_name(value: str) -> str:
    """Map "FriendsOfFriends" / "FRIENDS_OF_FRIENDS" style names to enum values."""
    snake = re.sub(r"(?<!^)(?=[A-Z][a-z])", "_", value.strip())
    return snake.replace("-", "_").lower()


class ModelPortalConfig(BaseModel):
    """Configuration of a hosted portal session.

    Attributes:
        address: Address of the server players are redirected to. Required.
        port: Port of that server.
        joinability: Who may discover and join the session.
        world: Session card metadata.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    address: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("address", "ip"),
        description="Redirect target address",
    )
    port: int = Field(default=19132, ge=1, le=65535)
    joinability: EnumJoinability = Field(default=EnumJoinability.FRIENDS_OF_FRIENDS)
    world: ModelWorldConfig = Field(default_factory=ModelWorldConfig)

    @field_validator("address")
    @classmethod
    def _strip_address(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("No IP provided")
        return value

    @field_validator("joinability", mode="before")
    @classmethod
    def _accept_display_names(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, EnumJoinability):
            return _normalize_joinability_name(value)
        return value


__all__ = ["ModelPortalConfig"]
