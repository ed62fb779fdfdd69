# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""World card configuration shown to players in the game client."""

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal._version import __version__

DEFAULT_HOST_NAME: str = f"Bedrock Portal v{__version__}"
DEFAULT_WORLD_NAME: str = "Bedrock Portal"


class ModelWorldConfig(BaseModel):
    """Session card metadata.

    Attributes:
        host_name: Host name shown on the session card.
        name: World name shown on the session card.
        version: Version label; does not have to be a real game version.
        member_count: Player count shown on the card.
        max_member_count: Max player count shown on the card. Does not
            limit the session itself.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    host_name: str = Field(default=DEFAULT_HOST_NAME, alias="hostName")
    name: str = Field(default=DEFAULT_WORLD_NAME)
    version: str = Field(default=__version__)
    member_count: int = Field(default=0, ge=0, alias="memberCount")
    max_member_count: int = Field(default=10, ge=0, alias="maxMemberCount")


__all__ = ["DEFAULT_HOST_NAME", "DEFAULT_WORLD_NAME", "ModelWorldConfig"]
