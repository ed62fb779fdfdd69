# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""One entry of a directory session member list."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.errors import FrameDecodeError


class ModelSessionMember(BaseModel):
    """Member id and gamertag extracted from a directory member entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    member_id: str = Field(..., min_length=1)
    gamertag: str = Field(default="")

    @classmethod
    def from_directory_entry(cls, entry: object) -> ModelSessionMember:
        """Parse ``{"constants": {"system": {"xuid": ...}}, "gamertag": ...}``.

        Raises:
            FrameDecodeError: If the entry has no member id.
        """
        if not isinstance(entry, Mapping):
            raise FrameDecodeError("Session member entry is not an object")
        constants = entry.get("constants")
        system = constants.get("system") if isinstance(constants, Mapping) else None
        xuid = system.get("xuid") if isinstance(system, Mapping) else None
        if not isinstance(xuid, str) or not xuid:
            raise FrameDecodeError("Session member entry has no xuid")
        gamertag = entry.get("gamertag")
        return cls(member_id=xuid, gamertag=gamertag if isinstance(gamertag, str) else "")


def parse_member_list(members: object) -> list[ModelSessionMember]:
    """Parse a directory ``members`` block into an ordered member list.

    Duplicate member ids collapse to their first occurrence. The whole
    block is parsed before anything is returned, so a malformed entry
    fails the list as a unit.

    Raises:
        FrameDecodeError: If the block or any entry is malformed.
    """
    if members is None:
        return []
    if not isinstance(members, Mapping):
        raise FrameDecodeError("Session members block is not an object")
    parsed: dict[str, ModelSessionMember] = {}
    for entry in members.values():
        member = ModelSessionMember.from_directory_entry(entry)
        parsed.setdefault(member.member_id, member)
    return list(parsed.values())


__all__ = ["ModelSessionMember", "parse_member_list"]
