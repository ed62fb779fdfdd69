# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Social client protocol used by the bundled modules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bedrock_portal.models import ModelPerson


@runtime_checkable
class ProtocolSocialClient(Protocol):
    """Followers lookup and follow-back for the authenticated identity."""

    async def get_followers(self) -> list[ModelPerson]:
        """Return the people following the caller."""
        ...

    async def add_friend(self, member_id: str) -> None:
        """Follow ``member_id``."""
        ...


__all__: list[str] = ["ProtocolSocialClient"]
