# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory client protocol.

The session lifecycle manager and the event reconciler only depend on
this protocol. ``HandlerDirectoryHttp`` is the bundled implementation;
tests use in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from bedrock_portal.models import ModelProfile, ModelSessionRecord


@runtime_checkable
class ProtocolDirectoryClient(Protocol):
    """Named REST operations against the session directory."""

    async def update_session(self, session_name: str, payload: dict[str, Any]) -> None:
        """Write a full or partial session body."""
        ...

    async def get_session(self, session_name: str) -> ModelSessionRecord:
        """Return the current session record including server-assigned properties."""
        ...

    async def set_activity(self, session_name: str) -> None:
        """Register the session as the caller's active game activity."""
        ...

    async def leave_session(self, session_name: str) -> None:
        """Remove the caller as a member and host of the session."""
        ...

    async def get_profile(self, identifier: str) -> ModelProfile:
        """Resolve ``"me"``, a gamertag or a member id to a profile."""
        ...

    async def send_invite(self, session_name: str, member_id: str) -> None:
        """Invite ``member_id`` to the session."""
        ...

    async def update_member_count(self, session_name: str, count: int) -> None:
        """Update the member count shown on the session card."""
        ...


__all__: list[str] = ["ProtocolDirectoryClient"]
