# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Realtime transport protocol.

A persistent subscription connection that emits decoded frames. Frames
are read through ``frames()``, a single-consumer async iterator, so the
reader sees them in arrival order and one at a time.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from bedrock_portal.models import ModelRealtimeFrame, ModelSubscribeResult


@runtime_checkable
class ProtocolRealtimeTransport(Protocol):
    """Frame-emitting subscription connection."""

    async def connect(self) -> None:
        """Open the connection.

        Raises:
            PortalConnectionError: If the connection cannot be opened.
        """
        ...

    async def subscribe(self, resource: str) -> ModelSubscribeResult:
        """Subscribe to ``resource`` and return the handshake result."""
        ...

    def frames(self) -> AsyncIterator[ModelRealtimeFrame]:
        """Iterate decoded frames until the transport is destroyed."""
        ...

    async def destroy(self) -> None:
        """Close the connection. No frames are delivered afterwards."""
        ...


__all__: list[str] = ["ProtocolRealtimeTransport"]
