# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal module protocol.

Modules are pluggable extensions run against the live session. Conformance
is structural: any object with a non-empty ``name`` and callable ``run``
and ``stop`` is a module; no base class is required.

Lifecycle:
    1. ``apply_options(options)`` - optional, called once by ``use()``
    2. ``run(portal)`` - awaited in its own supervised task after publish
    3. ``stop()`` - called exactly once per ``start()`` during ``end()``

Example:
    ```python
    class ModuleGreeter:
        name = "greeter"

        async def run(self, portal: BedrockPortal) -> None:
            portal.on(EnumPortalEvent.PLAYER_JOIN, self._greet)

        def stop(self) -> None:
            ...

    portal.use(ModuleGreeter())
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal


@runtime_checkable
class ProtocolPortalModule(Protocol):
    """Structural contract every portal module satisfies."""

    name: str

    async def run(self, portal: BedrockPortal) -> None:
        """Run against the live portal. Exceptions are isolated by the runtime."""
        ...

    def stop(self) -> Optional[Awaitable[None]]:
        """Stop the module. May be a plain or an async method."""
        ...


__all__: list[str] = ["ProtocolPortalModule"]
