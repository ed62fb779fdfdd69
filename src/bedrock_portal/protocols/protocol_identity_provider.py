# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identity provider protocol (token acquisition is external)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bedrock_portal.models import ModelXboxAuthorization


@runtime_checkable
class ProtocolIdentityProvider(Protocol):
    """Source of an authenticated Xbox identity."""

    async def authenticate(self) -> ModelXboxAuthorization:
        """Return a valid authorization.

        Raises:
            PortalAuthenticationError: If no valid identity is available.
        """
        ...


__all__: list[str] = ["ProtocolIdentityProvider"]
