# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Authenticated identity handed out by an identity provider.

Security Note:
    Both the user hash and token are SecretStr so they never show up in
    logs or reprs. Only ``authorization_header()`` reveals them.
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelXboxAuthorization(BaseModel):
    """XSTS token pair used to sign directory and realtime requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_hash: SecretStr = Field(..., description="XSTS user hash (uhs)")
    xsts_token: SecretStr = Field(..., description="XSTS token")

    def authorization_header(self) -> str:
        """Return the ``Authorization`` header value."""
        return (
            f"XBL3.0 x={self.user_hash.get_secret_value()};"
            f"{self.xsts_token.get_secret_value()}"
        )


__all__ = ["ModelXboxAuthorization"]
