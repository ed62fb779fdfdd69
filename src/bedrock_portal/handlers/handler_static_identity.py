# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Static identity provider.

Serves an XSTS token pair obtained elsewhere (device-code or browser
login is not part of this package). Intended for the CLI and for
deployments where an external process refreshes the environment.

Environment Variables:
    PORTAL_XBL_USER_HASH: XSTS user hash (uhs)
    PORTAL_XBL_TOKEN: XSTS token
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import SecretStr

from bedrock_portal.enums import EnumPortalTransportType
from bedrock_portal.errors import ModelPortalErrorContext, PortalAuthenticationError
from bedrock_portal.models import ModelXboxAuthorization

ENV_USER_HASH = "PORTAL_XBL_USER_HASH"
ENV_TOKEN = "PORTAL_XBL_TOKEN"


class StaticIdentityProvider:
    """``ProtocolIdentityProvider`` returning a fixed authorization."""

    def __init__(self, user_hash: str, xsts_token: str) -> None:
        if not user_hash or not xsts_token:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.IDENTITY,
                operation="authenticate",
            )
            raise PortalAuthenticationError(
                "Both a user hash and an XSTS token are required", context=ctx
            )
        self._authorization = ModelXboxAuthorization(
            user_hash=SecretStr(user_hash),
            xsts_token=SecretStr(xsts_token),
        )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> StaticIdentityProvider:
        """Build a provider from PORTAL_XBL_USER_HASH and PORTAL_XBL_TOKEN.

        Raises:
            PortalAuthenticationError: If either variable is missing or empty.
        """
        env = os.environ if environ is None else environ
        return cls(env.get(ENV_USER_HASH, ""), env.get(ENV_TOKEN, ""))

    async def authenticate(self) -> ModelXboxAuthorization:
        return self._authorization


__all__: list[str] = ["ENV_TOKEN", "ENV_USER_HASH", "StaticIdentityProvider"]
