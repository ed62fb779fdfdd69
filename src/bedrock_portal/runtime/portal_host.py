# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal host: authenticates and owns the realtime connection.

``connect()`` is the only writer of the identity context. Failures are
propagated unchanged (or wrapped into a ``PortalError`` when the
collaborator raised something else); retrying is the caller's decision.
"""

from __future__ import annotations

import logging
from typing import Optional
from uuid import uuid4

from bedrock_portal.constants import CONNECTIONS_RESOURCE, notification_resources
from bedrock_portal.enums import EnumPortalTransportType
from bedrock_portal.errors import (
    ModelPortalErrorContext,
    PortalAuthenticationError,
    PortalConnectionError,
    PortalError,
    ProfileResolutionError,
)
from bedrock_portal.models import ModelIdentityContext
from bedrock_portal.protocols import (
    ProtocolDirectoryClient,
    ProtocolIdentityProvider,
    ProtocolRealtimeTransport,
)

logger = logging.getLogger(__name__)


class PortalHost:
    """Session owner identity plus the transports acting on its behalf."""

    def __init__(
        self,
        identity_provider: ProtocolIdentityProvider,
        directory: ProtocolDirectoryClient,
        transport: ProtocolRealtimeTransport,
    ) -> None:
        self.identity_provider = identity_provider
        self.directory = directory
        self.transport = transport
        self._identity: Optional[ModelIdentityContext] = None
        self._connected = False

    @property
    def identity(self) -> Optional[ModelIdentityContext]:
        """Identity from the last successful connect, if any."""
        return self._identity

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> ModelIdentityContext:
        """Authenticate, open the realtime transport and run the subscribe handshake.

        Returns:
            The new identity context, which replaces any previous one.

        Raises:
            PortalAuthenticationError: If the identity provider fails.
            PortalConnectionError: If the transport or handshake fails.
            ProfileResolutionError: If the host profile cannot be fetched.
        """
        correlation_id = uuid4()

        try:
            await self.identity_provider.authenticate()
        except PortalError:
            raise
        except Exception as e:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.IDENTITY,
                operation="authenticate",
                correlation_id=correlation_id,
            )
            raise PortalAuthenticationError("Failed to authenticate", context=ctx) from e

        try:
            profile = await self.directory.get_profile("me")
        except PortalError:
            raise
        except Exception as e:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.HTTP,
                operation="get_profile",
                target_name="me",
                correlation_id=correlation_id,
            )
            raise ProfileResolutionError(
                "Failed to get profile of the session owner", context=ctx
            ) from e

        try:
            await self.transport.connect()
            self._connected = True
            handshake = await self.transport.subscribe(CONNECTIONS_RESOURCE)
        except Exception as e:
            await self.disconnect()
            if isinstance(e, PortalError):
                raise
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.REALTIME,
                operation="connect",
                target_name=CONNECTIONS_RESOURCE,
                correlation_id=correlation_id,
            )
            raise PortalConnectionError(
                "Failed to open realtime connection", context=ctx
            ) from e

        notification_ids = await self._subscribe_notifications(profile.member_id)

        self._identity = ModelIdentityContext(
            profile_id=profile.member_id,
            display_name=profile.gamertag or profile.member_id,
            connection_id=handshake.connection_id,
            subscription_id=handshake.subscription_id,
            notification_subscription_ids=notification_ids,
        )
        logger.info(
            "Host connected",
            extra={
                "profile_id": self._identity.profile_id,
                "connection_id": self._identity.connection_id,
                "subscription_id": self._identity.subscription_id,
                "notification_subscription_ids": list(notification_ids),
                "correlation_id": str(correlation_id),
            },
        )
        return self._identity

    async def _subscribe_notifications(self, member_id: str) -> tuple[str, ...]:
        """Subscribe to the friends and message resources of the host.

        A refused subscription is logged and skipped.
        """
        subscription_ids: list[str] = []
        for resource in notification_resources(member_id):
            try:
                result = await self.transport.subscribe(resource)
            except PortalError as e:
                logger.warning(
                    "Realtime notification subscription failed",
                    extra={"resource": resource, "error": str(e)},
                )
                continue
            subscription_ids.append(result.subscription_id)
        return tuple(subscription_ids)

    async def disconnect(self) -> None:
        """Destroy the realtime transport if it was opened.

        Failures are logged and swallowed.
        """
        if not self._connected:
            return
        self._connected = False
        try:
            await self.transport.destroy()
        except Exception as e:
            logger.warning(
                "Failed to destroy realtime transport",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            return
        logger.debug("Realtime transport destroyed")


__all__: list[str] = ["PortalHost"]
