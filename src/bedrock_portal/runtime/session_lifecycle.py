# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session Lifecycle Manager.

Owns the session name and publishes the session record with the
directory service.

Two-phase publish:
    1. ``update_session(body)`` creates the session from configuration,
       joinability and the host identity
    2. ``set_activity(name)`` makes it the host's active game activity
    3. ``get_session(name)`` fetches the materialized record
    4. ``update_session({"properties": fetched.properties})`` republishes
       with the server-assigned properties

    The directory only fills some session fields on creation, so the
    second write is what makes the advertised session complete. The
    realtime listener must not attach before step 4 returns.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional
from uuid import uuid4

from bedrock_portal.constants import (
    DEFAULT_WORLD_TYPE,
    MINECRAFT_PROTOCOL_VERSION,
    REDIRECT_CONNECTION_TYPE,
    resolve_joinability,
)
from bedrock_portal.enums import EnumPortalTransportType
from bedrock_portal.errors import (
    ModelPortalErrorContext,
    PortalError,
    ProfileResolutionError,
    SessionOwnerMissingError,
)
from bedrock_portal.models import (
    ModelPortalConfig,
    ModelSessionRecord,
    ModelSessionRef,
)
from bedrock_portal.runtime.portal_host import PortalHost

logger = logging.getLogger(__name__)


def generate_raknet_guid() -> str:
    """Return a random 20-digit RakNet GUID."""
    return "".join(random.choice("0123456789") for _ in range(20))


class SessionLifecycleManager:
    """Publishes, reads, updates and leaves the hosted session."""

    def __init__(self, config: ModelPortalConfig, host: PortalHost) -> None:
        self._config = config
        self._host = host
        self._session: Optional[ModelSessionRef] = None

    @property
    def session(self) -> Optional[ModelSessionRef]:
        """Current session handle, None before the first start()."""
        return self._session

    def _require_session(self, operation: str) -> ModelSessionRef:
        if self._session is None:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.RUNTIME,
                operation=operation,
            )
            raise PortalError("No active session. Call start() first.", context=ctx)
        return self._session

    async def start(self) -> ModelSessionRecord:
        """Generate a fresh session name and run the two-phase publish.

        Returns:
            The session record fetched between the two writes.

        Raises:
            SessionOwnerMissingError: If the host has not connected.
        """
        body = self.build_session_body()
        identity = self._host.identity
        assert identity is not None
        self._session = ModelSessionRef(
            name=str(uuid4()),
            subscription_id=identity.subscription_id,
        )
        return await self._create_and_publish(self._session, body)

    async def _create_and_publish(
        self, session: ModelSessionRef, body: dict[str, Any]
    ) -> ModelSessionRecord:
        directory = self._host.directory

        await directory.update_session(session.name, body)
        logger.debug("Created session", extra={"session_name": session.name})

        await directory.set_activity(session.name)

        record = await directory.get_session(session.name)

        await directory.update_session(session.name, {"properties": record.properties})
        logger.info("Published session", extra={"session_name": session.name})

        return record

    def build_session_body(self) -> dict[str, Any]:
        """Build the initial session body.

        Raises:
            SessionOwnerMissingError: If connect() has not populated the identity.
        """
        identity = self._host.identity
        if identity is None:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.RUNTIME,
                operation="build_session_body",
            )
            raise SessionOwnerMissingError("No session owner", context=ctx)

        joinability = resolve_joinability(self._config.joinability)
        world = self._config.world

        return {
            "properties": {
                "system": {
                    "joinRestriction": joinability.join_restriction,
                    "readRestriction": "followed",
                    "closed": False,
                },
                "custom": {
                    "hostName": str(world.host_name),
                    "worldName": str(world.name),
                    "version": str(world.version),
                    "MemberCount": int(world.member_count),
                    "MaxMemberCount": int(world.max_member_count),
                    "Joinability": joinability.joinability_label,
                    "ownerId": identity.profile_id,
                    "rakNetGUID": generate_raknet_guid(),
                    "worldType": DEFAULT_WORLD_TYPE,
                    "protocol": MINECRAFT_PROTOCOL_VERSION,
                    "BroadcastSetting": joinability.broadcast_setting,
                    "OnlineCrossPlatformGame": True,
                    "CrossPlayDisabled": False,
                    "TitleId": 0,
                    "TransportLayer": 0,
                    "SupportedConnections": [
                        {
                            "ConnectionType": REDIRECT_CONNECTION_TYPE,
                            "HostIpAddress": self._config.address,
                            "HostPort": int(self._config.port),
                            "RakNetGUID": "",
                        }
                    ],
                },
            },
            "members": {
                "me": {
                    "constants": {
                        "system": {
                            "xuid": identity.profile_id,
                            "initialize": True,
                        }
                    },
                    "properties": {
                        "system": {
                            "active": True,
                            "connection": identity.connection_id,
                            "subscription": {
                                "id": identity.subscription_id,
                                "changeTypes": ["everything"],
                            },
                        }
                    },
                }
            },
        }

    async def end(self) -> None:
        """Leave the session. Failures are logged and swallowed."""
        if self._session is None:
            return
        try:
            await self._host.directory.leave_session(self._session.name)
        except Exception as e:
            logger.warning(
                "Failed to leave session as host",
                extra={"session_name": self._session.name, "error": str(e)},
            )
        else:
            logger.debug("Left session", extra={"session_name": self._session.name})

    async def get_session(self) -> ModelSessionRecord:
        session = self._require_session("get_session")
        return await self._host.directory.get_session(session.name)

    async def update_session(self, payload: dict[str, Any]) -> None:
        session = self._require_session("update_session")
        await self._host.directory.update_session(session.name, payload)

    async def update_member_count(self, count: int) -> None:
        session = self._require_session("update_member_count")
        await self._host.directory.update_member_count(session.name, count)

    async def invite_player(self, identifier: str) -> str:
        """Resolve ``identifier`` and invite that member.

        Args:
            identifier: Gamertag or member id.

        Returns:
            The resolved member id.

        Raises:
            ProfileResolutionError: If ``identifier`` cannot be resolved.
        """
        session = self._require_session("invite_player")
        logger.debug("Inviting player", extra={"identifier": identifier})

        try:
            profile = await self._host.directory.get_profile(identifier)
        except Exception as e:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.HTTP,
                operation="get_profile",
                target_name=identifier,
            )
            raise ProfileResolutionError(
                f"Failed to get profile for identifier: {identifier}", context=ctx
            ) from e

        await self._host.directory.send_invite(session.name, profile.member_id)
        logger.info(
            "Invited player",
            extra={"identifier": identifier, "member_id": profile.member_id},
        )
        return profile.member_id


__all__: list[str] = ["SessionLifecycleManager", "generate_raknet_guid"]
