# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""BedrockPortal - host an advertised session and track its members.

Start Order:
    1. ``PortalHost.connect()`` - authenticate, open realtime, handshake
    2. ``SessionLifecycleManager.start()`` - new session name, two-phase publish
    3. ``EventReconciler.attach()`` - only after the publish completed
    4. ``ModuleRuntime.start_all()`` - supervised, fire-and-forget
    5. ``sessionCreated`` is emitted

End Order:
    1. Detach the reconciler and destroy the realtime transport
    2. Leave the session (best effort)
    3. Stop every started module (best effort)
    4. If ``resume``, start again with a new session name

Example:
    ```python
    portal = BedrockPortal(
        StaticIdentityProvider.from_env(),
        {"address": "203.0.113.5", "port": 19132, "joinability": "FriendsOfFriends"},
    )
    portal.use(ModuleAutoFriendAdd(), {"invite_on_add": True})
    portal.on(EnumPortalEvent.PLAYER_JOIN, lambda player: print(player.display_name))
    await portal.start()
    ...
    await portal.end()
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from bedrock_portal.enums import EnumPortalEvent, EnumPortalTransportType
from bedrock_portal.errors import ModelPortalErrorContext, PortalError
from bedrock_portal.event_bus import PortalEventBus, PortalEventHandler
from bedrock_portal.handlers.handler_directory_http import HandlerDirectoryHttp
from bedrock_portal.handlers.handler_realtime_ws import HandlerRealtimeWebSocket
from bedrock_portal.models import (
    ModelIdentityContext,
    ModelModuleRegistration,
    ModelPlayer,
    ModelPortalConfig,
    ModelSessionRecord,
    ModelSessionRef,
)
from bedrock_portal.protocols import (
    ProtocolDirectoryClient,
    ProtocolIdentityProvider,
    ProtocolPortalModule,
    ProtocolRealtimeTransport,
)
from bedrock_portal.runtime.event_reconciler import EventReconciler
from bedrock_portal.runtime.module_runtime import ModuleRuntime
from bedrock_portal.runtime.player_registry import PlayerRegistry
from bedrock_portal.runtime.portal_config_loader import build_portal_config
from bedrock_portal.runtime.portal_host import PortalHost
from bedrock_portal.runtime.session_lifecycle import SessionLifecycleManager

logger = logging.getLogger(__name__)


class BedrockPortal:
    """Public surface of the portal.

    Attributes:
        config: Validated portal configuration.
        host: Identity owner and transports.
        lifecycle: Session publish/read/update/leave.
        registry: Current session members (read through get_session_members()).
        reconciler: Realtime frame consumer, single writer of the registry.
        modules: Registered modules.
        event_bus: Domain event channel (subscribe through on()).
    """

    def __init__(
        self,
        identity_provider: ProtocolIdentityProvider,
        options: Union[ModelPortalConfig, Mapping[str, Any], None] = None,
        *,
        directory: Optional[ProtocolDirectoryClient] = None,
        transport: Optional[ProtocolRealtimeTransport] = None,
        event_bus: Optional[PortalEventBus] = None,
    ) -> None:
        """Validate configuration and wire the components.

        Raises:
            PortalConfigurationError: If the address or port is missing or
                the joinability is not recognized.
        """
        self.config = build_portal_config(options)

        self._owns_directory = directory is None
        self.directory: ProtocolDirectoryClient = directory or HandlerDirectoryHttp(
            identity_provider
        )
        self.transport: ProtocolRealtimeTransport = (
            transport or HandlerRealtimeWebSocket(identity_provider)
        )
        self.event_bus = event_bus or PortalEventBus()

        self.host = PortalHost(identity_provider, self.directory, self.transport)
        self.registry = PlayerRegistry()
        self.lifecycle = SessionLifecycleManager(self.config, self.host)
        self.reconciler = EventReconciler(
            self.registry, self.event_bus, self.lifecycle.get_session
        )
        self.modules = ModuleRuntime()
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def session(self) -> Optional[ModelSessionRef]:
        """Current session handle."""
        return self.lifecycle.session

    @property
    def identity(self) -> Optional[ModelIdentityContext]:
        return self.host.identity

    def on(
        self, event: Union[EnumPortalEvent, str], handler: PortalEventHandler
    ) -> Callable[[], None]:
        """Subscribe ``handler`` to a portal event. Returns an unsubscribe function."""
        return self.event_bus.subscribe(event, handler)

    async def start(self) -> ModelSessionRecord:
        """Connect, publish a new session and start listening and modules.

        Returns:
            The published session record (also emitted as ``sessionCreated``).

        Raises:
            PortalError: If already started, or connect/publish failed.
        """
        if self._running:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.RUNTIME,
                operation="start",
            )
            raise PortalError("BedrockPortal already started", context=ctx)

        identity = await self.host.connect()

        try:
            record = await self.lifecycle.start()
        except Exception:
            await self.host.disconnect()
            await self.lifecycle.end()
            raise

        session = self.lifecycle.session
        assert session is not None
        self.reconciler.attach(
            self.transport,
            subscription_id=identity.subscription_id,
            session_name=session.name,
            host_member_id=identity.profile_id,
            notification_subscription_ids=identity.notification_subscription_ids,
        )
        self.modules.start_all(self)
        self._running = True

        await self.event_bus.emit(EnumPortalEvent.SESSION_CREATED, record)
        return record

    async def end(self, resume: bool = False) -> Optional[ModelSessionRecord]:
        """Tear down the session. With ``resume`` a new session is started.

        Returns:
            The new session record when resuming, otherwise None.
        """
        try:
            await self.reconciler.detach()
            await self.host.disconnect()
            await self.lifecycle.end()
        finally:
            await self.modules.stop_all()
            self._running = False

        session = self.lifecycle.session
        logger.info(
            "Abandoned session",
            extra={
                "session_name": session.name if session else None,
                "resume": resume,
            },
        )

        if resume:
            return await self.start()
        return None

    async def close(self) -> None:
        """End the session if running and release owned HTTP resources."""
        if self._running:
            await self.end()
        if self._owns_directory and isinstance(self.directory, HandlerDirectoryHttp):
            await self.directory.shutdown()

    def get_session_members(self) -> Mapping[str, ModelPlayer]:
        """Read-only snapshot of the current members keyed by member id."""
        return self.registry.snapshot()

    async def invite_player(self, identifier: str) -> str:
        """Invite a player by gamertag or member id. Returns the member id.

        Raises:
            ProfileResolutionError: If the identifier cannot be resolved.
        """
        return await self.lifecycle.invite_player(identifier)

    async def update_member_count(self, count: int) -> None:
        """Update the member count shown on the session card."""
        await self.lifecycle.update_member_count(count)

    async def get_session(self) -> ModelSessionRecord:
        return await self.lifecycle.get_session()

    async def update_session(self, payload: dict[str, Any]) -> None:
        await self.lifecycle.update_session(payload)

    def use(
        self,
        module: ProtocolPortalModule,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ModelModuleRegistration:
        """Register a module. It runs from the next start() on.

        Raises:
            ModuleRegistrationError: On duplicate name or missing run/stop.
        """
        return self.modules.use(module, options)


__all__: list[str] = ["BedrockPortal"]
