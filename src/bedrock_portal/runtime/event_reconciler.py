# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event Reconciler.

Turns realtime frames into player registry updates and domain events.

Processing Model:
    One consumer task reads ``transport.frames()``. Each frame is fully
    reconciled (registry updated, events emitted) before the next one is
    read, so frames are never handled out of arrival order.

Dispatch:
    - Frames for any other subscription id are ignored
    - Every accepted frame is emitted as ``realtimeEvent`` first
    - SESSION_CHANGED: inline ``members`` or shoulder taps naming the
      active session (the latter fetches the session and emits
      ``sessionUpdated``). The member list is diffed against the
      registry, applied in one step, then one ``playerJoin`` /
      ``playerLeave`` is emitted per changed member
    - MESSAGE: ``messageReceived``
    - FRIEND_ADDED / FRIEND_REMOVED: ``friendAdded`` / ``friendRemoved``
      per member id, registry untouched
    - UNKNOWN: ignored

Failure Model:
    A frame that fails to decode (or whose referenced session cannot be
    fetched) is dropped with a warning. Diffs are computed before any
    mutation, so a dropped frame never leaves the registry half-updated.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Optional

from pydantic import ValidationError

from bedrock_portal.enums import (
    EnumMembershipState,
    EnumPortalEvent,
    EnumRealtimeEventCategory,
)
from bedrock_portal.errors import FrameDecodeError, PortalError
from bedrock_portal.event_bus import PortalEventBus
from bedrock_portal.models import (
    ModelChatMessage,
    ModelFriendNotification,
    ModelPlayer,
    ModelRealtimeFrame,
    ModelSessionChangedPayload,
    ModelSessionMember,
    ModelSessionRecord,
    parse_member_list,
)
from bedrock_portal.protocols import ProtocolRealtimeTransport
from bedrock_portal.runtime.player_registry import PlayerRegistry

logger = logging.getLogger(__name__)

SessionFetcher = Callable[[], Awaitable[ModelSessionRecord]]


class EventReconciler:
    """Single writer of the player registry, driven by realtime frames."""

    def __init__(
        self,
        registry: PlayerRegistry,
        event_bus: PortalEventBus,
        fetch_session: SessionFetcher,
    ) -> None:
        self._registry = registry
        self._event_bus = event_bus
        self._fetch_session = fetch_session

        self._subscription_id: Optional[str] = None
        self._owned_subscription_ids: frozenset[str] = frozenset()
        self._session_name: Optional[str] = None
        self._host_member_id: Optional[str] = None
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def is_attached(self) -> bool:
        return self._subscription_id is not None

    @property
    def subscription_id(self) -> Optional[str]:
        return self._subscription_id

    def bind(
        self,
        *,
        subscription_id: str,
        session_name: str,
        host_member_id: str,
        notification_subscription_ids: Iterable[str] = (),
    ) -> None:
        """Key reconciliation to the portal's subscriptions and session.

        Session frames come from ``subscription_id``; friend and message
        frames may also arrive on ``notification_subscription_ids``.
        """
        self._subscription_id = subscription_id
        self._owned_subscription_ids = frozenset(
            (subscription_id, *notification_subscription_ids)
        )
        self._session_name = session_name
        self._host_member_id = host_member_id

    def attach(
        self,
        transport: ProtocolRealtimeTransport,
        *,
        subscription_id: str,
        session_name: str,
        host_member_id: str,
        notification_subscription_ids: Iterable[str] = (),
    ) -> None:
        """Bind and start consuming ``transport.frames()``.

        Raises:
            RuntimeError: If a consumer is already attached.
        """
        if self._task is not None and not self._task.done():
            raise RuntimeError("EventReconciler already attached. Call detach() first.")
        self.bind(
            subscription_id=subscription_id,
            session_name=session_name,
            host_member_id=host_member_id,
            notification_subscription_ids=notification_subscription_ids,
        )
        self._task = asyncio.create_task(
            self._consume(transport), name=f"reconciler:{subscription_id}"
        )
        logger.info(
            "Realtime listener attached",
            extra={"subscription_id": subscription_id, "session_name": session_name},
        )

    async def detach(self) -> None:
        """Stop consuming frames and forget the binding and members."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        elif task is not None and not task.cancelled() and task.exception() is not None:
            logger.warning(
                "Realtime listener had stopped with an error",
                extra={"error": str(task.exception())},
            )
        if self._subscription_id is not None:
            logger.debug(
                "Realtime listener detached",
                extra={"subscription_id": self._subscription_id},
            )
        self._subscription_id = None
        self._owned_subscription_ids = frozenset()
        self._session_name = None
        self._host_member_id = None
        self._registry.clear()

    async def _consume(self, transport: ProtocolRealtimeTransport) -> None:
        try:
            async for frame in transport.frames():
                try:
                    await self.handle_frame(frame)
                except Exception as e:
                    logger.exception(
                        "Unexpected error while reconciling frame",
                        extra={"sequence": frame.sequence, "error": str(e)},
                    )
        except Exception as e:
            logger.exception(
                "Realtime frame stream failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise
        logger.debug("Realtime frame stream ended")

    async def handle_frame(self, frame: ModelRealtimeFrame) -> None:
        """Reconcile a single frame. Malformed frames are dropped."""
        if frame.subscription_id not in self._owned_subscription_ids:
            logger.debug(
                "Ignoring frame for foreign subscription",
                extra={"subscription_id": frame.subscription_id},
            )
            return

        await self._event_bus.emit(EnumPortalEvent.REALTIME_EVENT, frame)

        try:
            if frame.category is EnumRealtimeEventCategory.SESSION_CHANGED:
                await self._on_session_changed(frame)
            elif frame.category is EnumRealtimeEventCategory.MESSAGE:
                await self._on_message(frame)
            elif frame.category in (
                EnumRealtimeEventCategory.FRIEND_ADDED,
                EnumRealtimeEventCategory.FRIEND_REMOVED,
            ):
                await self._on_friend_change(frame)
        except (FrameDecodeError, ValidationError, PortalError) as e:
            logger.warning(
                "Dropping realtime frame",
                extra={
                    "sequence": frame.sequence,
                    "category": frame.category.value,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )

    async def _on_session_changed(self, frame: ModelRealtimeFrame) -> None:
        payload = ModelSessionChangedPayload.model_validate(frame.payload)
        record: Optional[ModelSessionRecord] = None

        if payload.members is not None:
            members = parse_member_list(payload.members)
        elif self._session_name is not None and any(
            tap.references(self._session_name) for tap in payload.shoulder_taps
        ):
            record = await self._fetch_session()
            members = record.member_list()
        else:
            return

        await self._reconcile_members(members, record)

    async def _reconcile_members(
        self,
        members: list[ModelSessionMember],
        record: Optional[ModelSessionRecord],
    ) -> None:
        exclude = [self._host_member_id] if self._host_member_id else []
        diff = self._registry.compute_diff(members, exclude=exclude)
        if not diff.is_empty:
            self._registry.apply_diff(diff)

        if record is not None:
            await self._event_bus.emit(EnumPortalEvent.SESSION_UPDATED, record)

        for player in diff.joined:
            logger.info(
                "Player joined",
                extra={"member_id": player.member_id, "gamertag": player.display_name},
            )
            await self._event_bus.emit(EnumPortalEvent.PLAYER_JOIN, player)
        for player in diff.left:
            logger.info(
                "Player left",
                extra={"member_id": player.member_id, "gamertag": player.display_name},
            )
            await self._event_bus.emit(EnumPortalEvent.PLAYER_LEAVE, player)

    async def _on_message(self, frame: ModelRealtimeFrame) -> None:
        raw = frame.payload.get("lastMessage", frame.payload)
        if not isinstance(raw, dict):
            raise FrameDecodeError("Message frame has no message object")
        message = ModelChatMessage.model_validate(raw)
        await self._event_bus.emit(EnumPortalEvent.MESSAGE_RECEIVED, message)

    async def _on_friend_change(self, frame: ModelRealtimeFrame) -> None:
        notification = ModelFriendNotification.model_validate(frame.payload)
        event = (
            EnumPortalEvent.FRIEND_ADDED
            if frame.category is EnumRealtimeEventCategory.FRIEND_ADDED
            else EnumPortalEvent.FRIEND_REMOVED
        )
        players = [
            self._registry.get(member_id)
            or ModelPlayer(member_id=member_id, membership_state=EnumMembershipState.LEFT)
            for member_id in notification.member_ids
        ]
        for player in players:
            await self._event_bus.emit(event, player)


__all__: list[str] = ["EventReconciler", "SessionFetcher"]
