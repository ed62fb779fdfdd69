# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Realtime WebSocket Handler - Xbox Live RTA client using aiohttp.

Wire Format:
    Every message is a JSON array whose first element is the message type.

    ==========  ===========================================  =========
    Type        Shape                                        Direction
    ==========  ===========================================  =========
    1 SUBSCRIBE ``[1, seq, uri]``                            out
    1 SUBSCRIBE ``[1, seq, status, subscription_id, data]``  in
    2 UNSUB     ``[2, seq, subscription_id]``                both
    3 EVENT     ``[3, subscription_id, data]``               in
    4 RESYNC    ``[4]``                                      in
    ==========  ===========================================  =========

Frame Delivery:
    A single reader task decodes incoming messages. Subscribe responses
    resolve the matching pending ``subscribe()`` call; events are turned
    into ``ModelRealtimeFrame`` objects and put on a queue that
    ``frames()`` drains in arrival order. Messages that fail to decode are
    logged and dropped, the reader keeps going.
"""

from __future__ import annotations

import asyncio
import itertools
import json
import logging
from collections.abc import AsyncIterator
from typing import Any, Optional, Union

import aiohttp

from bedrock_portal.constants import REALTIME_SUBPROTOCOL, REALTIME_URL
from bedrock_portal.enums import EnumPortalTransportType, EnumRealtimeEventCategory
from bedrock_portal.errors import (
    FrameDecodeError,
    ModelPortalErrorContext,
    PortalConnectionError,
    PortalTimeoutError,
)
from bedrock_portal.models import ModelRealtimeFrame, ModelSubscribeResult
from bedrock_portal.protocols import ProtocolIdentityProvider

logger = logging.getLogger(__name__)

MESSAGE_SUBSCRIBE: int = 1
MESSAGE_UNSUBSCRIBE: int = 2
MESSAGE_EVENT: int = 3
MESSAGE_RESYNC: int = 4

_DEFAULT_TIMEOUT_SECONDS: float = 30.0
_DEFAULT_HEARTBEAT_SECONDS: float = 30.0

_FRIEND_ADDED_TYPES: frozenset[str] = frozenset({"Added"})
_FRIEND_REMOVED_TYPES: frozenset[str] = frozenset({"Deleted", "Removed"})


def decode_rta_message(raw: Union[str, bytes]) -> list[Any]:
    """Parse one wire message into its JSON array.

    Raises:
        FrameDecodeError: If the message is not a JSON array starting with
            an integer message type.
    """
    try:
        message = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise FrameDecodeError("Realtime message is not valid JSON") from e
    if not isinstance(message, list) or not message:
        raise FrameDecodeError("Realtime message is not a non-empty array")
    if not isinstance(message[0], int) or isinstance(message[0], bool):
        raise FrameDecodeError("Realtime message type is not an integer")
    return message


def classify_payload(data: object) -> EnumRealtimeEventCategory:
    """Classify an event payload into a frame category."""
    if not isinstance(data, dict):
        return EnumRealtimeEventCategory.UNKNOWN
    if "shoulderTaps" in data or "members" in data:
        return EnumRealtimeEventCategory.SESSION_CHANGED
    notification_type = data.get("NotificationType")
    if notification_type in _FRIEND_ADDED_TYPES:
        return EnumRealtimeEventCategory.FRIEND_ADDED
    if notification_type in _FRIEND_REMOVED_TYPES:
        return EnumRealtimeEventCategory.FRIEND_REMOVED
    if "lastMessage" in data or "contentPayload" in data:
        return EnumRealtimeEventCategory.MESSAGE
    return EnumRealtimeEventCategory.UNKNOWN


class HandlerRealtimeWebSocket:
    """RTA websocket transport implementing ``ProtocolRealtimeTransport``.

    One instance can be connected, destroyed and connected again; each
    connect starts a fresh frame queue so frames of an old connection are
    never delivered to a new consumer.
    """

    def __init__(
        self,
        identity_provider: ProtocolIdentityProvider,
        *,
        url: str = REALTIME_URL,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        heartbeat: float = _DEFAULT_HEARTBEAT_SECONDS,
    ) -> None:
        self._identity_provider = identity_provider
        self._url = url
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout
        self._heartbeat = heartbeat

        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None
        self._reader: Optional[asyncio.Task[None]] = None
        self._queue: asyncio.Queue[Optional[ModelRealtimeFrame]] = asyncio.Queue()
        self._pending: dict[int, asyncio.Future[list[Any]]] = {}
        self._request_sequence = itertools.count(1)
        self._frame_sequence = 0

    @property
    def is_connected(self) -> bool:
        return self._ws is not None and not self._ws.closed

    def _context(self, operation: str) -> ModelPortalErrorContext:
        return ModelPortalErrorContext(
            transport_type=EnumPortalTransportType.REALTIME,
            operation=operation,
            target_name=self._url,
        )

    async def connect(self) -> None:
        """Open the websocket and start the reader task.

        Raises:
            PortalConnectionError: If the websocket cannot be opened.
            PortalTimeoutError: If the handshake times out.
        """
        authorization = await self._identity_provider.authenticate()

        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        self._queue = asyncio.Queue()
        self._frame_sequence = 0

        try:
            self._ws = await asyncio.wait_for(
                self._session.ws_connect(
                    self._url,
                    protocols=(REALTIME_SUBPROTOCOL,),
                    headers={"Authorization": authorization.authorization_header()},
                    heartbeat=self._heartbeat,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise PortalTimeoutError(
                f"Realtime connect timed out after {self._timeout}s",
                context=self._context("connect"),
            ) from e
        except aiohttp.ClientError as e:
            raise PortalConnectionError(
                f"Realtime connect failed: {type(e).__name__}",
                context=self._context("connect"),
            ) from e

        self._reader = asyncio.create_task(self._read_loop(self._ws), name="rta-reader")
        logger.info("Realtime connection opened", extra={"url": self._url})

    async def subscribe(self, resource: str) -> ModelSubscribeResult:
        """Subscribe to ``resource`` and wait for the handshake response.

        Raises:
            PortalConnectionError: If not connected, or the service rejects
                the subscription.
            PortalTimeoutError: If no response arrives in time.
        """
        ws = self._ws
        if ws is None or ws.closed:
            raise PortalConnectionError(
                "Realtime transport not connected. Call connect() first.",
                context=self._context("subscribe"),
            )

        sequence = next(self._request_sequence)
        future: asyncio.Future[list[Any]] = asyncio.get_running_loop().create_future()
        self._pending[sequence] = future
        try:
            await ws.send_json([MESSAGE_SUBSCRIBE, sequence, resource])
            response = await asyncio.wait_for(future, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise PortalTimeoutError(
                f"Subscribe to {resource} timed out after {self._timeout}s",
                context=self._context("subscribe"),
            ) from e
        except (aiohttp.ClientError, ConnectionError) as e:
            raise PortalConnectionError(
                f"Subscribe to {resource} failed: {type(e).__name__}",
                context=self._context("subscribe"),
            ) from e
        finally:
            self._pending.pop(sequence, None)

        # [1, seq, status, subscription_id, data]
        status = response[2] if len(response) > 2 else None
        if status != 0 or len(response) < 4:
            raise PortalConnectionError(
                f"Subscribe to {resource} was rejected with status {status}",
                context=self._context("subscribe"),
                status=status,
            )
        data = response[4] if len(response) > 4 and isinstance(response[4], dict) else {}
        connection_id = data.get("ConnectionId") or str(response[3])

        logger.debug(
            "Subscribed to realtime resource",
            extra={"resource": resource, "subscription_id": response[3]},
        )
        return ModelSubscribeResult(
            subscription_id=str(response[3]),
            connection_id=str(connection_id),
        )

    async def frames(self) -> AsyncIterator[ModelRealtimeFrame]:
        """Yield decoded frames until the connection ends."""
        queue = self._queue
        while True:
            frame = await queue.get()
            if frame is None:
                return
            yield frame

    async def _read_loop(self, ws: aiohttp.ClientWebSocketResponse) -> None:
        queue = self._queue
        try:
            async for message in ws:
                if message.type in (aiohttp.WSMsgType.TEXT, aiohttp.WSMsgType.BINARY):
                    self._handle_message(message.data, queue)
                elif message.type is aiohttp.WSMsgType.ERROR:
                    logger.warning(
                        "Realtime connection error",
                        extra={"error": str(ws.exception())},
                    )
                    break
        finally:
            error = PortalConnectionError(
                "Realtime connection closed", context=self._context("read")
            )
            for future in self._pending.values():
                if not future.done():
                    future.set_exception(error)
            queue.put_nowait(None)
            logger.debug("Realtime reader stopped")

    def _handle_message(
        self,
        raw: Union[str, bytes],
        queue: asyncio.Queue[Optional[ModelRealtimeFrame]],
    ) -> None:
        try:
            message = decode_rta_message(raw)
        except FrameDecodeError as e:
            logger.warning("Dropping realtime message", extra={"error": str(e)})
            return

        message_type = message[0]
        if message_type == MESSAGE_SUBSCRIBE:
            future = self._pending.get(message[1]) if len(message) > 1 else None
            if future is not None and not future.done():
                future.set_result(message)
        elif message_type == MESSAGE_EVENT:
            if len(message) < 3:
                logger.warning(
                    "Dropping realtime event without payload",
                    extra={"length": len(message)},
                )
                return
            data = message[2]
            self._frame_sequence += 1
            queue.put_nowait(
                ModelRealtimeFrame(
                    subscription_id=str(message[1]),
                    category=classify_payload(data),
                    payload=data if isinstance(data, dict) else {"value": data},
                    sequence=self._frame_sequence,
                )
            )
        elif message_type == MESSAGE_UNSUBSCRIBE:
            logger.debug("Realtime unsubscribe acknowledged")
        elif message_type == MESSAGE_RESYNC:
            logger.info("Realtime service requested a resync")
        else:
            logger.debug(
                "Ignoring unknown realtime message type",
                extra={"message_type": message_type},
            )

    async def destroy(self) -> None:
        """Close the websocket and end the frame iterator. Safe to call twice."""
        ws, self._ws = self._ws, None
        reader, self._reader = self._reader, None

        if ws is not None and not ws.closed:
            try:
                await ws.close()
            except (aiohttp.ClientError, ConnectionError) as e:
                logger.warning(
                    "Error while closing realtime connection",
                    extra={"error": str(e)},
                )
        if reader is not None and not reader.done():
            reader.cancel()
            try:
                await reader
            except asyncio.CancelledError:
                pass
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

        self._queue.put_nowait(None)
        if ws is not None:
            logger.info("Realtime connection closed", extra={"url": self._url})


__all__: list[str] = [
    "HandlerRealtimeWebSocket",
    "classify_payload",
    "decode_rta_message",
]
