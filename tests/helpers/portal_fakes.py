# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory fakes of the portal collaborators.

The fakes record every call in order so tests can assert on the exact
sequence of directory operations.
"""

from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator
from typing import Any, Optional

from pydantic import SecretStr

from bedrock_portal.enums import EnumRealtimeEventCategory
from bedrock_portal.errors import DirectoryRequestError, PortalConnectionError
from bedrock_portal.models import (
    ModelPerson,
    ModelProfile,
    ModelRealtimeFrame,
    ModelSessionRecord,
    ModelSubscribeResult,
    ModelXboxAuthorization,
)

HOST_XUID = "2535400000000001"
HOST_GAMERTAG = "PortalHost"
SUBSCRIPTION_ID = "7"
FRIENDS_SUBSCRIPTION_ID = "8"
INBOX_SUBSCRIPTION_ID = "9"
CONNECTION_ID = "conn-0001"

# Fields the directory adds on creation and echoes back on read.
SERVER_ASSIGNED_SYSTEM = {"turn": [], "matchmaking": {"clientResult": None}}


def member_entry(member_id: str, gamertag: str = "") -> dict[str, Any]:
    """Directory member entry as it appears in a member list."""
    entry: dict[str, Any] = {"constants": {"system": {"xuid": member_id}}}
    if gamertag:
        entry["gamertag"] = gamertag
    return entry


def members_block(*members: tuple[str, str]) -> dict[str, Any]:
    """Member list keyed by member index, as the directory sends it."""
    return {str(index): member_entry(*member) for index, member in enumerate(members)}


def members_frame(
    *members: tuple[str, str],
    subscription_id: str = SUBSCRIPTION_ID,
    sequence: int = 0,
) -> ModelRealtimeFrame:
    return ModelRealtimeFrame(
        subscription_id=subscription_id,
        category=EnumRealtimeEventCategory.SESSION_CHANGED,
        payload={"members": members_block(*members)},
        sequence=sequence,
    )


def shoulder_tap_frame(
    session_name: str, subscription_id: str = SUBSCRIPTION_ID
) -> ModelRealtimeFrame:
    return ModelRealtimeFrame(
        subscription_id=subscription_id,
        category=EnumRealtimeEventCategory.SESSION_CHANGED,
        payload={
            "shoulderTaps": [
                {
                    "resource": f"4fc10100-5f7a-4470-899b-280835760c07~MinecraftLobby~{session_name}",
                    "changeNumber": 3,
                    "branch": "b1",
                }
            ]
        },
    )


def message_frame(
    sender: str, text: str, subscription_id: str = SUBSCRIPTION_ID
) -> ModelRealtimeFrame:
    return ModelRealtimeFrame(
        subscription_id=subscription_id,
        category=EnumRealtimeEventCategory.MESSAGE,
        payload={
            "lastMessage": {
                "conversationId": "conv-1",
                "messageId": "msg-1",
                "sender": sender,
                "senderGamerTag": "Sender",
                "contentPayload": {
                    "content": {"parts": [{"contentType": "text", "text": text}]}
                },
            }
        },
    )


def friend_frame(
    *member_ids: str,
    added: bool = True,
    subscription_id: str = SUBSCRIPTION_ID,
) -> ModelRealtimeFrame:
    return ModelRealtimeFrame(
        subscription_id=subscription_id,
        category=(
            EnumRealtimeEventCategory.FRIEND_ADDED
            if added
            else EnumRealtimeEventCategory.FRIEND_REMOVED
        ),
        payload={
            "NotificationType": "Added" if added else "Deleted",
            "Xuids": list(member_ids),
        },
    )


class FakeIdentityProvider:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls = 0

    async def authenticate(self) -> ModelXboxAuthorization:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return ModelXboxAuthorization(
            user_hash=SecretStr("uhs-0001"), xsts_token=SecretStr("token-0001")
        )


class FakeDirectoryClient:
    """Session directory and social service backed by dicts."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.sessions: dict[str, dict[str, Any]] = {}
        self.members: dict[str, Any] = members_block((HOST_XUID, HOST_GAMERTAG))
        self.profiles: dict[str, ModelProfile] = {
            "me": ModelProfile(member_id=HOST_XUID, gamertag=HOST_GAMERTAG),
        }
        self.followers: list[ModelPerson] = []
        self.errors: dict[str, Exception] = {}

    def add_profile(self, member_id: str, gamertag: str) -> None:
        profile = ModelProfile(member_id=member_id, gamertag=gamertag)
        self.profiles[member_id] = profile
        self.profiles[gamertag] = profile

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        error = self.errors.get(operation)
        if error is not None:
            raise error

    async def update_session(self, session_name: str, payload: dict[str, Any]) -> None:
        self._record("update_session", session_name, copy.deepcopy(payload))
        stored = self.sessions.setdefault(session_name, {"properties": {}})
        if "properties" in payload:
            properties = copy.deepcopy(payload["properties"])
            properties.setdefault("system", {}).update(SERVER_ASSIGNED_SYSTEM)
            stored["properties"] = properties

    async def get_session(self, session_name: str) -> ModelSessionRecord:
        self._record("get_session", session_name)
        stored = self.sessions.get(session_name)
        if stored is None:
            raise DirectoryRequestError("Session not found", status_code=404)
        return ModelSessionRecord(
            properties=copy.deepcopy(stored["properties"]),
            members=copy.deepcopy(self.members),
        )

    async def set_activity(self, session_name: str) -> None:
        self._record("set_activity", session_name)

    async def leave_session(self, session_name: str) -> None:
        self._record("leave_session", session_name)

    async def get_profile(self, identifier: str) -> ModelProfile:
        self._record("get_profile", identifier)
        profile = self.profiles.get(identifier)
        if profile is None:
            raise DirectoryRequestError("Profile not found", status_code=404)
        return profile

    async def send_invite(self, session_name: str, member_id: str) -> None:
        self._record("send_invite", session_name, member_id)

    async def update_member_count(self, session_name: str, count: int) -> None:
        self._record("update_member_count", session_name, count)

    async def get_followers(self) -> list[ModelPerson]:
        self._record("get_followers")
        return list(self.followers)

    async def add_friend(self, member_id: str) -> None:
        self._record("add_friend", member_id)


class FakeRealtimeTransport:
    """Realtime transport whose frames are pushed by the test."""

    def __init__(
        self,
        subscription_id: str = SUBSCRIPTION_ID,
        connection_id: str = CONNECTION_ID,
    ) -> None:
        self.subscription_id = subscription_id
        self.connection_id = connection_id
        self.connect_error: Optional[Exception] = None
        self.connect_calls = 0
        self.destroy_calls = 0
        self.destroy_error: Optional[Exception] = None
        self.subscribed: list[str] = []
        self.rejected_resources: set[str] = set()
        self._queue: asyncio.Queue[Optional[ModelRealtimeFrame]] = asyncio.Queue()

    async def connect(self) -> None:
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error
        self._queue = asyncio.Queue()

    async def subscribe(self, resource: str) -> ModelSubscribeResult:
        if self.connect_calls == 0:
            raise PortalConnectionError("not connected")
        self.subscribed.append(resource)
        if resource in self.rejected_resources:
            raise PortalConnectionError(f"Subscribe to {resource} was rejected")
        if resource.endswith("/friends"):
            subscription_id = FRIENDS_SUBSCRIPTION_ID
        elif resource.endswith("/inbox"):
            subscription_id = INBOX_SUBSCRIPTION_ID
        else:
            subscription_id = self.subscription_id
        return ModelSubscribeResult(
            subscription_id=subscription_id,
            connection_id=self.connection_id,
        )

    async def frames(self) -> AsyncIterator[ModelRealtimeFrame]:
        queue = self._queue
        while True:
            frame = await queue.get()
            if frame is None:
                return
            yield frame

    async def destroy(self) -> None:
        self.destroy_calls += 1
        self._queue.put_nowait(None)
        if self.destroy_error is not None:
            raise self.destroy_error

    def push(self, frame: ModelRealtimeFrame) -> None:
        self._queue.put_nowait(frame)

    async def drain(self) -> None:
        """Yield to the loop until every pushed frame was consumed."""
        for _ in range(100):
            if self._queue.empty():
                break
            await asyncio.sleep(0)
        for _ in range(5):
            await asyncio.sleep(0)


__all__ = [
    "CONNECTION_ID",
    "FakeDirectoryClient",
    "FakeIdentityProvider",
    "FakeRealtimeTransport",
    "FRIENDS_SUBSCRIPTION_ID",
    "HOST_GAMERTAG",
    "HOST_XUID",
    "INBOX_SUBSCRIPTION_ID",
    "SERVER_ASSIGNED_SYSTEM",
    "SUBSCRIPTION_ID",
    "friend_frame",
    "member_entry",
    "members_block",
    "members_frame",
    "message_frame",
    "shoulder_tap_frame",
]
