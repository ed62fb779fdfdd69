# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for SessionLifecycleManager."""

from __future__ import annotations

from typing import Any

import pytest

from bedrock_portal.errors import (
    DirectoryRequestError,
    PortalError,
    ProfileResolutionError,
    SessionOwnerMissingError,
)
from bedrock_portal.models import ModelPortalConfig
from bedrock_portal.runtime.portal_host import PortalHost
from bedrock_portal.runtime.session_lifecycle import (
    SessionLifecycleManager,
    generate_raknet_guid,
)
from tests.helpers import (
    CONNECTION_ID,
    HOST_XUID,
    SERVER_ASSIGNED_SYSTEM,
    SUBSCRIPTION_ID,
    FakeDirectoryClient,
    FakeIdentityProvider,
    FakeRealtimeTransport,
)


@pytest.fixture
def host(
    identity_provider: FakeIdentityProvider,
    directory: FakeDirectoryClient,
    transport: FakeRealtimeTransport,
) -> PortalHost:
    return PortalHost(identity_provider, directory, transport)


@pytest.fixture
def lifecycle(
    host: PortalHost, portal_options: dict[str, Any]
) -> SessionLifecycleManager:
    return SessionLifecycleManager(ModelPortalConfig.model_validate(portal_options), host)


class TestBuildSessionBody:
    def test_body_before_connect_raises_owner_missing(
        self, lifecycle: SessionLifecycleManager
    ) -> None:
        with pytest.raises(SessionOwnerMissingError, match="No session owner"):
            lifecycle.build_session_body()

    @pytest.mark.asyncio
    async def test_body_carries_redirect_and_joinability(
        self, host: PortalHost, lifecycle: SessionLifecycleManager
    ) -> None:
        await host.connect()

        body = lifecycle.build_session_body()

        system = body["properties"]["system"]
        custom = body["properties"]["custom"]
        assert system["joinRestriction"] == "followed"
        assert system["readRestriction"] == "followed"
        assert custom["BroadcastSetting"] == 3
        assert custom["Joinability"] == "friends_of_friends"
        assert custom["ownerId"] == HOST_XUID
        assert custom["MemberCount"] == 0
        assert custom["MaxMemberCount"] == 10
        connection = custom["SupportedConnections"][0]
        assert connection["ConnectionType"] == 6
        assert connection["HostIpAddress"] == "203.0.113.5"
        assert connection["HostPort"] == 19132

        member = body["members"]["me"]
        assert member["constants"]["system"]["xuid"] == HOST_XUID
        assert member["properties"]["system"]["connection"] == CONNECTION_ID
        assert member["properties"]["system"]["subscription"]["id"] == SUBSCRIPTION_ID

    @pytest.mark.asyncio
    async def test_invite_only_uses_local_restriction(
        self, host: PortalHost
    ) -> None:
        config = ModelPortalConfig(address="203.0.113.5", joinability="invite_only")
        lifecycle = SessionLifecycleManager(config, host)
        await host.connect()

        body = lifecycle.build_session_body()

        assert body["properties"]["system"]["joinRestriction"] == "local"
        assert body["properties"]["custom"]["BroadcastSetting"] == 1
        assert body["properties"]["custom"]["Joinability"] == "invite_only"


class TestTwoPhasePublish:
    @pytest.mark.asyncio
    async def test_publish_order_and_republished_properties(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        await host.connect()

        record = await lifecycle.start()

        session = lifecycle.session
        assert session is not None
        publish_calls = [c for c in directory.calls if c[0] != "get_profile"]
        assert [c[0] for c in publish_calls] == [
            "update_session",
            "set_activity",
            "get_session",
            "update_session",
        ]
        assert all(c[1] == session.name for c in publish_calls)
        republished = publish_calls[3][2]
        assert republished == {"properties": record.properties}
        for key, value in SERVER_ASSIGNED_SYSTEM.items():
            assert republished["properties"]["system"][key] == value

    @pytest.mark.asyncio
    async def test_session_name_stable_within_cycle(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        await host.connect()
        await lifecycle.start()
        session = lifecycle.session
        assert session is not None

        await lifecycle.update_member_count(4)
        await lifecycle.get_session()
        await lifecycle.end()

        names = {c[1] for c in directory.calls if c[0] != "get_profile"}
        assert names == {session.name}
        assert session.subscription_id == SUBSCRIPTION_ID

    @pytest.mark.asyncio
    async def test_each_start_uses_fresh_name(
        self, host: PortalHost, lifecycle: SessionLifecycleManager
    ) -> None:
        await host.connect()
        await lifecycle.start()
        first = lifecycle.session
        await lifecycle.start()

        assert first is not None and lifecycle.session is not None
        assert first.name != lifecycle.session.name

    @pytest.mark.asyncio
    async def test_publish_failure_propagates(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        await host.connect()
        directory.errors["set_activity"] = DirectoryRequestError(
            "rejected", status_code=400
        )

        with pytest.raises(DirectoryRequestError):
            await lifecycle.start()

        assert "get_session" not in directory.operations()


class TestSessionOperations:
    @pytest.mark.asyncio
    async def test_operations_before_start_raise(
        self, lifecycle: SessionLifecycleManager
    ) -> None:
        with pytest.raises(PortalError, match="No active session"):
            await lifecycle.get_session()
        with pytest.raises(PortalError, match="No active session"):
            await lifecycle.invite_player("Steve")

    @pytest.mark.asyncio
    async def test_end_swallows_leave_failure(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        await host.connect()
        await lifecycle.start()
        directory.errors["leave_session"] = DirectoryRequestError(
            "gone", status_code=404
        )

        await lifecycle.end()

        assert directory.operations()[-1] == "leave_session"

    @pytest.mark.asyncio
    async def test_invite_resolves_gamertag(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        directory.add_profile("2535400000000042", "Steve")
        await host.connect()
        await lifecycle.start()
        session = lifecycle.session
        assert session is not None

        member_id = await lifecycle.invite_player("Steve")

        assert member_id == "2535400000000042"
        assert directory.calls[-1] == ("send_invite", session.name, "2535400000000042")

    @pytest.mark.asyncio
    async def test_invite_unknown_identifier_raises_resolution_error(
        self,
        host: PortalHost,
        lifecycle: SessionLifecycleManager,
        directory: FakeDirectoryClient,
    ) -> None:
        await host.connect()
        await lifecycle.start()

        with pytest.raises(
            ProfileResolutionError,
            match="Failed to get profile for identifier: Nobody",
        ):
            await lifecycle.invite_player("Nobody")

        assert "send_invite" not in directory.operations()


def test_raknet_guid_is_twenty_digits() -> None:
    guid = generate_raknet_guid()

    assert len(guid) == 20
    assert guid.isdigit()
