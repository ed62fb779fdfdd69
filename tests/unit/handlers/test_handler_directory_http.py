# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for HandlerDirectoryHttp against httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from bedrock_portal.errors import (
    DirectoryRequestError,
    PortalAuthenticationError,
    PortalConnectionError,
    PortalTimeoutError,
    ProfileResolutionError,
)
from bedrock_portal.handlers.handler_directory_http import (
    HandlerDirectoryHttp,
    profile_target,
)
from tests.conftest import assert_has_async_methods
from tests.helpers import FakeIdentityProvider

SESSION_URL = (
    "https://sessiondirectory.xboxlive.com/serviceconfigs/"
    "4fc10100-5f7a-4470-899b-280835760c07/sessionTemplates/MinecraftLobby/sessions/abc"
)

RequestLog = list[httpx.Request]


def make_handler(
    respond: Callable[[httpx.Request], httpx.Response],
) -> tuple[HandlerDirectoryHttp, RequestLog]:
    requests: RequestLog = []

    def transport_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return respond(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(transport_handler))
    return HandlerDirectoryHttp(FakeIdentityProvider(), client=client), requests


def test_profile_target_selectors() -> None:
    assert profile_target("me") == "me"
    assert profile_target("2535400000000001") == "xuid(2535400000000001)"
    assert profile_target("Steve") == "gt(Steve)"
    assert profile_target("12345") == "gt(12345)"


def test_handler_implements_directory_and_social_operations() -> None:
    handler = HandlerDirectoryHttp(FakeIdentityProvider())

    assert_has_async_methods(
        handler,
        [
            "update_session",
            "get_session",
            "set_activity",
            "leave_session",
            "get_profile",
            "send_invite",
            "update_member_count",
            "get_followers",
            "add_friend",
        ],
        protocol_name="HandlerDirectoryHttp",
    )


class TestSessionRequests:
    @pytest.mark.asyncio
    async def test_update_session_puts_body_with_headers(self) -> None:
        handler, requests = make_handler(lambda r: httpx.Response(200, json={}))

        await handler.update_session("abc", {"properties": {"custom": {}}})

        request = requests[0]
        assert request.method == "PUT"
        assert str(request.url) == SESSION_URL
        assert request.headers["Authorization"] == "XBL3.0 x=uhs-0001;token-0001"
        assert request.headers["x-xbl-contract-version"] == "107"
        assert json.loads(request.content) == {"properties": {"custom": {}}}

    @pytest.mark.asyncio
    async def test_get_session_keeps_unknown_fields(self) -> None:
        body = {
            "properties": {"system": {"turn": []}},
            "members": {"0": {"constants": {"system": {"xuid": "1"}}}},
            "correlationId": "abc-123",
        }
        handler, _ = make_handler(lambda r: httpx.Response(200, json=body))

        record = await handler.get_session("abc")

        assert record.properties == {"system": {"turn": []}}
        assert [m.member_id for m in record.member_list()] == ["1"]
        assert record.model_dump()["correlationId"] == "abc-123"

    @pytest.mark.asyncio
    async def test_set_activity_and_invite_post_handles(self) -> None:
        handler, requests = make_handler(lambda r: httpx.Response(201, json={}))

        await handler.set_activity("abc")
        await handler.send_invite("abc", "2535400000000042")

        activity = json.loads(requests[0].content)
        invite = json.loads(requests[1].content)
        assert str(requests[0].url) == "https://sessiondirectory.xboxlive.com/handles"
        assert activity["type"] == "activity"
        assert activity["sessionRef"]["name"] == "abc"
        assert invite["type"] == "invite"
        assert invite["invitedXuid"] == "2535400000000042"

    @pytest.mark.asyncio
    async def test_leave_session_deletes_own_membership(self) -> None:
        handler, requests = make_handler(lambda r: httpx.Response(204))

        await handler.leave_session("abc")

        assert requests[0].method == "DELETE"
        assert str(requests[0].url) == f"{SESSION_URL}/members/me"

    @pytest.mark.asyncio
    async def test_update_member_count_writes_custom_property(self) -> None:
        handler, requests = make_handler(lambda r: httpx.Response(200, json={}))

        await handler.update_member_count("abc", 5)

        assert json.loads(requests[0].content) == {
            "properties": {"custom": {"MemberCount": 5}}
        }


class TestProfileAndSocial:
    @pytest.mark.asyncio
    async def test_get_profile_parses_gamertag(self) -> None:
        body = {
            "profileUsers": [
                {
                    "id": "2535400000000042",
                    "settings": [{"id": "Gamertag", "value": "Steve"}],
                }
            ]
        }
        handler, requests = make_handler(lambda r: httpx.Response(200, json=body))

        profile = await handler.get_profile("Steve")

        assert profile.member_id == "2535400000000042"
        assert profile.gamertag == "Steve"
        assert requests[0].url.path == "/users/gt(Steve)/profile/settings"
        assert requests[0].url.params["settings"] == "Gamertag"

    @pytest.mark.asyncio
    async def test_get_profile_without_users_raises(self) -> None:
        handler, _ = make_handler(
            lambda r: httpx.Response(200, json={"profileUsers": []})
        )

        with pytest.raises(ProfileResolutionError):
            await handler.get_profile("Nobody")

    @pytest.mark.asyncio
    async def test_get_followers_and_add_friend(self) -> None:
        body = {
            "people": [
                {"xuid": "1", "gamertag": "A", "isFollowingCaller": True},
                {
                    "xuid": "2",
                    "gamertag": "B",
                    "isFollowingCaller": True,
                    "isFollowedByCaller": True,
                },
            ]
        }
        handler, requests = make_handler(lambda r: httpx.Response(200, json=body))

        followers = await handler.get_followers()
        await handler.add_friend("1")

        assert [(p.member_id, p.is_followed_by_caller) for p in followers] == [
            ("1", False),
            ("2", True),
        ]
        assert requests[1].method == "PUT"
        assert str(requests[1].url) == (
            "https://social.xboxlive.com/users/me/people/xuid(1)"
        )


class TestErrorMapping:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_auth_statuses(self, status: int) -> None:
        handler, _ = make_handler(lambda r: httpx.Response(status))

        with pytest.raises(PortalAuthenticationError) as exc_info:
            await handler.get_session("abc")

        assert exc_info.value.correlation_id is not None

    @pytest.mark.asyncio
    async def test_other_error_status_carries_status_code(self) -> None:
        handler, _ = make_handler(lambda r: httpx.Response(412))

        with pytest.raises(DirectoryRequestError) as exc_info:
            await handler.update_session("abc", {})

        assert exc_info.value.status_code == 412
        assert exc_info.value.context["operation"] == "update_session"

    @pytest.mark.asyncio
    async def test_timeout_mapped(self) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        handler, _ = make_handler(respond)

        with pytest.raises(PortalTimeoutError):
            await handler.get_session("abc")

    @pytest.mark.asyncio
    async def test_connect_error_mapped(self) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        handler, _ = make_handler(respond)

        with pytest.raises(PortalConnectionError):
            await handler.get_session("abc")


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_owned_client_created_and_closed(self) -> None:
        handler = HandlerDirectoryHttp(FakeIdentityProvider())

        await handler.initialize()
        assert handler._client is not None

        await handler.shutdown()
        assert handler._client is None

    @pytest.mark.asyncio
    async def test_supplied_client_not_closed(self) -> None:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200))
        )
        handler = HandlerDirectoryHttp(FakeIdentityProvider(), client=client)

        await handler.shutdown()

        assert not client.is_closed
        await client.aclose()
