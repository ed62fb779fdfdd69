# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory HTTP Handler - Xbox Live REST client using httpx async client.

Implements ``ProtocolDirectoryClient`` (sessions, activity, invites,
profiles) and ``ProtocolSocialClient`` (followers, add friend) against
the Xbox Live REST services.

Error Mapping:
    - httpx.TimeoutException -> PortalTimeoutError
    - httpx.HTTPError (connect, protocol) -> PortalConnectionError
    - 401 / 403 -> PortalAuthenticationError
    - any other non-2xx -> DirectoryRequestError (status_code in context)

Every request carries a fresh correlation id that is attached to the
raised error and to the debug log line for the request.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional
from uuid import UUID, uuid4

import httpx

from bedrock_portal.constants import (
    PEOPLEHUB_URL,
    PROFILE_URL,
    SERVICE_CONFIG_ID,
    SESSION_DIRECTORY_URL,
    SESSION_TEMPLATE_NAME,
    SOCIAL_URL,
    TITLE_ID,
)
from bedrock_portal.enums import EnumPortalTransportType
from bedrock_portal.errors import (
    DirectoryRequestError,
    ModelPortalErrorContext,
    PortalAuthenticationError,
    PortalConnectionError,
    PortalTimeoutError,
    ProfileResolutionError,
)
from bedrock_portal.models import ModelPerson, ModelProfile, ModelSessionRecord
from bedrock_portal.protocols import ProtocolIdentityProvider

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 30.0

_SESSION_CONTRACT_VERSION: str = "107"
_PROFILE_CONTRACT_VERSION: str = "2"
_PEOPLEHUB_CONTRACT_VERSION: str = "5"
_SOCIAL_CONTRACT_VERSION: str = "2"

# XUIDs are 16 decimal digits; anything else is treated as a gamertag.
_XUID_PATTERN = re.compile(r"^\d{16}$")


def profile_target(identifier: str) -> str:
    """Return the profile service user selector for ``identifier``.

    >>> profile_target("me")
    'me'
    >>> profile_target("2535400000000001")
    'xuid(2535400000000001)'
    >>> profile_target("Steve")
    'gt(Steve)'
    """
    if identifier == "me":
        return "me"
    if _XUID_PATTERN.match(identifier):
        return f"xuid({identifier})"
    return f"gt({identifier})"


class HandlerDirectoryHttp:
    """Xbox Live REST client for the session directory and social services.

    The underlying ``httpx.AsyncClient`` is created lazily on first use, or
    supplied by the caller (tests pass one with ``httpx.MockTransport``).
    A caller-supplied client is never closed by ``shutdown()``.
    """

    def __init__(
        self,
        identity_provider: ProtocolIdentityProvider,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._identity_provider = identity_provider
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def initialize(self) -> None:
        """Create the HTTP client if none was supplied."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
            self._owns_client = True
            logger.info(
                "HandlerDirectoryHttp initialized",
                extra={"timeout_seconds": self._timeout},
            )

    async def shutdown(self) -> None:
        """Close the HTTP client if this handler created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("HandlerDirectoryHttp shutdown complete")

    def _session_url(self, session_name: str) -> str:
        return (
            f"{SESSION_DIRECTORY_URL}/serviceconfigs/{SERVICE_CONFIG_ID}"
            f"/sessionTemplates/{SESSION_TEMPLATE_NAME}/sessions/{session_name}"
        )

    def _session_ref(self, session_name: str) -> dict[str, str]:
        return {
            "scid": SERVICE_CONFIG_ID,
            "templateName": SESSION_TEMPLATE_NAME,
            "name": session_name,
        }

    async def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        contract_version: str,
        json_body: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one authorized request and map failures to portal errors."""
        correlation_id: UUID = uuid4()
        ctx = ModelPortalErrorContext(
            transport_type=EnumPortalTransportType.HTTP,
            operation=operation,
            target_name=url,
            correlation_id=correlation_id,
        )

        authorization = await self._identity_provider.authenticate()
        headers = {
            "Authorization": authorization.authorization_header(),
            "x-xbl-contract-version": contract_version,
            "Accept-Language": "en-US",
        }

        if self._client is None:
            await self.initialize()
        assert self._client is not None

        logger.debug(
            "Directory request %s %s (correlation_id=%s)",
            method,
            operation,
            correlation_id,
        )
        try:
            response = await self._client.request(
                method, url, headers=headers, json=json_body
            )
        except httpx.TimeoutException as e:
            raise PortalTimeoutError(
                f"{operation} timed out after {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            ) from e
        except httpx.HTTPError as e:
            raise PortalConnectionError(
                f"HTTP error during {operation}: {type(e).__name__}", context=ctx
            ) from e

        if response.status_code in (401, 403):
            raise PortalAuthenticationError(
                f"{operation} was rejected with status {response.status_code}",
                context=ctx,
                status_code=response.status_code,
            )
        if response.is_error:
            raise DirectoryRequestError(
                f"{operation} failed with status {response.status_code}",
                context=ctx,
                status_code=response.status_code,
            )
        return response

    async def update_session(self, session_name: str, payload: dict[str, Any]) -> None:
        await self._request(
            "PUT",
            self._session_url(session_name),
            operation="update_session",
            contract_version=_SESSION_CONTRACT_VERSION,
            json_body=payload,
        )

    async def get_session(self, session_name: str) -> ModelSessionRecord:
        response = await self._request(
            "GET",
            self._session_url(session_name),
            operation="get_session",
            contract_version=_SESSION_CONTRACT_VERSION,
        )
        return ModelSessionRecord.model_validate(response.json())

    async def set_activity(self, session_name: str) -> None:
        await self._request(
            "POST",
            f"{SESSION_DIRECTORY_URL}/handles",
            operation="set_activity",
            contract_version=_SESSION_CONTRACT_VERSION,
            json_body={
                "version": 1,
                "type": "activity",
                "sessionRef": self._session_ref(session_name),
            },
        )

    async def leave_session(self, session_name: str) -> None:
        await self._request(
            "DELETE",
            f"{self._session_url(session_name)}/members/me",
            operation="leave_session",
            contract_version=_SESSION_CONTRACT_VERSION,
        )

    async def send_invite(self, session_name: str, member_id: str) -> None:
        await self._request(
            "POST",
            f"{SESSION_DIRECTORY_URL}/handles",
            operation="send_invite",
            contract_version=_SESSION_CONTRACT_VERSION,
            json_body={
                "version": 1,
                "type": "invite",
                "sessionRef": self._session_ref(session_name),
                "invitedXuid": member_id,
                "inviteAttributes": {"titleId": TITLE_ID},
            },
        )

    async def update_member_count(self, session_name: str, count: int) -> None:
        await self.update_session(
            session_name,
            {"properties": {"custom": {"MemberCount": int(count)}}},
        )

    async def get_profile(self, identifier: str) -> ModelProfile:
        """Resolve ``"me"``, a gamertag or a member id.

        Raises:
            ProfileResolutionError: If the response carries no profile.
        """
        response = await self._request(
            "GET",
            f"{PROFILE_URL}/users/{profile_target(identifier)}/profile/settings"
            "?settings=Gamertag",
            operation="get_profile",
            contract_version=_PROFILE_CONTRACT_VERSION,
        )
        body = response.json()
        users = body.get("profileUsers") if isinstance(body, dict) else None
        if not users or not isinstance(users[0], dict) or not users[0].get("id"):
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.HTTP,
                operation="get_profile",
                target_name=identifier,
            )
            raise ProfileResolutionError(
                f"No profile returned for identifier: {identifier}", context=ctx
            )

        user = users[0]
        gamertag = ""
        for setting in user.get("settings", []):
            if isinstance(setting, dict) and setting.get("id") == "Gamertag":
                gamertag = str(setting.get("value", ""))
                break
        return ModelProfile(member_id=str(user["id"]), gamertag=gamertag)

    async def get_followers(self) -> list[ModelPerson]:
        """Return the people following the authenticated identity."""
        response = await self._request(
            "GET",
            f"{PEOPLEHUB_URL}/users/me/people/followers",
            operation="get_followers",
            contract_version=_PEOPLEHUB_CONTRACT_VERSION,
        )
        body = response.json()
        people = body.get("people", []) if isinstance(body, dict) else []
        return [ModelPerson.model_validate(person) for person in people]

    async def add_friend(self, member_id: str) -> None:
        """Follow ``member_id`` as the authenticated identity."""
        await self._request(
            "PUT",
            f"{SOCIAL_URL}/users/me/people/xuid({member_id})",
            operation="add_friend",
            contract_version=_SOCIAL_CONTRACT_VERSION,
        )


__all__: list[str] = ["HandlerDirectoryHttp", "profile_target"]
