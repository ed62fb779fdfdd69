# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for bedrock_portal tests."""

from __future__ import annotations

import inspect
from typing import Any

import pytest

from bedrock_portal.event_bus import PortalEventBus
from bedrock_portal.runtime.portal import BedrockPortal
from tests.helpers import (
    FakeDirectoryClient,
    FakeIdentityProvider,
    FakeRealtimeTransport,
)

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Protocol conformance is verified by checking for method presence and
    callability rather than isinstance checks against Protocol types.

    Example:
        >>> assert_has_methods(registry, ["get", "snapshot"], protocol_name="PlayerRegistry")
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


def assert_has_async_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required async methods."""
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        method = getattr(obj, method_name)
        assert callable(method), f"{name}.{method_name} must be callable"
        assert inspect.iscoroutinefunction(
            method
        ), f"{name}.{method_name} must be async (coroutine function)"


# =============================================================================
# Portal Fixtures
# =============================================================================


@pytest.fixture
def portal_options() -> dict[str, Any]:
    return {"address": "203.0.113.5", "port": 19132, "joinability": "FriendsOfFriends"}


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def directory() -> FakeDirectoryClient:
    return FakeDirectoryClient()


@pytest.fixture
def transport() -> FakeRealtimeTransport:
    return FakeRealtimeTransport()


@pytest.fixture
def event_bus() -> PortalEventBus:
    return PortalEventBus()


@pytest.fixture
def portal(
    identity_provider: FakeIdentityProvider,
    directory: FakeDirectoryClient,
    transport: FakeRealtimeTransport,
    event_bus: PortalEventBus,
    portal_options: dict[str, Any],
) -> BedrockPortal:
    """Portal wired to in-memory fakes. Not started."""
    return BedrockPortal(
        identity_provider,
        portal_options,
        directory=directory,
        transport=transport,
        event_bus=event_bus,
    )
