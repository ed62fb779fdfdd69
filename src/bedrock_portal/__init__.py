# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bedrock Portal - advertise a Minecraft Bedrock server as an Xbox Live session.

Friends of the host account see the session in their game client and are
redirected to a fixed address and port when they join. This package
publishes the session, keeps it alive, tracks who joins and leaves, and
runs pluggable modules against it.

Key Components:
    - BedrockPortal: Public facade (start, end, invite, members, modules)
    - HandlerDirectoryHttp / HandlerRealtimeWebSocket: Xbox Live clients
    - PortalEventBus: Domain events (playerJoin, playerLeave, ...)
    - Bundled modules: ModuleAutoFriendAdd, ModuleInviteOnMessage
"""

from bedrock_portal._version import __version__
from bedrock_portal.enums import EnumJoinability, EnumPortalEvent
from bedrock_portal.handlers import (
    HandlerDirectoryHttp,
    HandlerRealtimeWebSocket,
    StaticIdentityProvider,
)
from bedrock_portal.modules import (
    ModuleAutoFriendAdd,
    ModuleInviteOnMessage,
    PortalModuleBase,
)
from bedrock_portal.runtime import BedrockPortal

__all__: list[str] = [
    "BedrockPortal",
    "EnumJoinability",
    "EnumPortalEvent",
    "HandlerDirectoryHttp",
    "HandlerRealtimeWebSocket",
    "ModuleAutoFriendAdd",
    "ModuleInviteOnMessage",
    "PortalModuleBase",
    "StaticIdentityProvider",
    "__version__",
]
