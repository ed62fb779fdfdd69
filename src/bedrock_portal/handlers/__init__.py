# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Concrete transports and identity providers.

Exports:
    HandlerDirectoryHttp: Xbox Live REST client (httpx)
    HandlerRealtimeWebSocket: Xbox Live RTA websocket transport (aiohttp)
    StaticIdentityProvider: Fixed XSTS token pair, optionally from env
"""

from bedrock_portal.handlers.handler_directory_http import HandlerDirectoryHttp
from bedrock_portal.handlers.handler_realtime_ws import (
    HandlerRealtimeWebSocket,
    classify_payload,
    decode_rta_message,
)
from bedrock_portal.handlers.handler_static_identity import StaticIdentityProvider

__all__: list[str] = [
    "HandlerDirectoryHttp",
    "HandlerRealtimeWebSocket",
    "StaticIdentityProvider",
    "classify_payload",
    "decode_rta_message",
]
