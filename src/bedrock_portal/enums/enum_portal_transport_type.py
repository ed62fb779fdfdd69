# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal Transport Type Enumeration.

Defines the transport types the portal talks to. Used for error context
and log extras.
"""

from enum import Enum


class EnumPortalTransportType(str, Enum):
    """Transport types used by portal components.

    Attributes:
        HTTP: Directory service REST transport
        REALTIME: Realtime subscription (websocket) transport
        IDENTITY: Identity / token provider
        RUNTIME: Portal internal runtime (config, modules, reconciler)
    """

    HTTP = "http"
    REALTIME = "realtime"
    IDENTITY = "identity"
    RUNTIME = "runtime"


__all__ = ["EnumPortalTransportType"]
