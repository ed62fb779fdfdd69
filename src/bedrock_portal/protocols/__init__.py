# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for the portal's external collaborators and modules."""

from bedrock_portal.protocols.protocol_directory_client import ProtocolDirectoryClient
from bedrock_portal.protocols.protocol_identity_provider import (
    ProtocolIdentityProvider,
)
from bedrock_portal.protocols.protocol_portal_module import ProtocolPortalModule
from bedrock_portal.protocols.protocol_realtime_transport import (
    ProtocolRealtimeTransport,
)
from bedrock_portal.protocols.protocol_social_client import ProtocolSocialClient

__all__: list[str] = [
    "ProtocolDirectoryClient",
    "ProtocolIdentityProvider",
    "ProtocolPortalModule",
    "ProtocolRealtimeTransport",
    "ProtocolSocialClient",
]
