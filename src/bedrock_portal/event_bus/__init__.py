# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal event channel."""

from bedrock_portal.event_bus.portal_event_bus import PortalEventBus, PortalEventHandler

__all__: list[str] = ["PortalEventBus", "PortalEventHandler"]
