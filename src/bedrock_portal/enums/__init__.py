# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bedrock Portal Enumerations Module.

Exports:
    EnumJoinability: Session visibility policy
    EnumMembershipState: Player membership state (JOINED, LEFT)
    EnumModuleStatus: Module lifecycle status (IDLE, RUNNING, STOPPED, FAILED)
    EnumPortalEvent: Public domain event names
    EnumPortalTransportType: Transport types for error context
    EnumRealtimeEventCategory: Realtime frame categories
"""

from bedrock_portal.enums.enum_joinability import EnumJoinability
from bedrock_portal.enums.enum_membership_state import EnumMembershipState
from bedrock_portal.enums.enum_module_status import EnumModuleStatus
from bedrock_portal.enums.enum_portal_event import EnumPortalEvent
from bedrock_portal.enums.enum_portal_transport_type import EnumPortalTransportType
from bedrock_portal.enums.enum_realtime_event_category import (
    EnumRealtimeEventCategory,
)

__all__: list[str] = [
    "EnumJoinability",
    "EnumMembershipState",
    "EnumModuleStatus",
    "EnumPortalEvent",
    "EnumPortalTransportType",
    "EnumRealtimeEventCategory",
]
