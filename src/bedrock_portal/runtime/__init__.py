# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal runtime: host, session lifecycle, reconciliation and modules."""

from bedrock_portal.runtime.event_reconciler import EventReconciler
from bedrock_portal.runtime.module_runtime import ModuleRuntime, validate_module
from bedrock_portal.runtime.player_registry import MembershipDiff, PlayerRegistry
from bedrock_portal.runtime.portal import BedrockPortal
from bedrock_portal.runtime.portal_config_loader import (
    build_portal_config,
    configure_logging,
    load_portal_config,
)
from bedrock_portal.runtime.portal_host import PortalHost
from bedrock_portal.runtime.session_lifecycle import (
    SessionLifecycleManager,
    generate_raknet_guid,
)

__all__: list[str] = [
    "BedrockPortal",
    "EventReconciler",
    "MembershipDiff",
    "ModuleRuntime",
    "PlayerRegistry",
    "PortalHost",
    "SessionLifecycleManager",
    "build_portal_config",
    "configure_logging",
    "generate_raknet_guid",
    "load_portal_config",
    "validate_module",
]
