# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bundled portal modules.

BUNDLED_MODULES maps each module name to its class, so the CLI can
enable modules by name.
"""

from bedrock_portal.modules.module_auto_friend_add import ModuleAutoFriendAdd
from bedrock_portal.modules.module_invite_on_message import ModuleInviteOnMessage
from bedrock_portal.modules.portal_module_base import PortalModuleBase

BUNDLED_MODULES: dict[str, type[PortalModuleBase]] = {
    ModuleAutoFriendAdd.name: ModuleAutoFriendAdd,
    ModuleInviteOnMessage.name: ModuleInviteOnMessage,
}

__all__: list[str] = [
    "BUNDLED_MODULES",
    "ModuleAutoFriendAdd",
    "ModuleInviteOnMessage",
    "PortalModuleBase",
]
