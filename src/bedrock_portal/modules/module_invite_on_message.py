# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invite on message module.

Invites whoever messages the host account with the configured command.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from bedrock_portal.enums import EnumPortalEvent
from bedrock_portal.errors import PortalError
from bedrock_portal.models import ModelChatMessage, ModelInviteOnMessageOptions
from bedrock_portal.modules.portal_module_base import PortalModuleBase

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal

logger = logging.getLogger(__name__)


class ModuleInviteOnMessage(PortalModuleBase[ModelInviteOnMessageOptions]):
    """Answer a chat command with a session invite."""

    name = "inviteOnMessage"
    description = "Invites players who message the host with a command"
    options_model = ModelInviteOnMessageOptions

    def __init__(self) -> None:
        super().__init__()
        self._portal: Optional[BedrockPortal] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    async def run(self, portal: BedrockPortal) -> None:
        self._stop_event.clear()
        self._portal = portal
        self._unsubscribe = portal.on(EnumPortalEvent.MESSAGE_RECEIVED, self.on_message)

    async def on_message(self, message: ModelChatMessage) -> None:
        if self._portal is None or self.stopped:
            return
        if self.options.command.lower() not in message.text.lower():
            return
        try:
            await self._portal.invite_player(message.sender)
        except PortalError as e:
            logger.warning(
                "Failed to invite message sender",
                extra={"sender": message.sender, "error": str(e)},
            )
            return
        logger.info(
            "Invited message sender",
            extra={"sender": message.sender, "gamertag": message.sender_gamertag},
        )

    def stop(self) -> None:
        super().stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._portal = None


__all__: list[str] = ["ModuleInviteOnMessage"]
