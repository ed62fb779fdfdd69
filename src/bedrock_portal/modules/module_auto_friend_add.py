# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Auto friend add module.

Periodically follows back everyone who follows the host account, so they
can see the session under friends or friends-of-friends joinability.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bedrock_portal.errors import PortalError
from bedrock_portal.models import ModelAutoFriendAddOptions, ModelPerson
from bedrock_portal.modules.portal_module_base import PortalModuleBase
from bedrock_portal.protocols import ProtocolSocialClient

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal

logger = logging.getLogger(__name__)


class ModuleAutoFriendAdd(PortalModuleBase[ModelAutoFriendAddOptions]):
    """Follow back followers, optionally inviting them."""

    name = "autoFriendAdd"
    description = "Automatically adds followers as friends"
    options_model = ModelAutoFriendAddOptions

    async def run(self, portal: BedrockPortal) -> None:
        self._stop_event.clear()
        social = portal.directory
        if not isinstance(social, ProtocolSocialClient):
            logger.warning(
                "Directory client has no social operations, module idle",
                extra={"module": self.name},
            )
            return

        while not self.stopped:
            try:
                await self.check_followers(portal, social)
            except PortalError as e:
                logger.warning(
                    "Follower check failed",
                    extra={"module": self.name, "error": str(e)},
                )
            if await self.wait_stopped(self.options.check_interval):
                break

    async def check_followers(
        self, portal: BedrockPortal, social: ProtocolSocialClient
    ) -> list[ModelPerson]:
        """Run one follow-back pass. Returns the people added."""
        followers = await social.get_followers()
        pending = [
            person
            for person in followers
            if person.is_following_caller and not person.is_followed_by_caller
        ][: self.options.add_limit]

        for person in pending:
            await social.add_friend(person.member_id)
            logger.info(
                "Added follower as friend",
                extra={"member_id": person.member_id, "gamertag": person.gamertag},
            )
            if self.options.invite_on_add:
                await portal.invite_player(person.member_id)

        return pending


__all__: list[str] = ["ModuleAutoFriendAdd"]
