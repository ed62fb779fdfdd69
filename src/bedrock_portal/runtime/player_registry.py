# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Player registry: member id to player state.

Single-writer discipline: only the event reconciler calls ``apply_diff``
and ``clear``. Everyone else reads through ``snapshot()``, which returns
a read-only copy that later updates do not change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple, Optional

from bedrock_portal.enums import EnumMembershipState
from bedrock_portal.models import ModelPlayer, ModelSessionMember

logger = logging.getLogger(__name__)


class MembershipDiff(NamedTuple):
    """Joins and leaves computed from one member list."""

    joined: list[ModelPlayer]
    left: list[ModelPlayer]

    @property
    def is_empty(self) -> bool:
        return not self.joined and not self.left


class PlayerRegistry:
    """Current session members keyed by member id."""

    def __init__(self) -> None:
        self._players: dict[str, ModelPlayer] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._players

    def get(self, member_id: str) -> Optional[ModelPlayer]:
        return self._players.get(member_id)

    def member_ids(self) -> list[str]:
        """Member ids in join order."""
        return list(self._players)

    def snapshot(self) -> Mapping[str, ModelPlayer]:
        """Read-only copy of the current members."""
        return MappingProxyType(dict(self._players))

    def compute_diff(
        self,
        members: Iterable[ModelSessionMember],
        exclude: Iterable[str] = (),
    ) -> MembershipDiff:
        """Compare ``members`` against the registry without mutating it.

        Args:
            members: The full current member list from the directory.
            exclude: Member ids never tracked (the host itself).

        Returns:
            Joins in member-list order, leaves in registry join order.
        """
        excluded = set(exclude)
        current: dict[str, ModelSessionMember] = {}
        for member in members:
            if member.member_id not in excluded:
                current.setdefault(member.member_id, member)

        joined = [
            ModelPlayer(
                member_id=member.member_id,
                display_name=member.gamertag,
                membership_state=EnumMembershipState.JOINED,
            )
            for member_id, member in current.items()
            if member_id not in self._players
        ]
        left = [
            player.model_copy(update={"membership_state": EnumMembershipState.LEFT})
            for member_id, player in self._players.items()
            if member_id not in current
        ]
        return MembershipDiff(joined=joined, left=left)

    def apply_diff(self, diff: MembershipDiff) -> None:
        """Apply a diff computed by ``compute_diff`` as one update.

        The diff is checked against the registry before anything changes,
        so a stale diff leaves the registry untouched.

        Raises:
            ValueError: If a join is already present or a leave is absent.
        """
        for player in diff.joined:
            if player.member_id in self._players:
                raise ValueError(f"Member {player.member_id} already registered")
        for player in diff.left:
            if player.member_id not in self._players:
                raise ValueError(f"Member {player.member_id} is not registered")

        for player in diff.left:
            del self._players[player.member_id]
        for player in diff.joined:
            self._players[player.member_id] = player

        logger.debug(
            "Registry updated",
            extra={
                "joined": len(diff.joined),
                "left": len(diff.left),
                "members": len(self._players),
            },
        )

    def clear(self) -> None:
        self._players.clear()


__all__: list[str] = ["MembershipDiff", "PlayerRegistry"]
