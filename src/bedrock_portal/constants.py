# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Directory service constants and the joinability mapping table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from bedrock_portal.enums import EnumJoinability
from bedrock_portal.errors import PortalConfigurationError
from bedrock_portal.models.model_joinability_mapping import ModelJoinabilityMapping

# Minecraft service config / title identifiers on Xbox Live.
SERVICE_CONFIG_ID: Final[str] = "4fc10100-5f7a-4470-899b-280835760c07"
SESSION_TEMPLATE_NAME: Final[str] = "MinecraftLobby"
TITLE_ID: Final[str] = "896928775"
MINECRAFT_PROTOCOL_VERSION: Final[int] = 622

SESSION_DIRECTORY_URL: Final[str] = "https://sessiondirectory.xboxlive.com"
PROFILE_URL: Final[str] = "https://profile.xboxlive.com"
PEOPLEHUB_URL: Final[str] = "https://peoplehub.xboxlive.com"
SOCIAL_URL: Final[str] = "https://social.xboxlive.com"
REALTIME_URL: Final[str] = "wss://rta.xboxlive.com/connect"
REALTIME_SUBPROTOCOL: Final[str] = "rta.xboxlive.com.V2"

# Subscribing to this resource yields the connection id used in the member block.
CONNECTIONS_RESOURCE: Final[str] = "https://sessiondirectory.xboxlive.com/connections/"

# Per-user notification resources, formatted with the host XUID.
FRIENDS_RESOURCE_TEMPLATE: Final[str] = "https://social.xboxlive.com/users/xuid({xuid})/friends"
MESSAGE_INBOX_RESOURCE_TEMPLATE: Final[str] = (
    "https://xblmessaging.xboxlive.com/network/xbox/users/xuid({xuid})/inbox"
)

DEFAULT_PORT: Final[int] = 19132
DEFAULT_WORLD_TYPE: Final[str] = "Survival"
# ConnectionType 6 is a direct UDP (RakNet) address/port redirect.
REDIRECT_CONNECTION_TYPE: Final[int] = 6

_JOINABILITY_TABLE: dict[EnumJoinability, ModelJoinabilityMapping] = {
    EnumJoinability.INVITE_ONLY: ModelJoinabilityMapping(
        join_restriction="local",
        broadcast_setting=1,
        joinability_label="invite_only",
    ),
    EnumJoinability.FRIENDS_ONLY: ModelJoinabilityMapping(
        join_restriction="followed",
        broadcast_setting=2,
        joinability_label="friends_only",
    ),
    EnumJoinability.FRIENDS_OF_FRIENDS: ModelJoinabilityMapping(
        join_restriction="followed",
        broadcast_setting=3,
        joinability_label="friends_of_friends",
    ),
}

_missing = [value.name for value in EnumJoinability if value not in _JOINABILITY_TABLE]
if _missing:
    raise RuntimeError(f"Joinability values without a mapping: {', '.join(_missing)}")

JOINABILITY_CONFIG: Final[MappingProxyType[EnumJoinability, ModelJoinabilityMapping]] = (
    MappingProxyType(_JOINABILITY_TABLE)
)


def resolve_joinability(value: object) -> ModelJoinabilityMapping:
    """Return the visibility triple for a joinability value.

    Raises:
        PortalConfigurationError: If ``value`` is not a known joinability.
    """
    try:
        joinability = EnumJoinability(value)
    except ValueError as e:
        raise PortalConfigurationError(
            "Invalid joinability - Expected one of "
            + ", ".join(member.value for member in EnumJoinability),
            joinability=str(value),
        ) from e
    return JOINABILITY_CONFIG[joinability]


def notification_resources(member_id: str) -> tuple[str, ...]:
    """Realtime resources carrying friend and chat notifications for ``member_id``."""
    return (
        FRIENDS_RESOURCE_TEMPLATE.format(xuid=member_id),
        MESSAGE_INBOX_RESOURCE_TEMPLATE.format(xuid=member_id),
    )


__all__: list[str] = [
    "CONNECTIONS_RESOURCE",
    "DEFAULT_PORT",
    "DEFAULT_WORLD_TYPE",
    "FRIENDS_RESOURCE_TEMPLATE",
    "JOINABILITY_CONFIG",
    "MESSAGE_INBOX_RESOURCE_TEMPLATE",
    "MINECRAFT_PROTOCOL_VERSION",
    "PEOPLEHUB_URL",
    "PROFILE_URL",
    "REALTIME_SUBPROTOCOL",
    "REALTIME_URL",
    "REDIRECT_CONNECTION_TYPE",
    "SERVICE_CONFIG_ID",
    "SESSION_DIRECTORY_URL",
    "SESSION_TEMPLATE_NAME",
    "SOCIAL_URL",
    "TITLE_ID",
    "notification_resources",
    "resolve_joinability",
]
