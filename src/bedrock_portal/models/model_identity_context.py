# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identity context populated by ``PortalHost.connect()``.

Immutable once created. A new connect replaces the whole object; nothing
mutates it in place.
"""

from pydantic import BaseModel, ConfigDict, Field


class ModelIdentityContext(BaseModel):
    """Who owns the session and how the realtime connection is addressed.

    Attributes:
        profile_id: Host member id (XUID).
        display_name: Host gamertag.
        connection_id: Realtime connection id from the subscribe handshake.
        subscription_id: Realtime subscription id frames are keyed by.
        notification_subscription_ids: Subscriptions to the friends and
            message resources. Empty when the service refused them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    profile_id: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1)
    connection_id: str = Field(..., min_length=1)
    subscription_id: str = Field(..., min_length=1)
    notification_subscription_ids: tuple[str, ...] = Field(default=())

    def owned_subscription_ids(self) -> frozenset[str]:
        """Every subscription id whose frames belong to this portal."""
        return frozenset((self.subscription_id, *self.notification_subscription_ids))


__all__ = ["ModelIdentityContext"]
