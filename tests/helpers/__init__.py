# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for bedrock_portal unit tests.

Available Utilities:
    Portal Fakes:
        - FakeIdentityProvider: Fixed XSTS authorization, optional failure
        - FakeDirectoryClient: Dict-backed directory recording every call
        - FakeRealtimeTransport: Realtime transport fed by the test
        - members_frame / shoulder_tap_frame / message_frame / friend_frame:
          Realtime frame builders
"""

from tests.helpers.portal_fakes import (
    CONNECTION_ID,
    FRIENDS_SUBSCRIPTION_ID,
    HOST_GAMERTAG,
    HOST_XUID,
    INBOX_SUBSCRIPTION_ID,
    SERVER_ASSIGNED_SYSTEM,
    SUBSCRIPTION_ID,
    FakeDirectoryClient,
    FakeIdentityProvider,
    FakeRealtimeTransport,
    friend_frame,
    member_entry,
    members_block,
    members_frame,
    message_frame,
    shoulder_tap_frame,
)

__all__ = [
    "CONNECTION_ID",
    "FRIENDS_SUBSCRIPTION_ID",
    "FakeDirectoryClient",
    "FakeIdentityProvider",
    "FakeRealtimeTransport",
    "HOST_GAMERTAG",
    "HOST_XUID",
    "INBOX_SUBSCRIPTION_ID",
    "SERVER_ASSIGNED_SYSTEM",
    "SUBSCRIPTION_ID",
    "friend_frame",
    "member_entry",
    "members_block",
    "members_frame",
    "message_frame",
    "shoulder_tap_frame",
]
