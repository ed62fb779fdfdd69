# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bedrock Portal data models.

Exports:
    ModelAutoFriendAddOptions: Options of the auto friend add module
    ModelChatMessage: Chat message delivered to the host
    ModelFriendNotification: Social graph added/removed notification
    ModelIdentityContext: Host identity populated by connect
    ModelInviteOnMessageOptions: Options of the invite on message module
    ModelJoinabilityMapping: Directory visibility triple
    ModelModuleRegistration: Registered module and its status
    ModelPerson: People hub person (followers)
    ModelPlayer: Tracked member view
    ModelPortalConfig: Validated portal configuration
    ModelProfile: Resolved directory profile
    ModelRealtimeFrame: Decoded realtime frame
    ModelSessionChangedPayload: Session-changed frame payload
    ModelSessionMember: Parsed directory member entry
    ModelSessionRecord: Directory session record
    ModelSessionRef: Current session name and subscription
    ModelShoulderTap: Realtime reference to a changed session
    ModelSubscribeResult: Realtime subscribe handshake result
    ModelWorldConfig: Session card metadata
    ModelXboxAuthorization: XSTS token pair
"""

from bedrock_portal.models.model_auto_friend_add_options import (
    ModelAutoFriendAddOptions,
)
from bedrock_portal.models.model_chat_message import ModelChatMessage
from bedrock_portal.models.model_friend_notification import ModelFriendNotification
from bedrock_portal.models.model_identity_context import ModelIdentityContext
from bedrock_portal.models.model_invite_on_message_options import (
    ModelInviteOnMessageOptions,
)
from bedrock_portal.models.model_joinability_mapping import ModelJoinabilityMapping
from bedrock_portal.models.model_module_registration import ModelModuleRegistration
from bedrock_portal.models.model_person import ModelPerson
from bedrock_portal.models.model_player import ModelPlayer
from bedrock_portal.models.model_portal_config import ModelPortalConfig
from bedrock_portal.models.model_profile import ModelProfile
from bedrock_portal.models.model_realtime_frame import ModelRealtimeFrame
from bedrock_portal.models.model_session_changed_payload import (
    ModelSessionChangedPayload,
)
from bedrock_portal.models.model_session_member import (
    ModelSessionMember,
    parse_member_list,
)
from bedrock_portal.models.model_session_record import ModelSessionRecord
from bedrock_portal.models.model_session_ref import ModelSessionRef
from bedrock_portal.models.model_shoulder_tap import ModelShoulderTap
from bedrock_portal.models.model_subscribe_result import ModelSubscribeResult
from bedrock_portal.models.model_world_config import ModelWorldConfig
from bedrock_portal.models.model_xbox_authorization import ModelXboxAuthorization

__all__: list[str] = [
    "ModelAutoFriendAddOptions",
    "ModelChatMessage",
    "ModelFriendNotification",
    "ModelIdentityContext",
    "ModelInviteOnMessageOptions",
    "ModelJoinabilityMapping",
    "ModelModuleRegistration",
    "ModelPerson",
    "ModelPlayer",
    "ModelPortalConfig",
    "ModelProfile",
    "ModelRealtimeFrame",
    "ModelSessionChangedPayload",
    "ModelSessionMember",
    "ModelSessionRecord",
    "ModelSessionRef",
    "ModelShoulderTap",
    "ModelSubscribeResult",
    "ModelWorldConfig",
    "ModelXboxAuthorization",
    "parse_member_list",
]
