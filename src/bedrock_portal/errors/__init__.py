# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bedrock Portal Errors Module.

Exports:
    ModelPortalErrorContext: Configuration model for bundled error context
    PortalError: Base portal error class
    PortalConfigurationError: Configuration validation errors
    PortalConnectionError: Transport connection errors
    PortalTimeoutError: Transport timeout errors
    PortalAuthenticationError: Identity and token errors
    DirectoryRequestError: Non-success directory responses
    SessionOwnerMissingError: Session body built before connect
    ProfileResolutionError: Identifier could not be resolved
    ModuleRegistrationError: Duplicate or non-conforming module
    FrameDecodeError: Malformed realtime frame

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - XSTS tokens, user hashes or Authorization headers
        - Full request headers

    SAFE to include:
        - Endpoint host names and operation names
        - Session names (they are public handles)
        - Gamertags and member ids passed in by the caller
        - HTTP status codes and correlation IDs
"""

from bedrock_portal.errors.model_portal_error_context import ModelPortalErrorContext
from bedrock_portal.errors.portal_errors import (
    DirectoryRequestError,
    FrameDecodeError,
    ModuleRegistrationError,
    PortalAuthenticationError,
    PortalConfigurationError,
    PortalConnectionError,
    PortalError,
    PortalTimeoutError,
    ProfileResolutionError,
    SessionOwnerMissingError,
)

__all__: list[str] = [
    "ModelPortalErrorContext",
    "PortalError",
    "PortalConfigurationError",
    "PortalConnectionError",
    "PortalTimeoutError",
    "PortalAuthenticationError",
    "DirectoryRequestError",
    "SessionOwnerMissingError",
    "ProfileResolutionError",
    "ModuleRegistrationError",
    "FrameDecodeError",
]
