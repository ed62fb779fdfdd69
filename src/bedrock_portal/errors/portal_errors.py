# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal Error Classes.

Error Hierarchy:
    PortalError (base portal error)
    ├── PortalConfigurationError
    ├── PortalConnectionError
    ├── PortalTimeoutError
    ├── PortalAuthenticationError
    ├── DirectoryRequestError
    ├── SessionOwnerMissingError
    ├── ProfileResolutionError
    ├── ModuleRegistrationError
    └── FrameDecodeError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelPortalErrorContext for bundled context parameters
"""

from typing import Optional
from uuid import UUID

from bedrock_portal.errors.model_portal_error_context import ModelPortalErrorContext


class PortalError(Exception):
    """Base error class for all portal errors.

    Structured Fields (via ModelPortalErrorContext):
        transport_type: Type of transport (http, realtime, identity, runtime)
        operation: Operation being performed
        correlation_id: Correlation ID for tracking
        target_name: Target resource/endpoint name

    Example:
        >>> context = ModelPortalErrorContext(
        ...     transport_type=EnumPortalTransportType.REALTIME,
        ...     operation="connect",
        ...     target_name="rta.xboxlive.com",
        ... )
        >>> raise PortalError("Operation failed", context=context, retry_count=3)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelPortalErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize PortalError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled portal context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = dict(extra_context)
        self.correlation_id: Optional[UUID] = None
        if context is not None:
            if context.transport_type is not None:
                self.context["transport_type"] = context.transport_type
            if context.operation is not None:
                self.context["operation"] = context.operation
            if context.target_name is not None:
                self.context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id

    def __str__(self) -> str:
        if self.correlation_id is None:
            return self.message
        return f"{self.message} (correlation_id={self.correlation_id})"


class PortalConfigurationError(PortalError):
    """Raised when portal configuration validation fails.

    Used for a missing redirect address or port, an unrecognized
    joinability value, or an unreadable configuration file.

    Example:
        >>> raise PortalConfigurationError("No IP provided", field="address")
    """


class PortalConnectionError(PortalError):
    """Raised when a transport connection fails.

    Used for directory HTTP connection failures and realtime websocket
    connect or handshake failures.

    Example:
        >>> context = ModelPortalErrorContext(
        ...     transport_type=EnumPortalTransportType.REALTIME,
        ...     operation="connect",
        ...     target_name="rta.xboxlive.com",
        ... )
        >>> raise PortalConnectionError("Websocket connect failed", context=context)
    """


class PortalTimeoutError(PortalError):
    """Raised when a transport operation exceeds its timeout."""


class PortalAuthenticationError(PortalError):
    """Raised when authentication fails or a token is rejected.

    Used for identity provider failures and HTTP 401/403 responses.
    """


class DirectoryRequestError(PortalError):
    """Raised when the directory service answers with a non-success status.

    Example:
        >>> raise DirectoryRequestError(
        ...     "Directory request failed",
        ...     context=context,
        ...     status_code=412,
        ... )
    """

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status code reported by the directory, if any."""
        value = self.context.get("status_code")
        return value if isinstance(value, int) else None


class SessionOwnerMissingError(PortalError):
    """Raised when a session body is built before connect() populated the identity."""


class ProfileResolutionError(PortalError):
    """Raised when a gamertag or member id cannot be resolved to a profile."""


class ModuleRegistrationError(PortalError):
    """Raised by use() for duplicate names or modules missing run/stop."""


class FrameDecodeError(PortalError):
    """Raised when a realtime frame cannot be decoded into a known payload."""


__all__ = [
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
