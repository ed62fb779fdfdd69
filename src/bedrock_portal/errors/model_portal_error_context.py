# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal Error Context Model.

Bundles the structured fields every portal error carries, so error
constructors keep a short signature while staying strongly typed.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bedrock_portal.enums import EnumPortalTransportType


class ModelPortalErrorContext(BaseModel):
    """Structured context attached to a ``PortalError``.

    Attributes:
        transport_type: Transport the failing operation used (HTTP, REALTIME, ...)
        operation: Operation being performed (connect, get_session, use, ...)
        target_name: Target resource, endpoint or module name
        correlation_id: Correlation ID for tracing one portal operation

    Example:
        >>> context = ModelPortalErrorContext(
        ...     transport_type=EnumPortalTransportType.HTTP,
        ...     operation="get_session",
        ...     target_name="sessiondirectory",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise DirectoryRequestError("Session lookup failed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumPortalTransportType] = Field(
        default=None,
        description="Type of transport (HTTP, REALTIME, IDENTITY, RUNTIME)",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource, endpoint or module name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for tracing",
    )


__all__ = ["ModelPortalErrorContext"]
