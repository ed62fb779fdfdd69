# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Convenience base class for portal modules.

Subclassing is optional: the runtime only checks ``name``, ``run`` and
``stop`` structurally. The base adds typed options (a pydantic model per
module) and a stop event that long-running ``run()`` loops can wait on.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from bedrock_portal.enums import EnumPortalTransportType
from bedrock_portal.errors import ModelPortalErrorContext, ModuleRegistrationError

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class PortalModuleBase(ABC, Generic[OptionsT]):
    """Base for modules with validated options.

    Subclasses set ``name`` and ``options_model`` and implement ``run()``.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    options_model: ClassVar[type[BaseModel]]

    def __init__(self) -> None:
        self.options: OptionsT = self.options_model()  # type: ignore[assignment]
        self._stop_event = asyncio.Event()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def apply_options(self, options: Mapping[str, Any]) -> None:
        """Validate and apply options. Called once by ``use()``.

        Raises:
            ModuleRegistrationError: If an option is unknown or invalid.
        """
        try:
            self.options = self.options_model.model_validate(dict(options))  # type: ignore[assignment]
        except ValidationError as e:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.RUNTIME,
                operation="apply_options",
                target_name=self.name,
            )
            raise ModuleRegistrationError(
                f"Invalid options for module {self.name}",
                context=ctx,
                validation_errors=[err["msg"] for err in e.errors()],
            ) from e

    @abstractmethod
    async def run(self, portal: BedrockPortal) -> None:
        """Start the module against a published session."""

    def stop(self) -> None:
        self._stop_event.set()

    async def wait_stopped(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for ``stop()``. Returns True if stopped."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True


__all__: list[str] = ["PortalModuleBase"]
