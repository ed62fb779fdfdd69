# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Module Runtime.

Registers portal modules and runs them against the live session.

Registration:
    ``use()`` validates the module structurally (non-empty ``name``,
    callable ``run`` and ``stop``), rejects duplicate names, applies the
    options and stores an IDLE registration. Registrations are never
    removed.

Execution:
    ``start_all()`` spawns one supervised task per registration. Each
    task has its own error sink: a module that raises is logged and
    marked FAILED, and neither the portal nor sibling modules notice.

Shutdown:
    ``stop_all()`` calls ``stop()`` once on every module started in the
    current cycle, whatever its status, then cancels run tasks that are
    still pending. Stop failures are isolated the same way.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from bedrock_portal.enums import EnumModuleStatus, EnumPortalTransportType
from bedrock_portal.errors import ModelPortalErrorContext, ModuleRegistrationError
from bedrock_portal.models import ModelModuleRegistration
from bedrock_portal.protocols import ProtocolPortalModule

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal

logger = logging.getLogger(__name__)


def validate_module(module: object) -> str:
    """Check the module contract and return the module name.

    Raises:
        ModuleRegistrationError: If ``name``, ``run`` or ``stop`` is missing.
    """
    name = getattr(module, "name", None)
    ctx = ModelPortalErrorContext(
        transport_type=EnumPortalTransportType.RUNTIME,
        operation="use",
        target_name=name if isinstance(name, str) else type(module).__name__,
    )
    if not isinstance(name, str) or not name:
        raise ModuleRegistrationError("Module must have a non-empty name", context=ctx)
    for method_name in ("run", "stop"):
        if not callable(getattr(module, method_name, None)):
            raise ModuleRegistrationError(
                f"Module {name} must implement {method_name}()", context=ctx
            )
    return name


class ModuleRuntime:
    """Registry and supervisor of portal modules."""

    def __init__(self) -> None:
        self._registrations: dict[str, ModelModuleRegistration] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}
        self._started: list[str] = []

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def get(self, name: str) -> Optional[ModelModuleRegistration]:
        return self._registrations.get(name)

    def registrations(self) -> list[ModelModuleRegistration]:
        return list(self._registrations.values())

    def use(
        self,
        module: ProtocolPortalModule,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ModelModuleRegistration:
        """Register ``module`` with ``options``.

        Raises:
            ModuleRegistrationError: On duplicate name or contract violation.
                Existing registrations are left untouched.
        """
        name = validate_module(module)
        if name in self._registrations:
            ctx = ModelPortalErrorContext(
                transport_type=EnumPortalTransportType.RUNTIME,
                operation="use",
                target_name=name,
            )
            raise ModuleRegistrationError(
                f"Module with name {name} has already been loaded", context=ctx
            )

        applied = dict(options or {})
        apply_options = getattr(module, "apply_options", None)
        if callable(apply_options):
            apply_options(applied)

        registration = ModelModuleRegistration(name=name, module=module, options=applied)
        self._registrations[name] = registration
        logger.debug("Enabled module", extra={"module": name})
        return registration

    def start_all(self, portal: BedrockPortal) -> None:
        """Spawn one supervised run task per registered module. Does not wait."""
        for registration in self._registrations.values():
            registration.status = EnumModuleStatus.RUNNING
            registration.last_error = None
            self._started.append(registration.name)
            self._tasks[registration.name] = asyncio.create_task(
                self._supervise(registration, portal),
                name=f"module:{registration.name}",
            )

    async def _supervise(
        self, registration: ModelModuleRegistration, portal: BedrockPortal
    ) -> None:
        try:
            result = registration.module.run(portal)
            if inspect.isawaitable(result):
                await result
            logger.debug("Module has run", extra={"module": registration.name})
        except Exception as e:
            registration.status = EnumModuleStatus.FAILED
            registration.last_error = str(e) or type(e).__name__
            logger.exception(
                "Module failed to run",
                extra={"module": registration.name, "error": str(e)},
            )

    async def wait_for_runs(self) -> None:
        """Wait until every pending run task has finished."""
        tasks = [task for task in self._tasks.values() if not task.done()]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def stop_all(self) -> None:
        """Deliver ``stop()`` to every module started in this cycle."""
        started, self._started = self._started, []

        for name in started:
            registration = self._registrations[name]
            try:
                result = registration.module.stop()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(
                    "Module failed to stop",
                    extra={"module": name, "error": str(e)},
                )
            if registration.status is EnumModuleStatus.RUNNING:
                registration.status = EnumModuleStatus.STOPPED

        tasks, self._tasks = self._tasks, {}
        pending = [task for task in tasks.values() if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


__all__: list[str] = ["ModuleRuntime", "validate_module"]
