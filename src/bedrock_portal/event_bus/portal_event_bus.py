# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed in-process event channel for portal domain events.

One channel per ``EnumPortalEvent``. Handlers are registered explicitly
and receive the payload documented on the enum member.

Features:
    - Per-event handler lists, called in registration order
    - Sync or async handlers
    - Handler failures are logged and never reach the emitter or other handlers
    - Bounded emission history for debugging and tests

Usage:
    ```python
    from bedrock_portal.event_bus.portal_event_bus import PortalEventBus

    bus = PortalEventBus()

    async def on_join(player: ModelPlayer) -> None:
        print(f"{player.display_name} joined")

    unsubscribe = bus.subscribe(EnumPortalEvent.PLAYER_JOIN, on_join)
    await bus.emit(EnumPortalEvent.PLAYER_JOIN, player)
    unsubscribe()
    ```
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict, deque
from collections.abc import Callable
from typing import Any, Optional

from bedrock_portal.enums import EnumPortalEvent

logger = logging.getLogger(__name__)

PortalEventHandler = Callable[[Any], Any]


class PortalEventBus:
    """In-process publish/subscribe channel keyed by portal event name.

    Emission is awaited by the caller, so an emitter that awaits ``emit``
    for event A before emitting event B guarantees every handler saw A
    first. The reconciler relies on this for per-frame ordering.

    Attributes:
        max_history: Number of emissions retained by ``get_event_history``.
    """

    def __init__(self, max_history: int = 1000) -> None:
        """Initialize the bus.

        Args:
            max_history: Maximum number of emissions to retain in history
        """
        self._max_history = max_history
        self._handlers: dict[EnumPortalEvent, list[PortalEventHandler]] = defaultdict(
            list
        )
        self._history: deque[tuple[EnumPortalEvent, Any]] = deque(maxlen=max_history)

    @property
    def max_history(self) -> int:
        """Return the history retention limit."""
        return self._max_history

    def subscribe(
        self,
        event: EnumPortalEvent | str,
        handler: PortalEventHandler,
    ) -> Callable[[], None]:
        """Register ``handler`` for ``event``.

        Args:
            event: Event enum member or its public name (e.g. ``"playerJoin"``)
            handler: Sync or async callable taking the event payload

        Returns:
            Function removing this subscription. Calling it twice is a no-op.

        Raises:
            ValueError: If ``event`` is not a known portal event name.
        """
        key = EnumPortalEvent(event)
        self._handlers[key].append(handler)
        logger.debug("Handler subscribed", extra={"event": key.value})

        def unsubscribe() -> None:
            try:
                self._handlers[key].remove(handler)
                logger.debug("Handler unsubscribed", extra={"event": key.value})
            except ValueError:
                # Already unsubscribed
                pass

        return unsubscribe

    async def emit(self, event: EnumPortalEvent, payload: Any) -> None:
        """Deliver ``payload`` to every handler of ``event``.

        Handlers run sequentially in registration order. A failing handler
        is logged and skipped.
        """
        self._history.append((event, payload))
        handlers = list(self._handlers.get(event, []))

        for handler in handlers:
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(
                    "Event handler failed",
                    extra={
                        "event": event.value,
                        "handler": getattr(handler, "__qualname__", repr(handler)),
                        "error": str(e),
                    },
                )

    def clear(self) -> None:
        """Remove every handler."""
        self._handlers.clear()

    def get_subscriber_count(self, event: Optional[EnumPortalEvent] = None) -> int:
        """Get handler count, optionally filtered by event."""
        if event is not None:
            return len(self._handlers.get(event, []))
        return sum(len(handlers) for handlers in self._handlers.values())

    def get_event_history(
        self,
        limit: int = 100,
        event: Optional[EnumPortalEvent] = None,
    ) -> list[tuple[EnumPortalEvent, Any]]:
        """Get recent emissions, most recent last.

        Args:
            limit: Maximum number of emissions to return
            event: Optional event filter
        """
        history = list(self._history)
        if event is not None:
            history = [entry for entry in history if entry[0] is event]
        return history[-limit:]

    def clear_event_history(self) -> None:
        """Clear emission history."""
        self._history.clear()


__all__: list[str] = ["PortalEventBus", "PortalEventHandler"]
