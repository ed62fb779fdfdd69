# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Module lifecycle status.

FSM Diagram::

    +------+   start_all   +---------+   stop_all   +---------+
    | idle | ------------> | running | -----------> | stopped |
    +------+               +---------+              +---------+
       ^                        |                        |
       |                        | run raised             |
       |                        v                        |
       |                   +--------+                    |
       |                   | failed |                    |
       |                   +--------+                    |
       +-------------------------------------------------+
                         (next start_all)
"""

from enum import Enum


class EnumModuleStatus(str, Enum):
    """Lifecycle status of a registered portal module.

    Attributes:
        IDLE: Registered, not started yet.
        RUNNING: ``run()`` has been scheduled for the current session.
        STOPPED: ``stop()`` was delivered.
        FAILED: ``run()`` raised; the error was logged and isolated.
    """

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"


__all__: list[str] = ["EnumModuleStatus"]
