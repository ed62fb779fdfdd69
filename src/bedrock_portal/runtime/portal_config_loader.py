# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Portal configuration loading and logging bootstrap.

Configuration Precedence:
    - Environment variables (PORTAL_ADDRESS, PORTAL_PORT, PORTAL_JOINABILITY)
      override individual file settings
    - File-based config (YAML) provides everything else
    - Model defaults fill the rest

Environment Variables:
    PORTAL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        Default: INFO
    PORTAL_ADDRESS: Redirect target address
    PORTAL_PORT: Redirect target port
    PORTAL_JOINABILITY: Joinability name (e.g. FriendsOfFriends)

Example:
    >>> configure_logging()
    >>> config = load_portal_config(Path("portal.yaml"))
    >>> config.port
    19132
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union
from uuid import uuid4

import yaml
from pydantic import ValidationError

from bedrock_portal.enums import EnumJoinability, EnumPortalTransportType
from bedrock_portal.errors import ModelPortalErrorContext, PortalConfigurationError
from bedrock_portal.models import ModelPortalConfig

logger = logging.getLogger(__name__)

_ENV_OVERRIDES: dict[str, str] = {
    "PORTAL_ADDRESS": "address",
    "PORTAL_PORT": "port",
    "PORTAL_JOINABILITY": "joinability",
}


def configure_logging() -> None:
    """Configure root logging from PORTAL_LOG_LEVEL.

    Log Format Example:
        2025-01-15 10:30:45 [INFO] bedrock_portal.runtime.portal_host: Host connected
    """
    log_level = os.getenv("PORTAL_LOG_LEVEL", "INFO").upper()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        print(
            f"Warning: Invalid PORTAL_LOG_LEVEL '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(valid_levels))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _describe_validation_error(error: ValidationError) -> str:
    fields = {str(err["loc"][0]) for err in error.errors() if err["loc"]}
    if "address" in fields or "ip" in fields:
        return "No IP provided"
    if "port" in fields:
        return "No port provided"
    if "joinability" in fields:
        return "Invalid joinability - Expected one of " + ", ".join(
            member.value for member in EnumJoinability
        )
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "config"
    return f"Invalid portal configuration: {location}: {first['msg']}"


def build_portal_config(
    options: Union[ModelPortalConfig, Mapping[str, Any], None],
) -> ModelPortalConfig:
    """Validate ``options`` into a ``ModelPortalConfig``.

    Raises:
        PortalConfigurationError: If validation fails.
    """
    if isinstance(options, ModelPortalConfig):
        return options
    try:
        return ModelPortalConfig.model_validate(dict(options or {}))
    except ValidationError as e:
        ctx = ModelPortalErrorContext(
            transport_type=EnumPortalTransportType.RUNTIME,
            operation="validate_config",
        )
        raise PortalConfigurationError(
            _describe_validation_error(e),
            context=ctx,
            validation_errors=[err["msg"] for err in e.errors()],
        ) from e


def load_portal_config(config_path: Optional[Path] = None) -> ModelPortalConfig:
    """Load configuration from a YAML file plus environment overrides.

    Args:
        config_path: YAML file. When None, only environment and defaults are used.

    Raises:
        PortalConfigurationError: If the file cannot be read or parsed, or
            validation fails.
    """
    correlation_id = uuid4()
    context = ModelPortalErrorContext(
        transport_type=EnumPortalTransportType.RUNTIME,
        operation="load_config",
        target_name=str(config_path) if config_path else None,
        correlation_id=correlation_id,
    )

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        logger.info(
            "Loading portal config from %s (correlation_id=%s)",
            config_path,
            correlation_id,
        )
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PortalConfigurationError(
                f"Failed to parse portal config YAML at {config_path}",
                context=context,
            ) from e
        except OSError as e:
            raise PortalConfigurationError(
                f"Failed to read portal config at {config_path}",
                context=context,
            ) from e
        if not isinstance(loaded, dict):
            raise PortalConfigurationError(
                f"Portal config at {config_path} must be a mapping",
                context=context,
            )
        raw_config = loaded

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        raw_config[field_name] = value
        if field_name == "address":
            # "ip" is an alias of address; drop it so the override wins
            raw_config.pop("ip", None)

    config = build_portal_config(raw_config)
    logger.debug(
        "Portal config loaded (correlation_id=%s)",
        correlation_id,
        extra={"address": config.address, "port": config.port},
    )
    return config


__all__: list[str] = [
    "build_portal_config",
    "configure_logging",
    "load_portal_config",
]
