# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bedrock Portal command line interface."""

from bedrock_portal.cli.commands import cli

__all__: list[str] = ["cli"]
