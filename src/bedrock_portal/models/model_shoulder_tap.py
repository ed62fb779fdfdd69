# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shoulder tap: a realtime reference to a changed directory session."""

from pydantic import BaseModel, ConfigDict, Field


class ModelShoulderTap(BaseModel):
    """``{"resource": "<scid>~<template>~<name>", "changeNumber": n}``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    resource: str = Field(..., min_length=1)
    change_number: int = Field(default=0, alias="changeNumber")
    branch: str = Field(default="")

    @property
    def session_name(self) -> str:
        """Last ``~``-separated segment of the resource."""
        return self.resource.rsplit("~", 1)[-1]

    def references(self, session_name: str) -> bool:
        """Whether this tap refers to ``session_name`` (names are case-insensitive)."""
        return self.session_name.lower() == session_name.lower()


__all__ = ["ModelShoulderTap"]
