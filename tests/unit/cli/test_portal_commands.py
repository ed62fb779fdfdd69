# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the bedrock-portal CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from bedrock_portal.cli.commands import cli


@pytest.fixture(autouse=True)
def _clear_portal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PORTAL_ADDRESS",
        "PORTAL_PORT",
        "PORTAL_JOINABILITY",
        "PORTAL_XBL_USER_HASH",
        "PORTAL_XBL_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)


class TestShowConfig:
    def test_prints_resolved_config(self, tmp_path: Path) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text("address: 203.0.113.5\njoinability: InviteOnly\n", encoding="utf-8")

        result = CliRunner().invoke(cli, ["show-config", "--config", str(path)])

        assert result.exit_code == 0
        assert "203.0.113.5" in result.output
        assert "invite_only" in result.output
        assert "local" in result.output

    def test_invalid_config_exits_nonzero(self, tmp_path: Path) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text("port: 19132\n", encoding="utf-8")

        result = CliRunner().invoke(cli, ["show-config", "--config", str(path)])

        assert result.exit_code == 1
        assert "No IP provided" in result.output


class TestRun:
    def test_unknown_module_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["run", "--module", "teleporter"])

        assert result.exit_code == 2
        assert "teleporter" in result.output

    def test_missing_credentials_exit_nonzero(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORTAL_ADDRESS", "203.0.113.5")

        result = CliRunner().invoke(cli, ["run"])

        assert result.exit_code == 1
        assert "Failed to set up portal" in result.output
