# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for portal configuration loading and logging bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bedrock_portal.enums import EnumJoinability
from bedrock_portal.errors import PortalConfigurationError
from bedrock_portal.models import ModelPortalConfig
from bedrock_portal.runtime.portal_config_loader import (
    build_portal_config,
    configure_logging,
    load_portal_config,
)


@pytest.fixture(autouse=True)
def _clear_portal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORTAL_ADDRESS", "PORTAL_PORT", "PORTAL_JOINABILITY"):
        monkeypatch.delenv(name, raising=False)


class TestBuildPortalConfig:
    def test_model_instance_passed_through(self) -> None:
        config = ModelPortalConfig(address="203.0.113.5")

        assert build_portal_config(config) is config

    def test_none_reports_missing_address(self) -> None:
        with pytest.raises(PortalConfigurationError, match="No IP provided"):
            build_portal_config(None)

    def test_blank_address_reports_missing_address(self) -> None:
        with pytest.raises(PortalConfigurationError, match="No IP provided"):
            build_portal_config({"address": "   "})

    def test_bad_port_reported(self) -> None:
        with pytest.raises(PortalConfigurationError, match="No port provided"):
            build_portal_config({"address": "203.0.113.5", "port": 0})

    def test_bad_joinability_lists_choices(self) -> None:
        with pytest.raises(PortalConfigurationError) as exc_info:
            build_portal_config({"address": "203.0.113.5", "joinability": "Public"})

        message = exc_info.value.message
        assert message.startswith("Invalid joinability - Expected one of")
        for member in EnumJoinability:
            assert member.value in message

    def test_ip_alias_accepted(self) -> None:
        config = build_portal_config({"ip": "203.0.113.5", "port": "19133"})

        assert config.address == "203.0.113.5"
        assert config.port == 19133


class TestLoadPortalConfig:
    def test_yaml_file_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text(
            "address: 203.0.113.5\n"
            "joinability: FriendsOnly\n"
            "world:\n"
            "  name: My World\n"
            "  maxMemberCount: 20\n",
            encoding="utf-8",
        )

        config = load_portal_config(path)

        assert config.address == "203.0.113.5"
        assert config.port == 19132
        assert config.joinability is EnumJoinability.FRIENDS_ONLY
        assert config.world.name == "My World"
        assert config.world.max_member_count == 20

    def test_env_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text("ip: 198.51.100.1\nport: 19132\n", encoding="utf-8")
        monkeypatch.setenv("PORTAL_ADDRESS", "203.0.113.5")
        monkeypatch.setenv("PORTAL_PORT", "25565")
        monkeypatch.setenv("PORTAL_JOINABILITY", "INVITE_ONLY")

        config = load_portal_config(path)

        assert config.address == "203.0.113.5"
        assert config.port == 25565
        assert config.joinability is EnumJoinability.INVITE_ONLY

    def test_env_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTAL_ADDRESS", "203.0.113.5")

        config = load_portal_config()

        assert config.address == "203.0.113.5"

    def test_invalid_yaml_raises_configuration_error(self, tmp_path: Path) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text("address: [unclosed\n", encoding="utf-8")

        with pytest.raises(PortalConfigurationError, match="Failed to parse"):
            load_portal_config(path)

    def test_non_mapping_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "portal.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(PortalConfigurationError, match="must be a mapping"):
            load_portal_config(path)

    def test_missing_file_raises_configuration_error(self, tmp_path: Path) -> None:
        with pytest.raises(PortalConfigurationError, match="Failed to read"):
            load_portal_config(tmp_path / "absent.yaml")


class TestConfigureLogging:
    def test_invalid_level_falls_back_to_info(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("PORTAL_LOG_LEVEL", "LOUD")
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)

        configure_logging()

        assert "Invalid PORTAL_LOG_LEVEL 'LOUD'" in capsys.readouterr().err

    def test_level_passed_to_basic_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        captured: dict[str, object] = {}
        monkeypatch.setenv("PORTAL_LOG_LEVEL", "debug")
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        configure_logging()

        assert captured["level"] == logging.DEBUG
