# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Bedrock Portal CLI Commands.

Provides CLI interface for hosting a portal session and inspecting the
resolved configuration.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click
from rich.console import Console
from rich.table import Table

from bedrock_portal._version import __version__

if TYPE_CHECKING:
    from bedrock_portal.runtime.portal import BedrockPortal

console = Console()


@click.group()
@click.version_option(__version__, prog_name="bedrock-portal")
def cli() -> None:
    """Bedrock Portal CLI."""


@cli.command("show-config")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML portal config (environment overrides still apply)",
)
def show_config_cmd(config_path: Optional[Path]) -> None:
    """Print the resolved portal configuration."""
    from bedrock_portal.constants import resolve_joinability
    from bedrock_portal.errors import PortalError
    from bedrock_portal.runtime.portal_config_loader import load_portal_config

    try:
        config = load_portal_config(config_path)
    except PortalError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e.message}")
        raise SystemExit(1) from e

    mapping = resolve_joinability(config.joinability)

    table = Table(title="Portal Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Address", config.address)
    table.add_row("Port", str(config.port))
    table.add_row("Joinability", config.joinability.value)
    table.add_row("Join restriction", mapping.join_restriction)
    table.add_row("Broadcast setting", str(mapping.broadcast_setting))
    table.add_row("Host name", config.world.host_name)
    table.add_row("World name", config.world.name)
    table.add_row("Version", config.world.version)
    table.add_row(
        "Members",
        f"{config.world.member_count}/{config.world.max_member_count}",
    )
    console.print(table)


@cli.command("run")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML portal config (environment overrides still apply)",
)
@click.option(
    "--module",
    "module_names",
    multiple=True,
    help="Bundled module to enable (repeatable)",
)
def run_cmd(config_path: Optional[Path], module_names: tuple[str, ...]) -> None:
    """Host a portal session until interrupted.

    The XSTS token pair is read from PORTAL_XBL_USER_HASH and PORTAL_XBL_TOKEN.
    """
    from bedrock_portal.errors import PortalError
    from bedrock_portal.handlers import StaticIdentityProvider
    from bedrock_portal.modules import BUNDLED_MODULES
    from bedrock_portal.runtime.portal import BedrockPortal
    from bedrock_portal.runtime.portal_config_loader import (
        configure_logging,
        load_portal_config,
    )

    configure_logging()

    unknown = [name for name in module_names if name not in BUNDLED_MODULES]
    if unknown:
        console.print(
            f"[bold red]Unknown module(s):[/bold red] {', '.join(unknown)}. "
            f"Available: {', '.join(sorted(BUNDLED_MODULES))}"
        )
        raise SystemExit(2)

    try:
        config = load_portal_config(config_path)
        portal = BedrockPortal(StaticIdentityProvider.from_env(), config)
        for name in module_names:
            portal.use(BUNDLED_MODULES[name]())
    except PortalError as e:
        console.print(f"[bold red]Failed to set up portal:[/bold red] {e.message}")
        raise SystemExit(1) from e

    try:
        asyncio.run(_run_portal(portal))
    except KeyboardInterrupt:
        console.print("[yellow]Portal stopped[/yellow]")
    except PortalError as e:
        console.print(f"[bold red]Portal failed:[/bold red] {e}")
        raise SystemExit(1) from e


async def _run_portal(portal: BedrockPortal) -> None:
    from bedrock_portal.enums import EnumPortalEvent
    from bedrock_portal.models import ModelPlayer

    def _on_join(player: ModelPlayer) -> None:
        console.print(f"[green]+ {player.display_name or player.member_id}[/green]")

    def _on_leave(player: ModelPlayer) -> None:
        console.print(f"[red]- {player.display_name or player.member_id}[/red]")

    portal.on(EnumPortalEvent.PLAYER_JOIN, _on_join)
    portal.on(EnumPortalEvent.PLAYER_LEAVE, _on_leave)

    try:
        await portal.start()
        session = portal.session
        console.print(
            f"[bold green]Session published:[/bold green] "
            f"{session.name if session else '?'} -> "
            f"{portal.config.address}:{portal.config.port}"
        )
        await asyncio.Event().wait()
    finally:
        await portal.close()


if __name__ == "__main__":
    cli()
