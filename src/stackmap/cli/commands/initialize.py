"""
Init Command - Project bootstrap.

This module handles the `stackmap init` command, which writes the default
configuration file and, with --demo, a ready-to-explore demo catalog.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import StackmapConfig, config_path, write_config
from ...core.demo import DemoManager

console = Console()


def _init_project(root_dir: Path, is_demo: bool = False) -> Path:
    """Internal helper to write the configuration file."""
    config = StackmapConfig()
    if is_demo:
        seed_path = DemoManager(root_dir).provision(config.catalog.path)
        console.print(f"📂 Demo catalog written to: [bold]{seed_path}[/bold]")

    config_file = write_config(config, config_path(root_dir))

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--demo", is_flag=True, help="Write a demo catalog to try stackmap instantly")
def init(force: bool, demo: bool):
    """
    Initialize stackmap in the current directory.

    If --demo is used, a sample catalog is written to .stackmap/seed.json
    next to the configuration.
    """
    console.print(Panel.fit("🚀 [bold blue]stackmap Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = config_path(root_dir)

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    _init_project(root_dir, is_demo=demo)

    if demo:
        console.print("\n[bold green]Ready to go! Try these commands:[/bold green]")
        console.print("1. [bold cyan]stackmap explore --expand L1_BACK[/bold cyan]")
        console.print("2. [bold cyan]stackmap search crm[/bold cyan]")
        console.print("3. [bold cyan]stackmap recommend[/bold cyan]")
