"""Targets command implementation"""

import sys

import click
from rich.console import Console

from ..utils.output import format_target_list
from ...api.exceptions import ConfigError

console = Console()


@click.command()
@click.pass_context
def targets(ctx):
    """List configured deployment targets"""
    try:
        configured = ctx.obj.config_service.list_targets()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    format_target_list(configured)
