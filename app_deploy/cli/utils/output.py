# app_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...api.exceptions import AppDeployError, RemoteStageError
from ...models import DeployResult
from ...models.config import TargetSettings

console = Console()


def print_status(message: str) -> None:
    """Print a deployment milestone"""
    console.print(f"[cyan]•[/cyan] {message}")


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    outcome = result.outcome
    lines = [
        f"[green]✓[/green] Deployed to [bold]{result.target}[/bold]",
        f"",
        f"[bold]Transport:[/bold] {result.transport}",
    ]

    if result.staged:
        lines.append(f"[bold]Staged path:[/bold] {result.staged.resolved_target_path}")

    lines.append(f"[bold]Published:[/bold] {_yes_no(outcome.published)}")
    if result.request.sync:
        lines.append(f"[bold]Synchronized:[/bold] {_yes_no(outcome.synchronized)}")
    if result.request.install:
        lines.append(f"[bold]Installed:[/bold] {_yes_no(outcome.installed)}")

    lines.append(f"")
    lines.append(f"[dim]Duration: {result.duration:.2f}s[/dim]")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green"
    )
    console.print(panel)


def format_deploy_error(target: str, error: AppDeployError) -> None:
    """Format and display a failed deployment"""
    lines = [f"[red]✗ Deployment to {target} failed:[/red] {error}"]

    if error.error_code:
        lines.append(f"[dim]Error code: {error.error_code}[/dim]")

    # Stages that completed before the failure
    if isinstance(error, RemoteStageError) and error.outcome and error.outcome.published:
        lines.append("")
        lines.append("[yellow]Published before the failure[/yellow]")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Error",
        border_style="red"
    )
    console.print(panel)


def format_target_list(targets: List[TargetSettings]) -> None:
    """Format and display configured targets"""
    if not targets:
        console.print("[yellow]No targets configured[/yellow]")
        return

    table = Table(title="Targets", box=box.SIMPLE)
    table.add_column("Name", style="cyan")
    table.add_column("Credentials", style="green")
    table.add_column("Endpoint", style="dim")

    for target in targets:
        table.add_row(target.name, target.credential_mode, target.get_display_info())

    console.print(table)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"
