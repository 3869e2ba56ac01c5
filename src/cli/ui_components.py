"""CLI UI components (Rich) shared by the `check` and `parse` commands."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CheckFailed, NoUpdate, UpdateAvailable, UpdateCheckResult
from core.domain.version import Version


def build_result_panel(result: UpdateCheckResult) -> Panel:
    """Panel describing the outcome of an update check."""

    body = Text()
    if isinstance(result, UpdateAvailable):
        body.append("Update available: ", style="bold")
        body.append(f"{result.current} -> {result.latest}\n", style="cyan")
        body.append(f"Download: {result.url}\n", style="magenta")
        body.append("Out of date versions are not supported.", style="dim")
        return Panel(body, title=Text("Update", style="bold yellow"), border_style="yellow")

    if isinstance(result, NoUpdate):
        body.append("No newer release found.\n", style="bold")
        body.append(f"Current: {result.current}\n")
        body.append(f"Latest:  {result.latest}")
        return Panel(body, title=Text("Up to date", style="bold green"), border_style="green")

    if isinstance(result, CheckFailed):
        body.append("Could not confirm whether a newer release exists.\n", style="bold")
        body.append(f"{result.error}: {result.reason}", style="red")
        return Panel(body, title=Text("Check failed", style="bold red"), border_style="red")

    raise TypeError(f"unsupported update check result: {type(result).__name__}")


def build_version_table(version: Version) -> Table:
    table = Table(title="Version")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    table.add_row("prerelease", version.prerelease or "-")
    table.add_row("build metadata", version.build_metadata or "-")
    table.add_row("canonical", version.to_canonical_string())
    return table
