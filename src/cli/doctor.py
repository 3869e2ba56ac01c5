"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.github_releases import GitHubReleaseFeed
from adapters.http_client import build_client
from core.config import AppSettings, get_user_env_file
from core.domain.models import BuildInfo
from core.errors import UpdateCheckError

app = typer.Typer(no_args_is_help=False, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_feed(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            entry = GitHubReleaseFeed(client).latest_release()
        return True, f"latest tag {entry.tag_name}"
    except UpdateCheckError as exc:
        return False, exc.format_full()


@app.callback(invoke_without_command=True)
def run() -> None:
    """Show the effective configuration and try a request to the release feed."""

    settings = AppSettings()
    build = BuildInfo.from_settings(settings)

    table = Table(title="Update check doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", Text(str(env_file)))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    if build.is_semver_release:
        table.add_row("Build", "RELEASE", f"tag {build.tag}")
    elif build.is_development:
        table.add_row("Build", "DEVELOP", "update checks are skipped")
    else:
        table.add_row("Build", "UNKNOWN", "no semantic-version tag -> update checks are skipped")

    ok_feed, detail_feed = _check_feed(settings)
    table.add_row("Release feed", "OK" if ok_feed else "FAIL", Text(detail_feed))

    _console.print(table)
