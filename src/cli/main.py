"""Command-line entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.http_client import build_client
from cli import doctor
from cli.ui_components import build_result_panel, build_version_table
from core.config import AppSettings
from core.domain.models import BuildInfo
from core.domain.version import Version
from core.errors import MalformedVersionError
from core.logging_config import configure_logging
from core.services.update_checker import UpdateChecker

app = typer.Typer(no_args_is_help=True, help="Check whether a newer modmail-viewer release exists.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command()
def check(
    current: str | None = typer.Option(
        None,
        "--current",
        "-c",
        help="Version to check. Defaults to the configured build tag.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Compare a version against the newest published release."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    with build_client(settings) as client:
        checker = UpdateChecker.from_client(client)
        if current is not None:
            result = checker.check(current)
        else:
            result = checker.check_build(BuildInfo.from_settings(settings))

    if result is None:
        if as_json:
            _console.print_json(data={"status": "skipped"})
        else:
            _console.print("[yellow]Not a tagged release build; update check skipped.[/yellow]")
        return

    if as_json:
        _console.print_json(result.model_dump_json())
    else:
        _console.print(build_result_panel(result))


@app.command()
def parse(text: str = typer.Argument(..., help="Version string, e.g. 1.2.3-rc.1+build.b5")) -> None:
    """Parse a version string and show its fields."""

    try:
        version = Version.parse(text)
    except MalformedVersionError as exc:
        _console.print(exc.format_full(), style="red", markup=False)
        raise typer.Exit(code=1) from exc
    _console.print(build_version_table(version))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
