# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from gitdaily import configuration
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.terminal.custom_typer import AliasedTyperGroup
from gitdaily.terminal.error import exit_with_error
from gitdaily.terminal.parse import parse_granularity

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _config_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("branch_spacing", str(config["branch_spacing"]))
    table.add_row("granularity", config["granularity"])
    table.add_row("alignment", config["alignment"])
    table.add_row("viewport_width", str(config["viewport_width"]))
    table.add_row("show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled")
    table.add_row(
        "random_color_for_branches",
        "✓ Enabled" if config["random_color_for_branches"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_config_table())


@app.command("set, s")
def set(
    branch_spacing: Annotated[
        Optional[float],
        typer.Option("--branch-spacing", help="gap multiplier between branches, 0.5-2.0"),
    ] = None,
    granularity: Annotated[
        Optional[TimeGranularity],
        typer.Option(
            "--granularity",
            parser=parse_granularity,
            help="default granularity: Day, Week, 2 Weeks, Month",
        ),
    ] = None,
    alignment: Annotated[
        Optional[str],
        typer.Option("--alignment", help="center or left"),
    ] = None,
    viewport_width: Annotated[
        Optional[int],
        typer.Option("--viewport-width", help="pixel width used to pick the layout mode"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header"),
    ] = None,
    random_color_for_branches: Annotated[
        Optional[bool],
        typer.Option(
            "--random-color-for-branches/--no-random-color-for-branches",
            help="Enable/disable random colors for new branches",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Reset data path to the default"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if alignment is not None and alignment not in ("center", "left"):
        raise typer.BadParameter("alignment must be 'center' or 'left'")

    try:
        CONFIGURATION_REPO.update_config(
            branch_spacing=branch_spacing,
            granularity=granularity.value if granularity is not None else None,
            alignment=alignment,  # type: ignore[arg-type]
            viewport_width=viewport_width,
            show_header=show_header,
            random_color_for_branches=random_color_for_branches,
            data_path=data_path,
            remove_data_path=remove_data_path,
            log_level=log_level,
        )
    except ValueError as e:
        exit_with_error(e)

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table("Updated Configuration"))
