# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from gitdaily.errors import BranchNotFoundError
from gitdaily.graph.scene import build_scene
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.terminal.error import exit_with_error
from gitdaily.terminal.parse import parse_branch_id, parse_date, parse_granularity
from gitdaily.time import today_local
from gitdaily.view.graph import graph_view
from gitdaily.view.svg import save_svg


def graph(
    granularity: Annotated[
        Optional[TimeGranularity],
        typer.Option(
            "--granularity",
            "-g",
            parser=parse_granularity,
            help="Day, Week, 2 Weeks or Month",
        ),
    ] = None,
    spacing: Annotated[
        Optional[float],
        typer.Option("--spacing", "-s", min=0.5, max=2.0, help="branch gap multiplier"),
    ] = None,
    width: Annotated[
        Optional[int], typer.Option("--width", "-w", help="viewport width in pixels")
    ] = None,
    align: Annotated[
        Optional[str], typer.Option("--align", "-a", help="center or left")
    ] = None,
    branch: Annotated[
        Optional[str],
        typer.Option("--branch", "-b", help="focus on a branch and its descendants"),
    ] = None,
    today: Annotated[
        Optional[pendulum.Date],
        typer.Option("--today", "-t", parser=parse_date, help="date treated as today"),
    ] = None,
    svg: Annotated[
        Optional[Path], typer.Option("--svg", help="write an SVG file instead")
    ] = None,
) -> None:
    """Draw the commit graph."""
    config = CONFIGURATION_REPO.get_config()

    if align is not None and align not in ("center", "left"):
        raise typer.BadParameter("align must be 'center' or 'left'")

    focus_branch_id = None
    sub_header = None
    if branch is not None:
        focus_branch_id = parse_branch_id(branch)
        try:
            sub_header = BRANCH_REPO.get_branch(focus_branch_id)["name"]
        except BranchNotFoundError as e:
            exit_with_error(e)

    viewport_width = width if width is not None else config["viewport_width"]
    scene = build_scene(
        BRANCH_REPO.get_all_branches(),
        TASK_REPO.get_all_tasks(),
        granularity=(
            granularity if granularity is not None else TimeGranularity(config["granularity"])
        ),
        today=today if today is not None else today_local(),
        branch_spacing=spacing if spacing is not None else config["branch_spacing"],
        viewport_width=viewport_width,
        alignment=align if align is not None else config["alignment"],  # type: ignore[arg-type]
        focus_branch_id=focus_branch_id,
    )

    if svg is not None:
        save_svg(scene, viewport_width, svg)
        console = Console()
        console.print(f"[green]Wrote {svg}[/green]")
        return

    graph_view(scene, sub_header)
