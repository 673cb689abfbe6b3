# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.service.stats import get_contribution_grid, get_stats
from gitdaily.terminal.parse import parse_month
from gitdaily.time import today_local
from gitdaily.view.stats import contribution_grid_view, stats_view


def stats(
    month: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--month", "-m", parser=parse_month, help="show a contribution grid for YYYY-MM"
        ),
    ] = None,
) -> None:
    """Commit statistics."""
    branches = BRANCH_REPO.get_all_branches()
    tasks = TASK_REPO.get_all_tasks()

    if month is not None:
        contribution_grid_view(month, get_contribution_grid(tasks, month))
        return

    stats_view(get_stats(branches, tasks, today_local()), branches)
