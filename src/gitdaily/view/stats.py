# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitdaily.model.branch import Branch
from gitdaily.service.stats import ContributionDay, Stats
from gitdaily.view.header import header
from gitdaily.view.util import colored

INTENSITY_STYLES = [
    "grey23",
    "#9be9a8",
    "#40c463",
    "#30a14e",
    "#216e39",
]
WEEKDAY_NAMES = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


def stats_view(stats: Stats, branches: list[Branch]) -> None:
    header("stats")

    console = Console()

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("stat")
    summary_table.add_column("value")
    summary_table.add_row("total commits", str(stats["total_commits"]))
    summary_table.add_row("active days", str(stats["active_days"]))
    summary_table.add_row("current streak", f"{stats['current_streak']} days")
    summary_table.add_row("archived branches", str(stats["archived_branches"]))
    console.print(summary_table)

    branch_table = Table(box=box.SIMPLE)
    branch_table.add_column("branch")
    branch_table.add_column("commits")
    for branch in branches:
        count = stats["completed_by_branch"].get(branch["id"] or "", 0)
        if count == 0:
            continue
        branch_table.add_row(colored(branch["name"], branch["color"]), str(count))
    console.print(branch_table)


def contribution_grid_view(month: pendulum.Date, weeks: list[list[ContributionDay]]) -> None:
    header("contributions", month.format("MMMM YYYY"))

    console = Console()
    console.print(Text(" ".join(WEEKDAY_NAMES), style="grey62"))
    for week in weeks:
        line = Text()
        # first week of the month can start mid-week
        line.append("   " * (week[0]["date"].day_of_week.value if len(week) > 0 else 0))
        for day in week:
            line.append("■■", style=INTENSITY_STYLES[day["intensity"]])
            line.append(" ")
        console.print(line)

    legend = Text("less ", style="grey62")
    for style in INTENSITY_STYLES:
        legend.append("■", style=style)
    legend.append(" more", style="grey62")
    console.print()
    console.print(legend)
