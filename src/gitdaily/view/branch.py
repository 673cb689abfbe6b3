# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from gitdaily.model.branch import Branch
from gitdaily.model.task import Task
from gitdaily.time import date_to_display_str, date_to_display_str_optional
from gitdaily.view.header import header
from gitdaily.view.util import branch_display_id, branch_state, colored, task_state


def branches_view(
    report_name: str,
    branches: list[Branch],
    tasks: list[Task],
) -> None:
    header(report_name)

    branches_table = Table(box=box.SIMPLE)
    branches_table.add_column("id")
    branches_table.add_column("name")
    branches_table.add_column("parent")
    branches_table.add_column("state")
    branches_table.add_column("start")
    branches_table.add_column("commits")

    for branch in branches:
        commits = len(
            [
                task
                for task in tasks
                if task["branch_id"] == branch["id"] and task["status"] == "COMPLETED"
            ]
        )
        branches_table.add_row(
            branch_display_id(branch["id"]),
            colored(branch["name"], branch["color"]),
            branch_display_id(branch["parent_id"]),
            branch_state(branch),
            date_to_display_str(branch["start_date"]),
            str(commits),
        )

    console = Console()
    console.print(branches_table)


def single_branch_view(branch: Branch, tasks: Optional[list[Task]] = None) -> None:
    header("branch")

    branch_table = Table(box=box.SIMPLE)
    branch_table.add_column("property")
    branch_table.add_column("value")

    branch_table.add_row("id", branch_display_id(branch["id"]))
    branch_table.add_row("name", colored(branch["name"], branch["color"]))
    branch_table.add_row("description", branch["description"] or "")
    branch_table.add_row("color", branch["color"])
    branch_table.add_row("parent", branch_display_id(branch["parent_id"]))
    branch_table.add_row("state", branch_state(branch))
    branch_table.add_row("start_date", date_to_display_str(branch["start_date"]))
    branch_table.add_row(
        "target_date", date_to_display_str_optional(branch["target_date"]) or ""
    )
    branch_table.add_row(
        "restored_date", date_to_display_str_optional(branch["restored_date"]) or ""
    )
    branch_table.add_row("created", branch["created"].to_datetime_string())
    branch_table.add_row("updated", branch["updated"].to_datetime_string())

    console = Console()
    console.print(branch_table)

    if tasks is not None and len(tasks) > 0:
        tasks_table = Table(box=box.SIMPLE, title="commits")
        tasks_table.add_column("state")
        tasks_table.add_column("date")
        tasks_table.add_column("title")
        for task in sorted(tasks, key=lambda t: t["date"], reverse=True):
            tasks_table.add_row(task_state(task), date_to_display_str(task["date"]), task["title"])
        console.print(tasks_table)
