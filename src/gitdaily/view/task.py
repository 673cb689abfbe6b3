# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from gitdaily.color import COMPLETED_TASK_COLOR
from gitdaily.model.branch import Branch
from gitdaily.model.task import Task
from gitdaily.time import date_to_display_str
from gitdaily.view.header import header
from gitdaily.view.util import branch_display_id, colored, task_display_id, task_state


def tasks_view(
    report_name: str,
    tasks: list[Task],
    branches: list[Branch] = [],
    columns: list[str] = ["id", "state", "date", "branch", "title"],
    use_color: bool = True,
) -> None:
    header(report_name)

    branch_by_id = {branch["id"]: branch for branch in branches}

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        branch = branch_by_id.get(task["branch_id"])
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = task_display_id(task["id"])
            elif column == "state":
                column_value = task_state(task)
            elif column == "date":
                column_value = date_to_display_str(task["date"])
            elif column == "branch":
                column_value = branch["name"] if branch is not None else task["branch_id"]
            elif task[column] is not None:  # type: ignore[literal-required]
                column_value = str(task[column])  # type: ignore[literal-required]

            if use_color:
                if task["status"] == "COMPLETED":
                    column_value = colored(column_value, COMPLETED_TASK_COLOR)
                elif branch is not None:
                    column_value = colored(column_value, branch["color"])

            row.append(column_value)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)


def single_task_view(task: Task) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", task_display_id(task["id"]))
    task_table.add_row("branch", branch_display_id(task["branch_id"]))
    task_table.add_row("title", task["title"])
    task_table.add_row("description", task["description"] or "")
    task_table.add_row("date", date_to_display_str(task["date"]))
    task_table.add_row("status", task["status"])
    task_table.add_row("merge_commit", "yes" if task["is_merge_commit"] else "no")
    task_table.add_row("commit_message", task["commit_message"] or "")
    task_table.add_row("created", task["created"].to_datetime_string())
    task_table.add_row("updated", task["updated"].to_datetime_string())

    console = Console()
    console.print(task_table)
