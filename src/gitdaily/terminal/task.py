# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from gitdaily.errors import BranchNotFoundError, InvalidTransitionError, TaskNotFoundError
from gitdaily.model.entity_id import MAIN_BRANCH_ID
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.service import task as task_service
from gitdaily.terminal.custom_typer import AliasedTyperGroup
from gitdaily.terminal.error import exit_with_error
from gitdaily.terminal.parse import parse_branch_id, parse_date, parse_task_id
from gitdaily.view import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    branch: Annotated[
        str, typer.Option("--branch", "-b", help="branch id, defaults to main")
    ] = MAIN_BRANCH_ID,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Plan a task on a branch."""
    branch_id = parse_branch_id(branch)
    try:
        id = task_service.create_task(branch_id, title, description, date)
    except BranchNotFoundError as e:
        exit_with_error(e)

    task_report.single_task_view(TASK_REPO.get_task(id))


@app.command("list, ls")
def list_tasks(
    branch: Annotated[Optional[str], typer.Option("--branch", "-b")] = None,
    planned: Annotated[
        bool, typer.Option("--planned", "-p", help="only planned tasks")
    ] = False,
    completed: Annotated[
        bool, typer.Option("--completed", "-c", help="only completed tasks")
    ] = False,
) -> None:
    tasks = TASK_REPO.get_all_tasks()
    if branch is not None:
        branch_id = parse_branch_id(branch)
        tasks = [task for task in tasks if task["branch_id"] == branch_id]
    if planned:
        tasks = [task for task in tasks if task["status"] == "PLANNED"]
    if completed:
        tasks = [task for task in tasks if task["status"] == "COMPLETED"]
    tasks.sort(key=lambda task: task["date"], reverse=True)

    task_report.tasks_view("tasks", tasks, BRANCH_REPO.get_all_branches())


@app.command("complete, c", no_args_is_help=True)
def complete(
    id: str,
    message: Annotated[str, typer.Option("--message", "-m", help="commit message")],
) -> None:
    """Commit a planned task."""
    task_id = parse_task_id(id)
    try:
        task_service.complete_task(task_id, message)
    except (TaskNotFoundError, InvalidTransitionError) as e:
        exit_with_error(e)

    task_report.single_task_view(TASK_REPO.get_task(task_id))


@app.command("uncomplete, uc", no_args_is_help=True)
def uncomplete(id: str) -> None:
    task_id = parse_task_id(id)
    try:
        task_service.uncomplete_task(task_id)
    except (TaskNotFoundError, InvalidTransitionError) as e:
        exit_with_error(e)

    task_report.single_task_view(TASK_REPO.get_task(task_id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-dt", parser=parse_date, help=DATE_HELP),
    ] = None,
    branch: Annotated[Optional[str], typer.Option("--branch", "-b")] = None,
) -> None:
    task_id = parse_task_id(id)
    try:
        if branch is not None:
            task_service.move_task(task_id, parse_branch_id(branch))
        TASK_REPO.modify_task(
            task_id,
            title=title,
            description=description,
            date=date,
            remove_description=remove_description,
        )
    except (BranchNotFoundError, TaskNotFoundError) as e:
        exit_with_error(e)

    task_report.single_task_view(TASK_REPO.get_task(task_id))


@app.command("delete, del", no_args_is_help=True)
def delete(id: str) -> None:
    task_id = parse_task_id(id)
    try:
        TASK_REPO.delete_task(task_id)
    except TaskNotFoundError as e:
        exit_with_error(e)

    list_tasks()
