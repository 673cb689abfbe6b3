# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from gitdaily.errors import BranchNotFoundError, InvalidTransitionError
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.service import branch as branch_service
from gitdaily.terminal.custom_typer import AliasedTyperGroup
from gitdaily.terminal.error import exit_with_error
from gitdaily.terminal.parse import parse_branch_id, parse_date
from gitdaily.view import branch as branch_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    parent: Annotated[
        Optional[str],
        typer.Option("--parent", "-p", help="parent branch id, defaults to main"),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    start_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    target_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--target", "-tg", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Fork a new branch."""
    config = CONFIGURATION_REPO.get_config()
    parent_id = parse_branch_id(parent) if parent is not None else None

    try:
        id = branch_service.create_branch(
            name,
            parent_id=parent_id,
            description=description,
            color=color,
            start_date=start_date,
            target_date=target_date,
            random_color=config["random_color_for_branches"],
        )
    except BranchNotFoundError as e:
        exit_with_error(e)

    branch_report.single_branch_view(BRANCH_REPO.get_branch(id))


@app.command("list, ls")
def list_branches() -> None:
    """List active and merged branches."""
    branch_report.branches_view(
        "branches", branch_service.get_active_branches(), TASK_REPO.get_all_tasks()
    )


@app.command("archived, ar")
def archived() -> None:
    """List archived branches."""
    branch_report.branches_view(
        "archived branches", branch_service.get_archived_branches(), TASK_REPO.get_all_tasks()
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: str) -> None:
    branch_id = parse_branch_id(id)
    try:
        branch = BRANCH_REPO.get_branch(branch_id)
    except BranchNotFoundError as e:
        exit_with_error(e)
    branch_report.single_branch_view(branch, TASK_REPO.get_tasks_for_branch(branch_id))


@app.command("merge, mg", no_args_is_help=True)
def merge(
    id: str,
    message: Annotated[str, typer.Option("--message", "-m", help="merge commit message")],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Merge a branch back into its parent."""
    branch_id = parse_branch_id(id)
    try:
        branch_service.merge_branch(branch_id, message, date)
    except (BranchNotFoundError, InvalidTransitionError) as e:
        exit_with_error(e)

    branch_report.single_branch_view(
        BRANCH_REPO.get_branch(branch_id), TASK_REPO.get_tasks_for_branch(branch_id)
    )


@app.command("archive, arc", no_args_is_help=True)
def archive(id: str) -> None:
    branch_id = parse_branch_id(id)
    try:
        branch_service.archive_branch(branch_id)
    except (BranchNotFoundError, InvalidTransitionError) as e:
        exit_with_error(e)

    branch_report.single_branch_view(BRANCH_REPO.get_branch(branch_id))


@app.command("restore, rs", no_args_is_help=True)
def restore(
    id: str,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Restore an archived branch; earlier history is drawn ghosted."""
    branch_id = parse_branch_id(id)
    try:
        branch_service.restore_branch(branch_id, date)
    except (BranchNotFoundError, InvalidTransitionError) as e:
        exit_with_error(e)

    branch_report.single_branch_view(
        BRANCH_REPO.get_branch(branch_id), TASK_REPO.get_tasks_for_branch(branch_id)
    )


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete a branch and its tasks. Child branches move to its parent."""
    branch_id = parse_branch_id(id)
    try:
        branch = BRANCH_REPO.get_branch(branch_id)
    except BranchNotFoundError as e:
        exit_with_error(e)

    if not yes:
        typer.confirm(f"Delete branch '{branch['name']}' and its tasks?", abort=True)

    try:
        branch_service.delete_branch(branch_id)
    except InvalidTransitionError as e:
        exit_with_error(e)

    list_branches()
