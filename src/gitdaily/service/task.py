# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from gitdaily.errors import BranchNotFoundError, InvalidTransitionError
from gitdaily.model.entity_id import EntityId
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.template.task import get_task_template
from gitdaily.time import today_local

logger = logging.getLogger(__name__)


def create_task(
    branch_id: EntityId,
    title: str,
    description: Optional[str] = None,
    date: Optional[pendulum.Date] = None,
) -> EntityId:
    """Add a planned task to a branch."""
    if not BRANCH_REPO.has_branch(branch_id):
        raise BranchNotFoundError(branch_id)

    task = get_task_template()
    task["branch_id"] = branch_id
    task["title"] = title
    task["description"] = description
    task["date"] = date if date is not None else today_local()

    return TASK_REPO.save_new_task(task)


def complete_task(id: EntityId, commit_message: str) -> None:
    """
    Commit a planned task. The commit message is mandatory.
    """
    task = TASK_REPO.get_task(id)
    if task["status"] == "COMPLETED":
        raise InvalidTransitionError(f"task '{task['title']}' is already completed")
    if commit_message.strip() == "":
        raise InvalidTransitionError("completing a task needs a commit message")

    TASK_REPO.modify_task(id, status="COMPLETED", commit_message=commit_message)
    logger.info("completed task %s", id)


def uncomplete_task(id: EntityId) -> None:
    task = TASK_REPO.get_task(id)
    if task["status"] == "PLANNED":
        raise InvalidTransitionError(f"task '{task['title']}' is not completed")
    if task["is_merge_commit"]:
        raise InvalidTransitionError("merge commits stay completed")

    TASK_REPO.modify_task(id, status="PLANNED")
    logger.info("reopened task %s", id)


def move_task(id: EntityId, branch_id: EntityId) -> None:
    if not BRANCH_REPO.has_branch(branch_id):
        raise BranchNotFoundError(branch_id)
    TASK_REPO.modify_task(id, branch_id=branch_id)
