# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from gitdaily.color import get_palette_color, get_random_color
from gitdaily.errors import BranchNotFoundError, InvalidTransitionError
from gitdaily.graph.hierarchy import BranchTree
from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import MAIN_BRANCH_ID, EntityId
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.template.branch import get_branch_template, get_main_branch_template
from gitdaily.template.task import get_task_template
from gitdaily.time import today_local

logger = logging.getLogger(__name__)

RESTORE_TASK_TITLE = "Project Restarted"
RESTORE_TASK_DESCRIPTION = "Restored from archive"


def ensure_main_branch() -> None:
    if not BRANCH_REPO.has_branch(MAIN_BRANCH_ID):
        BRANCH_REPO.save_new_branch(get_main_branch_template())
        logger.info("seeded main branch")


def create_branch(
    name: str,
    parent_id: Optional[EntityId] = None,
    description: Optional[str] = None,
    color: Optional[str] = None,
    start_date: Optional[pendulum.Date] = None,
    target_date: Optional[pendulum.Date] = None,
    random_color: bool = True,
) -> EntityId:
    """
    Create an active branch, forking from main unless a parent is given.
    """
    if parent_id is None:
        parent_id = MAIN_BRANCH_ID
    if not BRANCH_REPO.has_branch(parent_id):
        raise BranchNotFoundError(parent_id)

    if color is None:
        if random_color:
            color = get_random_color()
        else:
            color = get_palette_color(len(BRANCH_REPO.branches) - 1)

    branch = get_branch_template()
    branch["name"] = name
    branch["description"] = description
    branch["color"] = color
    branch["parent_id"] = parent_id
    branch["start_date"] = start_date if start_date is not None else today_local()
    branch["target_date"] = target_date

    return BRANCH_REPO.save_new_branch(branch)


def merge_branch(
    id: EntityId, commit_message: str, date: Optional[pendulum.Date] = None
) -> EntityId:
    """
    Merge a branch into its parent.

    A completed merge commit is added to the parent (main if the parent is
    gone) and the branch points at it. Returns the merge commit's id.
    """
    if id == MAIN_BRANCH_ID:
        raise InvalidTransitionError("main cannot be merged")
    if commit_message.strip() == "":
        raise InvalidTransitionError("a merge needs a commit message")

    branch = BRANCH_REPO.get_branch(id)
    if branch["status"] == "merged":
        raise InvalidTransitionError(f"branch '{branch['name']}' is already merged")
    if branch["status"] == "archived":
        raise InvalidTransitionError(f"branch '{branch['name']}' is archived")

    target_id = branch["parent_id"]
    if target_id is None or not BRANCH_REPO.has_branch(target_id):
        target_id = MAIN_BRANCH_ID

    merge_task = get_task_template()
    merge_task["branch_id"] = target_id
    merge_task["title"] = f"Merge branch '{branch['name']}'"
    merge_task["description"] = f"Merged {branch['name']} into {target_id}"
    merge_task["date"] = date if date is not None else today_local()
    merge_task["status"] = "COMPLETED"
    merge_task["is_merge_commit"] = True
    merge_task["commit_message"] = commit_message
    merge_task_id = TASK_REPO.save_new_task(merge_task)

    BRANCH_REPO.modify_branch(id, status="merged", merge_target_node_id=merge_task_id)
    logger.info("merged branch %s into %s", id, target_id)

    return merge_task_id


def archive_branch(id: EntityId) -> None:
    if id == MAIN_BRANCH_ID:
        raise InvalidTransitionError("main cannot be archived")

    branch = BRANCH_REPO.get_branch(id)
    if branch["status"] == "archived":
        raise InvalidTransitionError(f"branch '{branch['name']}' is already archived")

    BRANCH_REPO.modify_branch(id, status="archived")
    logger.info("archived branch %s", id)


def restore_branch(id: EntityId, date: Optional[pendulum.Date] = None) -> EntityId:
    """
    Bring an archived branch back.

    History before the restore date is drawn as ghosted. A planned restart
    task marks the new beginning; its id is returned.
    """
    branch = BRANCH_REPO.get_branch(id)
    if branch["status"] != "archived":
        raise InvalidTransitionError(f"branch '{branch['name']}' is not archived")

    restored_date = date if date is not None else today_local()
    BRANCH_REPO.modify_branch(id, status="active", restored_date=restored_date)

    restart_task = get_task_template()
    restart_task["branch_id"] = id
    restart_task["title"] = RESTORE_TASK_TITLE
    restart_task["description"] = RESTORE_TASK_DESCRIPTION
    restart_task["date"] = restored_date
    restart_task_id = TASK_REPO.save_new_task(restart_task)
    logger.info("restored branch %s on %s", id, restored_date)

    return restart_task_id


def delete_branch(id: EntityId) -> None:
    """
    Delete a branch and its tasks, handing its children to its own parent.
    """
    if id == MAIN_BRANCH_ID:
        raise InvalidTransitionError("main cannot be deleted")

    branch = BRANCH_REPO.get_branch(id)
    new_parent_id = branch["parent_id"]
    if new_parent_id is None or not BRANCH_REPO.has_branch(new_parent_id):
        new_parent_id = MAIN_BRANCH_ID

    for child in BRANCH_REPO.get_all_branches():
        if child["parent_id"] == id and child["id"] is not None:
            BRANCH_REPO.modify_branch(child["id"], parent_id=new_parent_id)
            logger.info("re-parented branch %s to %s", child["id"], new_parent_id)

    for task in TASK_REPO.get_tasks_for_branch(id):
        if task["id"] is not None:
            TASK_REPO.delete_task(task["id"])

    BRANCH_REPO.delete_branch(id)
    logger.info("deleted branch %s", id)


def get_active_branches() -> list[Branch]:
    return [b for b in BRANCH_REPO.get_all_branches() if b["status"] != "archived"]


def get_archived_branches() -> list[Branch]:
    return [b for b in BRANCH_REPO.get_all_branches() if b["status"] == "archived"]


def get_lineage(id: EntityId) -> list[EntityId]:
    if not BRANCH_REPO.has_branch(id):
        raise BranchNotFoundError(id)
    return BranchTree(BRANCH_REPO.get_all_branches()).lineage(id)
