# SPDX-License-Identifier: MIT

from typing import Optional

from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import MAIN_BRANCH_ID, EntityId
from gitdaily.model.task import Task
from gitdaily.repository.id_map import ID_MAP_REPO


def branch_display_id(branch_id: Optional[EntityId]) -> str:
    if branch_id is None:
        return ""
    if branch_id == MAIN_BRANCH_ID:
        return MAIN_BRANCH_ID
    return str(ID_MAP_REPO.associate_id("branches", branch_id))


def task_display_id(task_id: Optional[EntityId]) -> str:
    if task_id is None:
        return ""
    return str(ID_MAP_REPO.associate_id("tasks", task_id))


def task_state(task: Task) -> str:
    """
    "M" for merge commits, "X" for completed tasks, " " for planned ones.
    """
    if task["is_merge_commit"]:
        return "M"
    if task["status"] == "COMPLETED":
        return "X"
    return " "


def branch_state(branch: Branch) -> str:
    if branch["status"] == "merged":
        return "merged"
    if branch["status"] == "archived":
        return "archived"
    if branch["restored_date"] is not None:
        return "restored"
    return "active"


def colored(value: str, color: Optional[str]) -> str:
    if color is None or color == "":
        return value
    return f"[{color}]{value}[/{color}]"
