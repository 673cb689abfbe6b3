# SPDX-License-Identifier: MIT

from gitdaily.model.entity_id import MAIN_BRANCH_ID
from gitdaily.model.task import Task
from gitdaily.time import now_utc, today_local


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "branch_id": MAIN_BRANCH_ID,
        "title": "",
        "description": None,
        "date": today_local(),
        "status": "PLANNED",
        "is_merge_commit": False,
        "commit_message": None,
        "created": now,
        "updated": now,
    }
