# SPDX-License-Identifier: MIT

from gitdaily.color import MAIN_BRANCH_COLOR
from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import MAIN_BRANCH_ID
from gitdaily.time import date_from_str, now_utc, today_local

MAIN_BRANCH_START_DATE = "2023-01-01"


def get_branch_template() -> Branch:
    now = now_utc()
    return {
        "id": None,
        "name": "",
        "description": None,
        "color": MAIN_BRANCH_COLOR,
        "parent_id": MAIN_BRANCH_ID,
        "status": "active",
        "start_date": today_local(),
        "target_date": None,
        "restored_date": None,
        "merge_target_node_id": None,
        "created": now,
        "updated": now,
    }


def get_main_branch_template() -> Branch:
    branch = get_branch_template()
    branch["id"] = MAIN_BRANCH_ID
    branch["name"] = "Main Timeline"
    branch["description"] = "Life Timeline"
    branch["parent_id"] = None
    branch["start_date"] = date_from_str(MAIN_BRANCH_START_DATE)
    return branch
