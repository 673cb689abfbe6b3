# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from gitdaily.model.entity_id import EntityId

TaskStatus = Literal["PLANNED", "COMPLETED"]


class Task(TypedDict):
    id: Optional[EntityId]
    branch_id: EntityId
    title: str
    description: Optional[str]
    date: pendulum.Date
    status: TaskStatus
    is_merge_commit: bool
    commit_message: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime
