# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from gitdaily.model.entity_id import EntityId

BranchStatus = Literal["active", "merged", "archived"]


class Branch(TypedDict):
    id: Optional[EntityId]
    name: str
    description: Optional[str]
    color: str
    parent_id: Optional[EntityId]
    status: BranchStatus
    start_date: pendulum.Date
    target_date: Optional[pendulum.Date]
    restored_date: Optional[pendulum.Date]
    merge_target_node_id: Optional[EntityId]
    created: pendulum.DateTime
    updated: pendulum.DateTime
