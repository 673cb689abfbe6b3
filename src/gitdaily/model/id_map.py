# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

EntityType = Literal[
    "branches",
    "tasks",
]


IdMapDict: TypeAlias = dict[EntityType, "IdMapMapping"]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    Entity ids are UUID strings, which are tedious to type. The CLI shows a
    short synthetic id next to every branch and task and resolves it back
    through this map.

    Example:

    Task with an id of "2f1c...".
    Synthetic id for that task is 7.

    real_task_id = id_map["tasks"]["synthetic_to_real"][7] # returns "2f1c..."
    """

    branches: "IdMapMapping"
    tasks: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, str]
    real_to_synthetic: dict[str, int]
