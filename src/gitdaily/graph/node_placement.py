# SPDX-License-Identifier: MIT

from gitdaily.color import MAIN_BRANCH_COLOR
from gitdaily.graph.granularity import is_mini, node_radius, stroke_width
from gitdaily.graph.hierarchy import BranchTree
from gitdaily.graph.style import is_before_restore, node_style
from gitdaily.graph.time_axis import y_for_date
from gitdaily.model.entity_id import EntityId
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.model.scene import PositionedNode, Row
from gitdaily.model.task import Task

NODE_SPACING = 16
MAX_OFFSET_RATIO = 0.45


def collision_offset(index: int, group_size: int, row_height: int) -> float:
    """
    Vertical offset of the index-th node in a same-day same-branch group,
    centered on the row and clamped inside it.
    """
    if group_size <= 1:
        return 0
    total_height = (group_size - 1) * NODE_SPACING
    offset = index * NODE_SPACING - total_height / 2
    max_offset = row_height * MAX_OFFSET_RATIO
    return max(-max_offset, min(max_offset, offset))


def place_nodes(
    tasks: list[Task],
    rows: list[Row],
    tree: BranchTree,
    branch_x: dict[EntityId, float],
    center_x: float,
    granularity: TimeGranularity,
    row_height: int,
) -> list[PositionedNode]:
    groups: dict[tuple, list[int]] = {}
    for position, task in enumerate(tasks):
        groups.setdefault((task["date"], task["branch_id"]), []).append(position)

    group_indexes: dict[int, int] = {}
    for members in groups.values():
        for index, position in enumerate(members):
            group_indexes[position] = index

    nodes: list[PositionedNode] = []
    for position, task in enumerate(tasks):
        branch = tree.get(task["branch_id"])
        depth = tree.depth(task["branch_id"])
        mini = is_mini(depth, granularity)
        ghost = is_before_restore(branch, task["date"])
        style = node_style(branch["color"] if branch is not None else MAIN_BRANCH_COLOR, ghost)

        group_size = len(groups[(task["date"], task["branch_id"])])
        group_index = group_indexes[position]

        node: PositionedNode = {
            **task,
            "x": center_x + branch_x.get(task["branch_id"], 0),
            "y": y_for_date(rows, task["date"])
            + collision_offset(group_index, group_size, row_height),
            "depth": depth,
            "is_mini": mini,
            "group_index": group_index,
            "is_ghost": style["is_ghost"],
            "color": style["color"],
            "opacity": style["opacity"],
            "stroke_width": stroke_width(depth, mini),
            "radius": node_radius(mini, task["is_merge_commit"]),
        }
        nodes.append(node)

    return nodes
