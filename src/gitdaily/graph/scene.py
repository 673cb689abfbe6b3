# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from gitdaily.graph.axis import build_markers
from gitdaily.graph.branch_layout import center_x, centered_mode, layout_branches
from gitdaily.graph.connectors import build_connectors
from gitdaily.graph.granularity import row_height
from gitdaily.graph.hierarchy import BranchTree
from gitdaily.graph.node_placement import place_nodes
from gitdaily.graph.time_axis import build_rows, total_height
from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import EntityId
from gitdaily.model.granularity_type import Alignment, TimeGranularity
from gitdaily.model.scene import Scene
from gitdaily.model.task import Task

logger = logging.getLogger(__name__)


def visible_branches(
    branches: list[Branch], focus_branch_id: Optional[EntityId] = None
) -> list[Branch]:
    """
    Branches that take part in layout: archived ones are dropped and, when
    focusing, everything outside the focused branch's lineage.
    """
    active = [branch for branch in branches if branch["status"] != "archived"]
    if focus_branch_id is None:
        return active

    lineage = BranchTree(active).lineage(focus_branch_id)
    if len(lineage) == 0:
        logger.debug("focus branch %s is not visible", focus_branch_id)
    members = set(lineage)
    return [branch for branch in active if branch["id"] in members]


def build_scene(
    branches: list[Branch],
    tasks: list[Task],
    *,
    granularity: TimeGranularity,
    today: pendulum.Date,
    branch_spacing: float = 1.0,
    viewport_width: float = 1024,
    alignment: Alignment = "center",
    focus_branch_id: Optional[EntityId] = None,
) -> Scene:
    """
    Lay out branches and tasks as a commit graph.

    Pure: inputs are not mutated and equal inputs give equal scenes.
    """
    granularity = TimeGranularity(granularity)
    branches = visible_branches(branches, focus_branch_id)
    visible_ids = {branch["id"] for branch in branches}
    tasks = [task for task in tasks if task["branch_id"] in visible_ids]

    height = row_height(granularity)
    tree = BranchTree(branches)
    rows = build_rows(tasks, height, today)

    centered = centered_mode(alignment, viewport_width)
    axis_x = center_x(centered, viewport_width)
    branch_x = layout_branches(branches, tree, granularity, branch_spacing, centered)

    nodes = place_nodes(tasks, rows, tree, branch_x, axis_x, granularity, height)
    connectors, fork_dots = build_connectors(
        branches, nodes, rows, tree, branch_x, axis_x, granularity
    )
    markers = build_markers(rows, granularity, height, today)

    return {
        "granularity": granularity,
        "row_height": height,
        "center_x": axis_x,
        "centered": centered,
        "rows": rows,
        "nodes": nodes,
        "connectors": connectors,
        "fork_dots": fork_dots,
        "markers": markers,
        "branch_x": branch_x,
        "height": total_height(rows, height),
    }
