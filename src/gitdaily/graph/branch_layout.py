# SPDX-License-Identifier: MIT

import logging
from typing import Literal, TypeAlias

from gitdaily.graph.granularity import hierarchy_gap, is_mini
from gitdaily.graph.hierarchy import BranchTree
from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import MAIN_BRANCH_ID, EntityId
from gitdaily.model.granularity_type import Alignment, TimeGranularity

logger = logging.getLogger(__name__)

WIDE_VIEWPORT_WIDTH = 768
LINEAR_CENTER_X = 50
LINEAR_GAP_FACTOR = 0.7
LINEAR_ORPHAN_GAP = 40

Side: TypeAlias = Literal["right", "left"]


class LayoutCursor:
    """
    Running offset per side plus the offsets assigned so far.
    """

    def __init__(self) -> None:
        self.right: float = 0
        self.left: float = 0
        self.offsets: dict[EntityId, float] = {MAIN_BRANCH_ID: 0}

    def advance(self, side: Side, gap: float) -> float:
        if side == "right":
            self.right += gap
            return self.right
        self.left -= gap
        return self.left

    def place(self, branch_id: EntityId, side: Side, gap: float) -> None:
        self.offsets[branch_id] = self.advance(side, gap)


class LayoutContext:
    def __init__(
        self,
        tree: BranchTree,
        order: dict[EntityId, int],
        granularity: TimeGranularity,
        spacing: float,
        centered: bool,
    ) -> None:
        self.tree = tree
        self.order = order
        self.granularity = granularity
        self.spacing = spacing
        self.centered = centered


def centered_mode(alignment: Alignment, viewport_width: float) -> bool:
    return alignment == "center" and viewport_width >= WIDE_VIEWPORT_WIDTH


def center_x(centered: bool, viewport_width: float) -> float:
    if centered:
        return viewport_width / 2
    return LINEAR_CENTER_X


def gap_for(context: LayoutContext, branch_id: EntityId) -> float:
    depth = context.tree.depth(branch_id)
    return hierarchy_gap(depth, is_mini(depth, context.granularity), context.spacing)


def children_by_start(context: LayoutContext, branch_id: EntityId) -> list[EntityId]:
    return sorted(
        [child for child in context.tree.get_children(branch_id) if child in context.order],
        key=lambda child: context.order[child],
    )


def layout_family(
    context: LayoutContext, cursor: LayoutCursor, branch_id: EntityId, side: Side
) -> None:
    """
    Place a branch and then its descendants, all on the same side.
    """
    if branch_id in cursor.offsets:
        return
    gap = gap_for(context, branch_id)
    if not context.centered:
        gap *= LINEAR_GAP_FACTOR
    cursor.place(branch_id, side, gap)
    for child_id in children_by_start(context, branch_id):
        layout_family(context, cursor, child_id, side)


def layout_branches(
    branches: list[Branch],
    tree: BranchTree,
    granularity: TimeGranularity,
    spacing: float,
    centered: bool,
) -> dict[EntityId, float]:
    """
    Horizontal offset of every branch from the central axis, main at 0.

    Centered mode alternates root lineages right/left and stacks each lineage on
    its side; linear mode pushes every branch to the right with compacted gaps.
    """
    ordered = sorted(
        [b for b in branches if b["id"] is not None and b["id"] != MAIN_BRANCH_ID],
        key=lambda b: b["start_date"],
    )
    order = {branch["id"]: index for index, branch in enumerate(ordered)}
    context = LayoutContext(tree, order, granularity, spacing, centered)
    cursor = LayoutCursor()

    roots = [branch for branch in ordered if tree.is_root(branch)]
    for index, root in enumerate(roots):
        side: Side = "right" if not centered or index % 2 == 0 else "left"
        layout_family(context, cursor, root["id"], side)

    for branch in ordered:
        branch_id = branch["id"]
        if branch_id in cursor.offsets:
            continue
        logger.debug("branch %s is unreachable from a root, appending right", branch_id)
        if centered:
            cursor.place(branch_id, "right", gap_for(context, branch_id))
        else:
            cursor.place(branch_id, "right", LINEAR_ORPHAN_GAP * spacing)

    return cursor.offsets
