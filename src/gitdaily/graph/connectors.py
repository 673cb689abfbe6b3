# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from gitdaily.graph.granularity import fork_dot_radius, is_mini, stroke_width
from gitdaily.graph.hierarchy import BranchTree
from gitdaily.graph.style import connector_style, is_before_restore
from gitdaily.graph.time_axis import y_for_date
from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import EntityId
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.model.scene import (
    Connector,
    ConnectorKind,
    ForkDot,
    Point,
    PositionedNode,
    Row,
)

logger = logging.getLogger(__name__)

STUB_RISE = 20
STUB_HEIGHT = 40


def sort_branch_nodes(nodes: list[PositionedNode]) -> list[PositionedNode]:
    """
    Newest first; on the same date completed nodes come before planned ones.
    """
    by_status = sorted(nodes, key=lambda n: 0 if n["status"] == "COMPLETED" else 1)
    return sorted(by_status, key=lambda n: n["date"], reverse=True)


def point(x: float, y: float) -> Point:
    return {"x": x, "y": y}


def make_connector(
    kind: ConnectorKind,
    branch: Branch,
    start: Point,
    end: Point,
    control_points: list[Point],
    width: float,
    source_date: Optional[pendulum.Date],
) -> Connector:
    ghost = is_before_restore(branch, source_date)
    styling = connector_style(kind, branch["color"], ghost)
    return {
        "kind": kind,
        "branch_id": branch["id"],
        "start": start,
        "end": end,
        "control_points": control_points,
        "style": styling["style"],
        "color": styling["color"],
        "opacity": styling["opacity"],
        "stroke_width": width,
        "dashed": styling["dashed"],
        "source_date": source_date,
    }


def sequential_connectors(
    branch: Branch, branch_nodes: list[PositionedNode], width: float
) -> list[Connector]:
    connectors: list[Connector] = []
    for newer, older in zip(branch_nodes, branch_nodes[1:]):
        # a segment belongs to the node it flows out of
        connectors.append(
            make_connector(
                "sequential",
                branch,
                point(newer["x"], newer["y"]),
                point(older["x"], older["y"]),
                [],
                width,
                older["date"],
            )
        )
    return connectors


def fork_connector(
    branch: Branch,
    branch_nodes: list[PositionedNode],
    anchor: Point,
    own_x: float,
    width: float,
) -> Connector:
    if len(branch_nodes) == 0:
        logger.debug("branch %s has no nodes, drawing a stub fork", branch["id"])
        return make_connector(
            "stub",
            branch,
            anchor,
            point(own_x, anchor["y"] - STUB_HEIGHT),
            [point(anchor["x"], anchor["y"] - STUB_RISE)],
            width,
            None,
        )

    oldest = branch_nodes[-1]
    mid_y = (anchor["y"] + oldest["y"]) / 2
    return make_connector(
        "fork",
        branch,
        anchor,
        point(oldest["x"], oldest["y"]),
        [point(anchor["x"], mid_y), point(oldest["x"], mid_y)],
        width,
        oldest["date"],
    )


def merge_connector(
    branch: Branch,
    branch_nodes: list[PositionedNode],
    node_points: dict[EntityId, Point],
    width: float,
) -> Optional[Connector]:
    target_id = branch.get("merge_target_node_id")
    if branch["status"] != "merged" or len(branch_nodes) == 0:
        return None
    if target_id is None or target_id not in node_points:
        logger.debug("merge target of branch %s does not resolve", branch["id"])
        return None

    newest = branch_nodes[0]
    target = node_points[target_id]
    mid_y = (newest["y"] + target["y"]) / 2
    return make_connector(
        "merge",
        branch,
        point(newest["x"], newest["y"]),
        point(target["x"], target["y"]),
        [point(newest["x"], mid_y), point(target["x"], mid_y)],
        width,
        newest["date"],
    )


def build_connectors(
    branches: list[Branch],
    nodes: list[PositionedNode],
    rows: list[Row],
    tree: BranchTree,
    branch_x: dict[EntityId, float],
    center_x: float,
    granularity: TimeGranularity,
) -> tuple[list[Connector], list[ForkDot]]:
    """
    Sequential, fork and merge geometry for every branch, plus the fork dots.
    """
    node_points: dict[EntityId, Point] = {
        node["id"]: point(node["x"], node["y"]) for node in nodes if node["id"] is not None
    }
    nodes_by_branch: dict[EntityId, list[PositionedNode]] = {}
    for node in nodes:
        nodes_by_branch.setdefault(node["branch_id"], []).append(node)

    connectors: list[Connector] = []
    fork_dots: list[ForkDot] = []
    for branch in branches:
        branch_id = branch["id"]
        if branch_id is None:
            continue
        depth = tree.depth(branch_id)
        mini = is_mini(depth, granularity)
        width = stroke_width(depth, mini)
        branch_nodes = sort_branch_nodes(nodes_by_branch.get(branch_id, []))

        connectors.extend(sequential_connectors(branch, branch_nodes, width))

        parent_id = branch["parent_id"]
        if parent_id is not None:
            anchor = point(
                center_x + branch_x.get(parent_id, 0),
                y_for_date(rows, branch["start_date"]),
            )
            fork = fork_connector(
                branch, branch_nodes, anchor, center_x + branch_x.get(branch_id, 0), width
            )
            connectors.append(fork)
            fork_dots.append(
                {
                    "branch_id": branch_id,
                    "parent_id": parent_id,
                    "x": anchor["x"],
                    "y": anchor["y"],
                    "radius": fork_dot_radius(mini),
                    "color": fork["color"],
                    "style": "ghost" if fork["style"] == "ghost" else "normal",
                }
            )

        merge = merge_connector(branch, branch_nodes, node_points, width)
        if merge is not None:
            connectors.append(merge)

    return connectors, fork_dots
