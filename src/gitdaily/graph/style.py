# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from gitdaily.color import GHOST_LINE_COLOR, GHOST_NODE_COLOR
from gitdaily.model.branch import Branch
from gitdaily.model.scene import ConnectorKind, ConnectorStyle

NODE_OPACITY = 1.0
GHOST_NODE_OPACITY = 0.6

CONNECTOR_OPACITIES: dict[ConnectorKind, float] = {
    "sequential": 1.0,
    "fork": 0.8,
    "stub": 0.5,
    "merge": 1.0,
}
GHOST_CONNECTOR_OPACITIES: dict[ConnectorKind, float] = {
    "sequential": 1.0,
    "fork": 0.4,
    "stub": 0.5,
    "merge": 1.0,
}

DASHED_KINDS: set[ConnectorKind] = {"fork", "stub"}
DASH_PATTERN = "4 3"


class NodeStyle(TypedDict):
    is_ghost: bool
    color: str
    opacity: float


class ConnectorStyling(TypedDict):
    style: ConnectorStyle
    color: str
    opacity: float
    dashed: bool


def is_before_restore(branch: Optional[Branch], date: Optional[pendulum.Date]) -> bool:
    """
    True when date predates the branch's restore date.
    """
    if branch is None or date is None:
        return False
    restored_date = branch.get("restored_date")
    if restored_date is None:
        return False
    return date < restored_date


def node_style(color: str, is_ghost: bool) -> NodeStyle:
    if is_ghost:
        return {"is_ghost": True, "color": GHOST_NODE_COLOR, "opacity": GHOST_NODE_OPACITY}
    return {"is_ghost": False, "color": color, "opacity": NODE_OPACITY}


def connector_style(kind: ConnectorKind, color: str, is_ghost: bool) -> ConnectorStyling:
    dashed = kind in DASHED_KINDS
    if kind == "stub":
        return {
            "style": "muted",
            "color": color,
            "opacity": CONNECTOR_OPACITIES[kind],
            "dashed": dashed,
        }
    if is_ghost:
        return {
            "style": "ghost",
            "color": GHOST_LINE_COLOR,
            "opacity": GHOST_CONNECTOR_OPACITIES[kind],
            "dashed": dashed,
        }
    return {
        "style": "normal",
        "color": color,
        "opacity": CONNECTOR_OPACITIES[kind],
        "dashed": dashed,
    }
