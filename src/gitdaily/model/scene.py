# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from gitdaily.model.entity_id import EntityId
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.model.task import Task

ConnectorKind = Literal["sequential", "fork", "stub", "merge"]
ConnectorStyle = Literal["normal", "ghost", "muted"]
MarkerKind = Literal["week_label", "month_label", "day_tick", "tick"]


class Point(TypedDict):
    x: float
    y: float


class Row(TypedDict):
    date: pendulum.Date
    y: float
    tasks: list[Task]


class PositionedNode(Task):
    x: float
    y: float
    depth: int
    is_mini: bool
    group_index: int
    is_ghost: bool
    color: str
    opacity: float
    stroke_width: float
    radius: float


class Connector(TypedDict):
    kind: ConnectorKind
    branch_id: EntityId
    start: Point
    end: Point
    control_points: list[Point]
    style: ConnectorStyle
    color: str
    opacity: float
    stroke_width: float
    dashed: bool
    source_date: Optional[pendulum.Date]


class ForkDot(TypedDict):
    branch_id: EntityId
    parent_id: EntityId
    x: float
    y: float
    radius: float
    color: str
    style: ConnectorStyle


class AxisMarker(TypedDict):
    kind: MarkerKind
    date: pendulum.Date
    y: float
    label: Optional[str]
    sublabel: Optional[str]
    is_today: bool


class Scene(TypedDict):
    granularity: TimeGranularity
    row_height: int
    center_x: float
    centered: bool
    rows: list[Row]
    nodes: list[PositionedNode]
    connectors: list[Connector]
    fork_dots: list[ForkDot]
    markers: list[AxisMarker]
    branch_x: dict[EntityId, float]
    height: float
