# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias

from rich.console import Console
from rich.text import Text

from gitdaily.model.scene import AxisMarker, Connector, PositionedNode, Scene
from gitdaily.view.header import header

CELL_WIDTH = 2
AXIS_COLUMN_WIDTH = 12
GUIDE_STYLE = "grey37"
LABEL_STYLE = "grey62"
TODAY_STYLE = "bold #3b82f6"

Cell: TypeAlias = tuple[str, str]


class GraphCanvas:
    """
    Character grid with one line per scene row and one cell per distinct branch x.
    """

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        xs = {scene["center_x"]}
        xs.update(node["x"] for node in scene["nodes"])
        xs.update(dot["x"] for dot in scene["fork_dots"])
        for connector in scene["connectors"]:
            xs.add(connector["start"]["x"])
            xs.add(connector["end"]["x"])
        self.columns = {x: index for index, x in enumerate(sorted(xs))}
        self.grid: list[list[Optional[Cell]]] = [
            [None] * len(self.columns) for _ in scene["rows"]
        ]
        self.fills: list[list[Optional[str]]] = [
            [None] * len(self.columns) for _ in scene["rows"]
        ]

    def row_index(self, y: float) -> int:
        rows = self.scene["rows"]
        if len(rows) == 0:
            return 0
        index = round((y - rows[0]["y"]) / self.scene["row_height"])
        return max(0, min(len(rows) - 1, index))

    def put(self, row: int, x: float, char: str, style: str, force: bool = False) -> None:
        column = self.columns[x]
        if force or self.grid[row][column] is None:
            self.grid[row][column] = (char, style)

    def fill_between(self, row: int, x1: float, x2: float, style: str) -> None:
        left, right = sorted((self.columns[x1], self.columns[x2]))
        for column in range(left, right):
            if self.fills[row][column] is None:
                self.fills[row][column] = style

    def draw_guide(self) -> None:
        for row in range(len(self.scene["rows"])):
            self.put(row, self.scene["center_x"], "┆", GUIDE_STYLE)

    def draw_connector(self, connector: Connector) -> None:
        style = connector["color"]
        if connector["style"] != "normal":
            style = f"dim {style}"
        start = connector["start"]
        end = connector["end"]
        start_row = self.row_index(start["y"])
        end_row = self.row_index(end["y"])
        kind = connector["kind"]

        if kind == "sequential":
            for row in range(min(start_row, end_row) + 1, max(start_row, end_row)):
                self.put(row, start["x"], "│", style, force=True)
            return

        # fork, stub and merge all turn a corner on the parent's row
        if kind == "merge":
            corner_row, vertical_x, other_x = end_row, start["x"], end["x"]
            span = range(end_row + 1, start_row)
            corner = "╮" if vertical_x > other_x else "╭"
        else:
            corner_row, vertical_x, other_x = start_row, end["x"], start["x"]
            span = range(end_row + 1, start_row)
            corner = "╯" if vertical_x > other_x else "╰"

        line = "┊" if connector["dashed"] else "│"
        for row in span:
            self.put(row, vertical_x, line, style, force=True)
        if vertical_x != other_x:
            self.put(corner_row, vertical_x, corner, style, force=True)
            self.fill_between(corner_row, vertical_x, other_x, style)

    def draw_node(self, node: PositionedNode) -> None:
        row = self.row_index(node["y"])
        if node["is_mini"]:
            char = "·"
        elif node["is_merge_commit"]:
            char = "◉"
        elif node["status"] == "COMPLETED":
            char = "●"
        else:
            char = "○"
        style = node["color"]
        if node["is_ghost"]:
            style = f"dim {style}"
        self.put(row, node["x"], char, style, force=True)

    def render_row(self, row: int) -> Text:
        text = Text()
        for column, cell in enumerate(self.grid[row]):
            if cell is None:
                text.append(" ")
            else:
                text.append(cell[0], style=cell[1])
            fill = self.fills[row][column]
            if fill is None:
                text.append(" " * (CELL_WIDTH - 1))
            else:
                text.append("─" * (CELL_WIDTH - 1), style=fill)
        return text


def marker_text(markers: list[AxisMarker]) -> Text:
    text = Text()
    for marker in markers:
        if marker["label"] is None:
            continue
        style = TODAY_STYLE if marker["is_today"] else LABEL_STYLE
        if marker["kind"] in ("week_label", "month_label"):
            style = f"bold {style}"
        if len(text) > 0:
            text.append(" ")
        text.append(marker["label"], style=style)
    if any(marker["is_today"] for marker in markers):
        text.append(" ◀", style=TODAY_STYLE)
    text.truncate(AXIS_COLUMN_WIDTH, pad=True)
    return text


def graph_view(scene: Scene, sub_header: Optional[str] = None) -> None:
    header("graph", sub_header)

    canvas = GraphCanvas(scene)
    canvas.draw_guide()
    for connector in scene["connectors"]:
        canvas.draw_connector(connector)
    for dot in scene["fork_dots"]:
        canvas.put(canvas.row_index(dot["y"]), dot["x"], "•", dot["color"], force=True)
    for node in scene["nodes"]:
        canvas.draw_node(node)

    # labels may sit between rows, so match markers to rows by date
    row_by_date = {row["date"]: index for index, row in enumerate(scene["rows"])}
    markers_by_row: dict[int, list[AxisMarker]] = {}
    for marker in scene["markers"]:
        markers_by_row.setdefault(row_by_date[marker["date"]], []).append(marker)
    titles_by_row: dict[int, list[PositionedNode]] = {}
    for node in scene["nodes"]:
        if not node["is_mini"]:
            titles_by_row.setdefault(canvas.row_index(node["y"]), []).append(node)

    console = Console()
    for row in range(len(scene["rows"])):
        line = marker_text(markers_by_row.get(row, []))
        line.append(" ")
        line.append_text(canvas.render_row(row))
        for node in titles_by_row.get(row, []):
            line.append(" ")
            line.append(node["title"], style="dim" if node["is_ghost"] else node["color"])
        console.print(line, no_wrap=True, overflow="ellipsis")
