# SPDX-License-Identifier: MIT

from pathlib import Path
from xml.sax.saxutils import escape

from gitdaily.color import PLANNED_NODE_FILL
from gitdaily.graph.style import DASH_PATTERN
from gitdaily.model.scene import AxisMarker, Connector, PositionedNode, Scene
from gitdaily.time import date_to_short_str

GUIDE_TOP = 20
CANVAS_BOTTOM_PADDING = 100
TITLE_MAX_LENGTH = 20
LABEL_COLOR = "#94a3b8"
TODAY_COLOR = "#3b82f6"
GUIDE_COLOR = "#e5e7eb"


def path_data(connector: Connector) -> str:
    """SVG path commands for a connector's start, control points and end."""
    start = connector["start"]
    end = connector["end"]
    controls = connector["control_points"]
    move = f"M {start['x']:g} {start['y']:g}"
    if len(controls) == 2:
        return (
            f"{move} C {controls[0]['x']:g} {controls[0]['y']:g}, "
            f"{controls[1]['x']:g} {controls[1]['y']:g}, {end['x']:g} {end['y']:g}"
        )
    if len(controls) == 1:
        return f"{move} Q {controls[0]['x']:g} {controls[0]['y']:g}, {end['x']:g} {end['y']:g}"
    return f"{move} L {end['x']:g} {end['y']:g}"


def truncate_title(title: str) -> str:
    if len(title) > TITLE_MAX_LENGTH:
        return title[: TITLE_MAX_LENGTH - 2] + "..."
    return title


def _marker_svg(scene: Scene, marker: AxisMarker) -> str:
    center_x = scene["center_x"]
    y = marker["y"]
    color = TODAY_COLOR if marker["is_today"] else LABEL_COLOR
    kind = marker["kind"]

    if kind == "week_label" or kind == "month_label":
        sublabel = ""
        if marker["sublabel"] is not None:
            sublabel = (
                f' <tspan font-size="8" font-weight="normal">'
                f"({escape(marker['sublabel'])})</tspan>"
            )
        return (
            f'<text x="{center_x - 20:g}" y="{y + 4:g}" text-anchor="end" font-size="10" '
            f'fill="{LABEL_COLOR}" font-weight="bold">{escape(marker["label"] or "")}'
            f"{sublabel}</text>"
        )

    parts = [
        f'<line x1="{center_x - 6:g}" y1="{y:g}" x2="{center_x + 6:g}" y2="{y:g}" '
        f'stroke="{color}" stroke-width="{2 if marker["is_today"] else 1}"/>'
    ]
    if marker["label"] is not None:
        parts.append(
            f'<text x="{center_x - 12:g}" y="{y + 3:g}" text-anchor="end" font-size="9" '
            f'fill="{color}">{escape(marker["label"])}</text>'
        )
    return "".join(parts)


def _connector_svg(connector: Connector) -> str:
    dash = f' stroke-dasharray="{DASH_PATTERN}"' if connector["dashed"] else ""
    return (
        f'<path d="{path_data(connector)}" stroke="{connector["color"]}" '
        f'stroke-width="{connector["stroke_width"]:g}" fill="none" '
        f'opacity="{connector["opacity"]:g}"{dash}/>'
    )


def _node_svg(scene: Scene, node: PositionedNode) -> str:
    completed = node["status"] == "COMPLETED"
    if completed:
        fill = "#fff" if node["is_merge_commit"] else node["color"]
    else:
        fill = PLANNED_NODE_FILL

    parts = [
        f'<g opacity="{node["opacity"]:g}">',
        f'<circle cx="{node["x"]:g}" cy="{node["y"]:g}" r="{node["radius"]:g}" '
        f'fill="{fill}" stroke="{node["color"]}" stroke-width="{node["stroke_width"]:g}"/>',
    ]
    if node["is_merge_commit"] and not node["is_mini"]:
        parts.append(
            f'<circle cx="{node["x"]:g}" cy="{node["y"]:g}" r="3" fill="{node["color"]}"/>'
        )
    if not node["is_mini"]:
        left = node["x"] < scene["center_x"]
        label_x = node["x"] - 12 if left else node["x"] + 12
        date_x = node["x"] + 12 if left else node["x"] - 12
        title_color = "#9ca3af" if node["is_ghost"] else "#1f2937"
        parts.append(
            f'<text x="{label_x:g}" y="{node["y"] + 4:g}" font-size="11" font-weight="600" '
            f'fill="{title_color}" text-anchor="{"end" if left else "start"}">'
            f"{escape(truncate_title(node['title']))}</text>"
        )
        parts.append(
            f'<text x="{date_x:g}" y="{node["y"] + 4:g}" font-size="9" fill="#6b7280" '
            f'text-anchor="{"start" if left else "end"}">'
            f"{escape(date_to_short_str(node['date']))}</text>"
        )
    parts.append("</g>")
    return "".join(parts)


def scene_to_svg(scene: Scene, width: float) -> str:
    """
    Render a scene as a standalone SVG document.
    """
    height = scene["height"] + CANVAS_BOTTOM_PADDING
    center_x = scene["center_x"]

    svg_parts = [
        f'<svg width="{width:g}" height="{height:g}" xmlns="http://www.w3.org/2000/svg" '
        'font-family="sans-serif">',
        '<rect width="100%" height="100%" fill="white"/>',
        f'<line x1="{center_x:g}" y1="{GUIDE_TOP}" x2="{center_x:g}" y2="{scene["height"]:g}" '
        f'stroke="{GUIDE_COLOR}" stroke-width="3" stroke-dasharray="4 4"/>',
    ]
    svg_parts.extend(_marker_svg(scene, marker) for marker in scene["markers"])
    svg_parts.extend(_connector_svg(connector) for connector in scene["connectors"])
    svg_parts.extend(
        f'<circle cx="{dot["x"]:g}" cy="{dot["y"]:g}" r="{dot["radius"]:g}" fill="{dot["color"]}"/>'
        for dot in scene["fork_dots"]
    )
    svg_parts.extend(_node_svg(scene, node) for node in scene["nodes"])
    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def save_svg(scene: Scene, width: float, path: Path) -> None:
    path.write_text(scene_to_svg(scene, width), encoding="utf-8")
