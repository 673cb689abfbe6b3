from xml.etree import ElementTree

from conftest import make_branch, make_task

from gitdaily.graph.scene import build_scene
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.view.graph import graph_view
from gitdaily.view.svg import path_data, save_svg, scene_to_svg, truncate_title


def sample_scene(today):
    branches = [
        make_branch("main"),
        make_branch("A", start_date="2024-02-20", status="merged", merge_target_node_id="m1"),
        make_branch("B", start_date="2024-03-01"),
    ]
    tasks = [
        make_task("a1", "A", "2024-02-22", status="COMPLETED"),
        make_task("a2", "A", "2024-02-25"),
        make_task("m1", "main", "2024-03-02", status="COMPLETED", is_merge_commit=True),
    ]
    tasks[0]["title"] = "Tom & Jerry <pilot>"
    return build_scene(branches, tasks, granularity=TimeGranularity.DAY, today=today)


def test_svg_is_well_formed(today):
    scene = sample_scene(today)

    svg = scene_to_svg(scene, 1024)

    root = ElementTree.fromstring(svg)
    assert root.get("height") == f"{scene['height'] + 100:g}"
    namespace = "{http://www.w3.org/2000/svg}"
    assert len(root.findall(f"{namespace}path")) == len(scene["connectors"])
    assert "Tom &amp; Jerry" in svg


def test_save_svg_writes_file(today, tmp_path):
    path = tmp_path / "graph.svg"

    save_svg(sample_scene(today), 1024, path)

    assert path.read_text().startswith("<svg")


def test_path_data_by_control_point_count():
    start = {"x": 0, "y": 10}
    end = {"x": 5, "y": 0}
    connector = {"start": start, "end": end, "control_points": []}
    assert path_data(connector) == "M 0 10 L 5 0"  # type: ignore[arg-type]

    connector["control_points"] = [{"x": 0, "y": 5}]
    assert path_data(connector) == "M 0 10 Q 0 5, 5 0"  # type: ignore[arg-type]

    connector["control_points"] = [{"x": 0, "y": 5}, {"x": 5, "y": 5}]
    assert path_data(connector) == "M 0 10 C 0 5, 5 5, 5 0"  # type: ignore[arg-type]


def test_truncate_title():
    assert truncate_title("short") == "short"
    assert truncate_title("a" * 30) == "a" * 18 + "..."


def test_graph_view_prints_titles(today, capsys):
    graph_view(sample_scene(today))

    output = capsys.readouterr().out
    assert "Tom & Jerry <pilot>" in output
    assert "W10" in output


def test_save_svg_writes_utf8_titles(today, tmp_path):
    branches = [make_branch("main"), make_branch("A")]
    tasks = [make_task("t1", "A", "2024-03-05", status="COMPLETED")]
    tasks[0]["title"] = "Café ☕ 日本語"
    scene = build_scene(branches, tasks, granularity=TimeGranularity.DAY, today=today)
    path = tmp_path / "graph.svg"

    save_svg(scene, 1024, path)

    assert "Café ☕ 日本語" in path.read_bytes().decode("utf-8")
