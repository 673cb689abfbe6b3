from conftest import make_branch, make_task

from gitdaily.graph.hierarchy import BranchTree
from gitdaily.graph.node_placement import collision_offset, place_nodes
from gitdaily.graph.time_axis import build_rows, y_for_date
from gitdaily.model.granularity_type import TimeGranularity


def test_single_node_sits_on_row_center(today):
    branches = [make_branch("main"), make_branch("A", start_date="2024-03-01")]
    tasks = [make_task("t1", "A", "2024-03-05", status="COMPLETED")]
    rows = build_rows(tasks, 60, today)

    nodes = place_nodes(
        tasks, rows, BranchTree(branches), {"main": 0, "A": 80}, 512, TimeGranularity.DAY, 60
    )

    assert len(nodes) == 1
    node = nodes[0]
    assert node["x"] == 592
    assert node["y"] == y_for_date(rows, tasks[0]["date"])
    assert node["depth"] == 1
    assert not node["is_mini"]
    assert node["group_index"] == 0
    assert node["color"] == "#3b82f6"
    assert node["radius"] == 7
    assert node["stroke_width"] == 3


def test_unknown_branch_sits_on_axis(today):
    tasks = [make_task("t1", "ghost-branch", "2024-03-05")]
    rows = build_rows(tasks, 60, today)

    nodes = place_nodes(tasks, rows, BranchTree([]), {"main": 0}, 512, TimeGranularity.DAY, 60)

    assert nodes[0]["x"] == 512
    assert nodes[0]["color"] == "#9ca3af"


def test_same_day_pile_up_is_symmetric_and_bounded(today):
    branches = [make_branch("main"), make_branch("A")]
    tasks = [make_task(f"t{i}", "A", "2024-03-05") for i in range(5)]
    rows = build_rows(tasks, 60, today)

    nodes = place_nodes(
        tasks, rows, BranchTree(branches), {"main": 0, "A": 80}, 512, TimeGranularity.DAY, 60
    )
    base = y_for_date(rows, tasks[0]["date"])
    offsets = [node["y"] - base for node in nodes]

    assert len(set(offsets)) == 5
    assert offsets == [-27, -16, 0, 16, 27]
    assert all(abs(offset) <= 0.45 * 60 for offset in offsets)
    assert [node["id"] for node in nodes] == ["t0", "t1", "t2", "t3", "t4"]
    assert [node["group_index"] for node in nodes] == [0, 1, 2, 3, 4]


def test_groups_are_per_branch(today):
    branches = [make_branch("main"), make_branch("A")]
    tasks = [
        make_task("a", "A", "2024-03-05"),
        make_task("m", "main", "2024-03-05"),
        make_task("b", "A", "2024-03-05"),
    ]
    rows = build_rows(tasks, 60, today)

    nodes = place_nodes(
        tasks, rows, BranchTree(branches), {"main": 0, "A": 80}, 512, TimeGranularity.DAY, 60
    )
    base = y_for_date(rows, tasks[0]["date"])

    assert [node["group_index"] for node in nodes] == [0, 0, 1]
    assert nodes[1]["y"] == base
    assert nodes[0]["y"] == base - 8
    assert nodes[2]["y"] == base + 8


def test_collision_offset_is_clamped_for_any_group_size():
    for row_height in (60, 28, 12):
        for group_size in range(1, 40):
            for index in range(group_size):
                offset = collision_offset(index, group_size, row_height)
                assert abs(offset) <= 0.45 * row_height

    assert collision_offset(0, 1, 60) == 0


def test_mini_and_merge_nodes(today):
    branches = [
        make_branch("main"),
        make_branch("A"),
        make_branch("B", parent_id="A"),
    ]
    tasks = [
        make_task("deep", "B", "2024-03-05"),
        make_task("merge", "main", "2024-03-06", status="COMPLETED", is_merge_commit=True),
    ]
    rows = build_rows(tasks, 12, today)

    nodes = place_nodes(
        tasks,
        rows,
        BranchTree(branches),
        {"main": 0, "A": 80, "B": 100},
        512,
        TimeGranularity.MONTH,
        12,
    )

    assert nodes[0]["is_mini"]
    assert nodes[0]["radius"] == 3
    assert nodes[0]["stroke_width"] == 1.5
    assert not nodes[1]["is_mini"]
    assert nodes[1]["radius"] == 9
