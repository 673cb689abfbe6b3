from conftest import d, make_task

from gitdaily.graph.time_axis import START_OFFSET, build_rows, y_for_date


def test_rows_descend_with_constant_spacing(today):
    tasks = [
        make_task("t1", "main", "2024-02-01"),
        make_task("t2", "main", "2024-03-20"),
        make_task("t3", "main", "2024-02-15"),
    ]

    rows = build_rows(tasks, 28, today)

    assert rows[0]["date"] == d("2024-03-25")
    assert rows[-1]["date"] == d("2024-01-27")
    assert rows[0]["y"] == START_OFFSET
    for previous, current in zip(rows, rows[1:]):
        assert previous["date"].diff(current["date"]).in_days() == 1
        assert current["date"] < previous["date"]
        assert current["y"] - previous["y"] == 28


def test_today_is_always_on_the_axis():
    rows = build_rows([make_task("t1", "main", "2024-01-01")], 60, d("2024-06-01"))

    assert rows[0]["date"] == d("2024-06-06")
    assert rows[-1]["date"] == d("2023-12-27")


def test_empty_input_spans_today():
    today = d("2024-03-10")

    rows = build_rows([], 60, today)

    assert len(rows) == 11
    assert rows[5]["date"] == today
    assert all(row["tasks"] == [] for row in rows)


def test_rows_carry_tasks_in_input_order(today):
    first = make_task("a", "main", "2024-03-08")
    second = make_task("b", "A", "2024-03-08")

    rows = build_rows([first, second], 60, today)
    row = [row for row in rows if row["date"] == d("2024-03-08")][0]

    assert [task["id"] for task in row["tasks"]] == ["a", "b"]


def test_y_for_date_exact_and_nearest(today):
    rows = build_rows([], 60, today)

    assert y_for_date(rows, today) == rows[5]["y"]
    assert y_for_date(rows, d("2020-01-01")) == rows[-1]["y"]
    assert y_for_date(rows, d("2030-01-01")) == rows[0]["y"]


def test_y_for_date_without_rows():
    assert y_for_date([], d("2024-01-01")) == 0
