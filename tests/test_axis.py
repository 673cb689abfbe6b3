from conftest import d

from gitdaily.graph.axis import build_markers, week_range_label
from gitdaily.graph.time_axis import build_rows
from gitdaily.model.granularity_type import TimeGranularity


def test_day_markers_label_each_week_and_tick_each_day():
    today = d("2024-03-13")
    rows = build_rows([], 60, today)

    markers = build_markers(rows, TimeGranularity.DAY, 60, today)

    ticks = [m for m in markers if m["kind"] == "day_tick"]
    labels = [m for m in markers if m["kind"] == "week_label"]
    assert len(ticks) == len(rows)
    # 2024-03-08 .. 2024-03-18 touches ISO weeks 10, 11 and 12
    assert [m["label"] for m in labels] == ["W12", "W11", "W10"]
    assert labels[1]["date"] == d("2024-03-17")
    assert labels[1]["y"] == rows[1]["y"] - 30
    assert labels[1]["sublabel"] == "Mar 11 - Mar 17"
    assert [m["date"] for m in ticks if m["is_today"]] == [today]


def test_week_markers_label_first_row_of_each_week():
    today = d("2024-03-13")
    rows = build_rows([], 28, today)

    markers = build_markers(rows, TimeGranularity.WEEK, 28, today)

    assert len(markers) == len(rows)
    labels = [m for m in markers if m["kind"] == "week_label"]
    assert [m["date"] for m in labels] == [d("2024-03-18"), d("2024-03-17"), d("2024-03-10")]
    assert all(m["y"] == row["y"] for m, row in zip(markers, rows))


def test_month_markers_label_months_and_tick_mondays():
    today = d("2024-03-03")
    rows = build_rows([], 12, today)

    markers = build_markers(rows, TimeGranularity.MONTH, 12, today)

    labels = [m for m in markers if m["kind"] == "month_label"]
    assert [m["label"] for m in labels] == ["Mar", "Feb"]
    assert labels[0]["date"] == d("2024-03-08")
    ticks = [m for m in markers if m["kind"] == "tick"]
    assert d("2024-03-04") in [m["date"] for m in ticks]
    assert any(m["is_today"] for m in markers)


def test_week_range_label_spans_month_boundary():
    assert week_range_label(d("2024-02-28")) == "Feb 26 - Mar 3"
