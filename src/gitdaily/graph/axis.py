# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.model.scene import AxisMarker, MarkerKind, Row
from gitdaily.time import date_to_short_str


def week_label(date: pendulum.Date) -> str:
    return f"W{date.isocalendar()[1]}"


def week_range_label(date: pendulum.Date) -> str:
    monday = date.start_of("week")
    sunday = date.end_of("week")
    return f"{date_to_short_str(monday)} - {date_to_short_str(sunday)}"


def marker(
    kind: MarkerKind,
    date: pendulum.Date,
    y: float,
    today: pendulum.Date,
    label: Optional[str] = None,
    sublabel: Optional[str] = None,
) -> AxisMarker:
    return {
        "kind": kind,
        "date": date,
        "y": y,
        "label": label,
        "sublabel": sublabel,
        "is_today": date == today,
    }


def build_markers(
    rows: list[Row],
    granularity: TimeGranularity,
    row_height: int,
    today: pendulum.Date,
) -> list[AxisMarker]:
    """
    Week/month labels and ticks along the time axis.

    Rows run newest first, so a label lands on the latest visible day of its
    week or month.
    """
    markers: list[AxisMarker] = []
    last_week: Optional[tuple[int, int]] = None
    last_month: Optional[tuple[int, int]] = None

    for row in rows:
        date = row["date"]
        y = row["y"]
        iso = date.isocalendar()
        week = (iso[0], iso[1])
        month = (date.year, date.month)

        if granularity == TimeGranularity.DAY:
            if week != last_week:
                # sits between this week and the newer one above it
                markers.append(
                    marker(
                        "week_label",
                        date,
                        y - row_height / 2,
                        today,
                        week_label(date),
                        week_range_label(date),
                    )
                )
            markers.append(marker("day_tick", date, y, today, str(date.day)))

        elif granularity in (TimeGranularity.WEEK, TimeGranularity.BIWEEK):
            if week != last_week:
                markers.append(
                    marker("week_label", date, y, today, week_label(date), week_range_label(date))
                )
            else:
                markers.append(marker("tick", date, y, today))

        else:
            if month != last_month:
                markers.append(marker("month_label", date, y, today, date.format("MMM")))
            elif date.day_of_week == pendulum.MONDAY or date == today:
                markers.append(marker("tick", date, y, today))

        last_week = week
        last_month = month

    return markers
