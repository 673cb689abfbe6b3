# SPDX-License-Identifier: MIT

import logging

import pendulum

from gitdaily.model.scene import Row
from gitdaily.model.task import Task

logger = logging.getLogger(__name__)

START_OFFSET = 60
PADDING_DAYS = 5


def build_rows(tasks: list[Task], row_height: int, today: pendulum.Date) -> list[Row]:
    """
    One row per calendar day, newest first, padded around the task dates and today.
    """
    dates = [task["date"] for task in tasks]
    dates.append(today)

    start = min(dates).subtract(days=PADDING_DAYS)
    end = max(dates).add(days=PADDING_DAYS)

    tasks_by_date: dict[pendulum.Date, list[Task]] = {}
    for task in tasks:
        tasks_by_date.setdefault(task["date"], []).append(task)

    rows: list[Row] = []
    current = end
    index = 0
    while current >= start:
        rows.append(
            {
                "date": current,
                "y": index * row_height + START_OFFSET,
                "tasks": tasks_by_date.get(current, []),
            }
        )
        current = current.subtract(days=1)
        index += 1

    if len(tasks) == 0:
        logger.debug("no tasks, axis spans %s around today", PADDING_DAYS)

    return rows


def y_for_date(rows: list[Row], date: pendulum.Date) -> float:
    """
    Y of the row for date, falling back to the nearest row by day distance.
    """
    if len(rows) == 0:
        return 0

    nearest = rows[0]
    nearest_distance = None
    for row in rows:
        if row["date"] == date:
            return row["y"]
        distance = row["date"].diff(date).in_days()
        if nearest_distance is None or distance < nearest_distance:
            nearest = row
            nearest_distance = distance

    logger.debug("date %s is off the axis, snapping to %s", date, nearest["date"])
    return nearest["y"]


def total_height(rows: list[Row], row_height: int) -> float:
    """Extent of the vertical time guide."""
    return len(rows) * row_height + 100
