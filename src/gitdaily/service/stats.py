# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import EntityId
from gitdaily.model.task import Task


class Stats(TypedDict):
    total_commits: int
    completed_by_branch: dict[EntityId, int]
    active_days: int
    current_streak: int
    archived_branches: int


class ContributionDay(TypedDict):
    date: pendulum.Date
    count: int
    intensity: int


def get_completed_tasks(tasks: list[Task]) -> list[Task]:
    return [task for task in tasks if task["status"] == "COMPLETED"]


def get_current_streak(completed_dates: set[pendulum.Date], today: pendulum.Date) -> int:
    """
    Consecutive days with at least one commit, ending today or yesterday.
    """
    day = today
    if day not in completed_dates:
        day = today.subtract(days=1)

    streak = 0
    while day in completed_dates:
        streak += 1
        day = day.subtract(days=1)
    return streak


def get_stats(branches: list[Branch], tasks: list[Task], today: pendulum.Date) -> Stats:
    completed = get_completed_tasks(tasks)

    completed_by_branch: dict[EntityId, int] = {}
    for task in completed:
        completed_by_branch[task["branch_id"]] = (
            completed_by_branch.get(task["branch_id"], 0) + 1
        )

    completed_dates = {task["date"] for task in completed}

    return {
        "total_commits": len(completed),
        "completed_by_branch": completed_by_branch,
        "active_days": len(completed_dates),
        "current_streak": get_current_streak(completed_dates, today),
        "archived_branches": len(
            [branch for branch in branches if branch["status"] == "archived"]
        ),
    }


def get_intensity(count: int) -> int:
    """Heat level 0-4 for a day's commit count."""
    return min(count, 4)


def get_contribution_grid(tasks: list[Task], month: pendulum.Date) -> list[list[ContributionDay]]:
    """
    Completed-task counts for every day of a month, as Monday-first weeks.

    Days outside the month are left out, so the first and last weeks can be short.
    """
    counts: dict[pendulum.Date, int] = {}
    for task in get_completed_tasks(tasks):
        counts[task["date"]] = counts.get(task["date"], 0) + 1

    start = month.start_of("month")
    end = month.end_of("month")

    weeks: list[list[ContributionDay]] = []
    week: list[ContributionDay] = []
    day = start
    while day <= end:
        if day.day_of_week == pendulum.MONDAY and len(week) > 0:
            weeks.append(week)
            week = []
        count = counts.get(day, 0)
        week.append({"date": day, "count": count, "intensity": get_intensity(count)})
        day = day.add(days=1)
    if len(week) > 0:
        weeks.append(week)

    return weeks
