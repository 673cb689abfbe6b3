# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from gitdaily.model.entity_id import MAIN_BRANCH_ID, EntityId
from gitdaily.model.granularity_type import TimeGranularity
from gitdaily.repository.id_map import ID_MAP_REPO
from gitdaily.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[pendulum.Date]:
    if month_param is None:
        return None
    if not re.match(r"^\d{4}-\d{2}$", month_param):
        raise typer.BadParameter("Month must be in YYYY-MM format")
    try:
        return date_from_str(f"{month_param}-01")
    except ValueError as e:
        raise typer.BadParameter(f"Invalid month: {e}")


def parse_granularity(granularity_param: Optional[str]) -> Optional[TimeGranularity]:
    if granularity_param is None:
        return None
    for granularity in TimeGranularity:
        if granularity_param.lower() in (granularity.value.lower(), granularity.name.lower()):
            return granularity
    valid = ", ".join(granularity.value for granularity in TimeGranularity)
    raise typer.BadParameter(f"Granularity must be one of: {valid}")


def parse_branch_id(branch_param: str) -> EntityId:
    """
    Resolve a synthetic branch id, or the literal main, to a real branch id.
    """
    if branch_param == MAIN_BRANCH_ID:
        return MAIN_BRANCH_ID
    try:
        return ID_MAP_REPO.get_real_id("branches", int(branch_param))
    except (KeyError, ValueError):
        raise typer.BadParameter(f"Unknown branch id: '{branch_param}'")


def parse_task_id(task_param: str | int) -> EntityId:
    try:
        return ID_MAP_REPO.get_real_id("tasks", int(task_param))
    except (KeyError, ValueError):
        raise typer.BadParameter(f"Unknown task id: '{task_param}'")
