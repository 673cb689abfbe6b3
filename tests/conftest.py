from typing import Optional

import pendulum
import pytest

from gitdaily import configuration
from gitdaily.model.branch import Branch
from gitdaily.model.task import Task
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.repository.id_map import ID_MAP_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.template.branch import get_branch_template, get_main_branch_template
from gitdaily.template.task import get_task_template


def d(value: str) -> pendulum.Date:
    return pendulum.parse(value, exact=True)


def make_branch(
    id: str,
    parent_id: Optional[str] = "main",
    start_date: str = "2024-01-01",
    status: str = "active",
    color: str = "#3b82f6",
    restored_date: Optional[str] = None,
    merge_target_node_id: Optional[str] = None,
) -> Branch:
    if id == "main":
        return get_main_branch_template()
    branch = get_branch_template()
    branch["id"] = id
    branch["name"] = id
    branch["parent_id"] = parent_id
    branch["start_date"] = d(start_date)
    branch["status"] = status  # type: ignore[typeddict-item]
    branch["color"] = color
    branch["restored_date"] = d(restored_date) if restored_date is not None else None
    branch["merge_target_node_id"] = merge_target_node_id
    return branch


def make_task(
    id: str,
    branch_id: str,
    date: str,
    status: str = "PLANNED",
    is_merge_commit: bool = False,
) -> Task:
    task = get_task_template()
    task["id"] = id
    task["branch_id"] = branch_id
    task["title"] = id
    task["date"] = d(date)
    task["status"] = status  # type: ignore[typeddict-item]
    task["is_merge_commit"] = is_merge_commit
    return task


@pytest.fixture
def today() -> pendulum.Date:
    return d("2024-03-10")


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """
    Point every config and data path at tmp_path and start with empty repositories.
    """
    config_path = tmp_path / "config"
    config_path.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path)
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", tmp_path / "id_map.yaml")
    monkeypatch.setattr(configuration, "DATA_BRANCHES_DIR", tmp_path / "branches")
    monkeypatch.setattr(configuration, "DATA_TASKS_DIR", tmp_path / "tasks")
    (tmp_path / "branches").mkdir()
    (tmp_path / "tasks").mkdir()

    for repository in (BRANCH_REPO, TASK_REPO, ID_MAP_REPO, CONFIGURATION_REPO):
        repository.__init__()  # type: ignore[misc]

    yield tmp_path

    for repository in (BRANCH_REPO, TASK_REPO, ID_MAP_REPO, CONFIGURATION_REPO):
        repository.__init__()  # type: ignore[misc]
