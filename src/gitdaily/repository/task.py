# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gitdaily import configuration, time
from gitdaily.errors import TaskNotFoundError
from gitdaily.model.entity_id import EntityId, generate_entity_id
from gitdaily.model.task import Task, TaskStatus


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        # files come back in name order, restore creation order
        self._tasks.sort(key=lambda task: task["created"])

    def __save_data(self) -> None:
        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(deepcopy(task))
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TASKS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["date"] = time.date_to_str(serializable_task["date"])
        serializable_task["created"] = time.datetime_to_iso_str(serializable_task["created"])
        serializable_task["updated"] = time.datetime_to_iso_str(serializable_task["updated"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["date"] = time.date_from_str(deserializable_task["date"])
        deserializable_task.setdefault("is_merge_commit", False)
        deserializable_task.setdefault("commit_message", None)
        deserializable_task["created"] = time.datetime_from_str(deserializable_task["created"])
        deserializable_task["updated"] = time.datetime_from_str(deserializable_task["updated"])
        return cast(Task, deserializable_task)

    def __find_task(self, id: EntityId) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        raise TaskNotFoundError(id)

    def save_new_task(self, task: Task) -> EntityId:
        self.is_dirty = True

        task["id"] = generate_entity_id()

        self.tasks.append(task)
        self._dirty_ids.add(task["id"])

        return task["id"]

    def modify_task(
        self,
        id: EntityId,
        branch_id: Optional[EntityId] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[pendulum.Date] = None,
        status: Optional[TaskStatus] = None,
        commit_message: Optional[str] = None,
        remove_description: bool = False,
        remove_commit_message: bool = False,
    ) -> None:
        task = self.__find_task(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        task["updated"] = time.now_utc()
        if branch_id is not None:
            task["branch_id"] = branch_id
        if title is not None:
            task["title"] = title
        if description is not None:
            task["description"] = description
        if date is not None:
            task["date"] = date
        if status is not None:
            task["status"] = status
        if commit_message is not None:
            task["commit_message"] = commit_message

        if remove_description:
            task["description"] = None
        if remove_commit_message:
            task["commit_message"] = None

    def delete_task(self, id: EntityId) -> None:
        task = self.__find_task(id)

        self.is_dirty = True
        self.tasks.remove(task)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_tasks_for_branch(self, branch_id: EntityId) -> list[Task]:
        return deepcopy([task for task in self.tasks if task["branch_id"] == branch_id])

    def get_task(self, id: EntityId) -> Task:
        return deepcopy(self.__find_task(id))


TASK_REPO = TaskRepository()
