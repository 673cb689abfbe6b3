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
from gitdaily.errors import BranchNotFoundError
from gitdaily.model.branch import Branch, BranchStatus
from gitdaily.model.entity_id import EntityId, generate_entity_id


class BranchRepository:
    def __init__(self) -> None:
        self._branches: Optional[list[Branch]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def branches(self) -> list[Branch]:
        if self._branches is None:
            self.__load_data()
        if self._branches is None:
            raise ValueError()
        return self._branches

    def __load_data(self) -> None:
        self._branches = []
        if not configuration.DATA_BRANCHES_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_BRANCHES_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_branch = load(file_path.read_text(), Loader=Loader)
            if raw_branch is not None:
                self._branches.append(self.__convert_branch_for_deserialization(raw_branch))
        # files come back in name order, restore creation order
        self._branches.sort(key=lambda branch: branch["created"])

    def __save_data(self) -> None:
        # Write dirty entities
        for branch in self.branches:
            if branch["id"] in self._dirty_ids:
                serializable_branch = self.__convert_branch_for_serialization(
                    deepcopy(branch)
                )
                file_path = configuration.DATA_BRANCHES_DIR / f"{branch['id']}.yaml"
                file_path.write_text(dump(serializable_branch, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_BRANCHES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._branches is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_branch_for_serialization(self, branch: Branch) -> dict[str, Any]:
        serializable_branch = cast(dict[str, Any], branch)
        serializable_branch["start_date"] = time.date_to_str(serializable_branch["start_date"])
        serializable_branch["target_date"] = time.date_to_str_optional(
            serializable_branch["target_date"]
        )
        serializable_branch["restored_date"] = time.date_to_str_optional(
            serializable_branch["restored_date"]
        )
        serializable_branch["created"] = time.datetime_to_iso_str(serializable_branch["created"])
        serializable_branch["updated"] = time.datetime_to_iso_str(serializable_branch["updated"])
        return serializable_branch

    def __convert_branch_for_deserialization(self, branch: dict[str, Any]) -> Branch:
        deserializable_branch = branch
        deserializable_branch["start_date"] = time.date_from_str(
            deserializable_branch["start_date"]
        )
        deserializable_branch["target_date"] = time.date_from_str_optional(
            deserializable_branch.get("target_date")
        )
        deserializable_branch["restored_date"] = time.date_from_str_optional(
            deserializable_branch.get("restored_date")
        )
        deserializable_branch.setdefault("merge_target_node_id", None)
        deserializable_branch["created"] = time.datetime_from_str(
            deserializable_branch["created"]
        )
        deserializable_branch["updated"] = time.datetime_from_str(
            deserializable_branch["updated"]
        )
        return cast(Branch, deserializable_branch)

    def __find_branch(self, id: EntityId) -> Branch:
        for branch in self.branches:
            if branch["id"] == id:
                return branch
        raise BranchNotFoundError(id)

    def save_new_branch(self, branch: Branch) -> EntityId:
        """
        Store a new branch, generating an id unless one is already set.
        """
        self.is_dirty = True

        if branch["id"] is None:
            branch["id"] = generate_entity_id()

        self.branches.append(branch)
        self._dirty_ids.add(branch["id"])

        return branch["id"]

    def modify_branch(
        self,
        id: EntityId,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
        parent_id: Optional[EntityId] = None,
        status: Optional[BranchStatus] = None,
        start_date: Optional[pendulum.Date] = None,
        target_date: Optional[pendulum.Date] = None,
        restored_date: Optional[pendulum.Date] = None,
        merge_target_node_id: Optional[EntityId] = None,
        remove_description: bool = False,
        remove_target_date: bool = False,
        remove_merge_target_node_id: bool = False,
    ) -> None:
        branch = self.__find_branch(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        branch["updated"] = time.now_utc()
        if name is not None:
            branch["name"] = name
        if description is not None:
            branch["description"] = description
        if color is not None:
            branch["color"] = color
        if parent_id is not None:
            branch["parent_id"] = parent_id
        if status is not None:
            branch["status"] = status
        if start_date is not None:
            branch["start_date"] = start_date
        if target_date is not None:
            branch["target_date"] = target_date
        if restored_date is not None:
            branch["restored_date"] = restored_date
        if merge_target_node_id is not None:
            branch["merge_target_node_id"] = merge_target_node_id

        if remove_description:
            branch["description"] = None
        if remove_target_date:
            branch["target_date"] = None
        if remove_merge_target_node_id:
            branch["merge_target_node_id"] = None

    def delete_branch(self, id: EntityId) -> None:
        branch = self.__find_branch(id)

        self.is_dirty = True
        self.branches.remove(branch)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def has_branch(self, id: EntityId) -> bool:
        return any(branch["id"] == id for branch in self.branches)

    def get_all_branches(self) -> list[Branch]:
        return deepcopy(self.branches)

    def get_branch(self, id: EntityId) -> Branch:
        return deepcopy(self.__find_branch(id))


BRANCH_REPO = BranchRepository()
