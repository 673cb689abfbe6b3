# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from gitdaily.model.branch import Branch
from gitdaily.model.entity_id import MAIN_BRANCH_ID, EntityId

logger = logging.getLogger(__name__)


class BranchTree:
    """
    Parent/child index over a flat list of branches, built once per layout pass.

    Children are kept in input order. Lookups never raise for unknown ids and
    every walk carries a visited set, so dangling parents and parent cycles
    degrade to "one level below main".
    """

    def __init__(self, branches: list[Branch]) -> None:
        self.branches: dict[EntityId, Branch] = {}
        self.children: dict[EntityId, list[EntityId]] = {}

        for branch in branches:
            if branch["id"] is None:
                continue
            self.branches[branch["id"]] = branch
            self.children.setdefault(branch["id"], [])

        for branch in branches:
            branch_id = branch["id"]
            parent_id = branch["parent_id"]
            if branch_id is None or branch_id == MAIN_BRANCH_ID or parent_id is None:
                continue
            self.children.setdefault(parent_id, []).append(branch_id)

    def __contains__(self, branch_id: object) -> bool:
        return branch_id in self.branches

    def get(self, branch_id: Optional[EntityId]) -> Optional[Branch]:
        if branch_id is None:
            return None
        return self.branches.get(branch_id)

    def get_children(self, branch_id: EntityId) -> list[EntityId]:
        return list(self.children.get(branch_id, []))

    def depth(self, branch_id: EntityId) -> int:
        """
        Number of hops from main, 0 for main itself.

        A parent missing from the tree ends the walk with the stopping branch at
        depth 1. Members of a parent cycle are treated the same way, so a branch
        hanging below a cycle is 1 plus its distance to the cycle.
        """
        if branch_id == MAIN_BRANCH_ID:
            return 0

        path: list[EntityId] = []
        current = branch_id
        while True:
            if current in path:
                cycle_start = path.index(current)
                logger.debug("parent cycle detected at branch %s", current)
                return cycle_start + 1
            path.append(current)

            branch = self.branches.get(current)
            if branch is None:
                break
            parent_id = branch["parent_id"]
            if parent_id is None or parent_id == MAIN_BRANCH_ID:
                break
            if parent_id not in self.branches:
                logger.debug("branch %s has dangling parent %s", current, parent_id)
                break
            current = parent_id

        return len(path)

    def lineage(self, branch_id: EntityId) -> list[EntityId]:
        """
        Pre-order list of the branch and all its descendants.
        """
        if branch_id not in self.branches:
            return []

        lineage: list[EntityId] = []
        visited: set[EntityId] = set()
        stack = [branch_id]
        while len(stack) > 0:
            current = stack.pop()
            if current in visited:
                logger.debug("parent cycle detected at branch %s", current)
                continue
            visited.add(current)
            lineage.append(current)
            stack.extend(reversed(self.children.get(current, [])))

        return lineage

    def is_root(self, branch: Branch) -> bool:
        parent_id = branch["parent_id"]
        return parent_id == MAIN_BRANCH_ID or parent_id not in self.branches
