# SPDX-License-Identifier: MIT


class BranchNotFoundError(KeyError):
    def __init__(self, branch_id: str) -> None:
        super().__init__(branch_id)
        self.branch_id = branch_id

    def __str__(self) -> str:
        return f"branch not found: {self.branch_id}"


class TaskNotFoundError(KeyError):
    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"task not found: {self.task_id}"


class InvalidTransitionError(ValueError):
    """Raised when a branch or task cannot move to the requested state."""
