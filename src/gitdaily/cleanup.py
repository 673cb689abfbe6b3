# SPDX-License-Identifier: MIT

import atexit

from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.repository.id_map import ID_MAP_REPO
from gitdaily.repository.task import TASK_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()

    # Flush entity repositories
    BRANCH_REPO.flush()
    TASK_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
