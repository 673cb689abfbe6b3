# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

MAIN_BRANCH_ID: EntityId = "main"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
