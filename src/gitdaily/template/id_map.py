# SPDX-License-Identifier: MIT

from gitdaily.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "branches": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "tasks": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }
