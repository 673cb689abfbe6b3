# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from gitdaily.model.granularity_type import Alignment

APP_NAME = "gitdaily"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_BRANCHES_DIR: Path = DATA_PATH / "branches"
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"

MIN_BRANCH_SPACING = 0.5
MAX_BRANCH_SPACING = 2.0


class Configuration(TypedDict):
    branch_spacing: float
    granularity: str
    alignment: Alignment
    viewport_width: int
    show_header: bool
    random_color_for_branches: bool
    data_path: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "branch_spacing": 1.0,
        "granularity": "Day",
        "alignment": "center",
        "viewport_width": 1024,
        "show_header": True,
        "random_color_for_branches": True,
        "data_path": None,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ID_MAP_PATH, DATA_BRANCHES_DIR, DATA_TASKS_DIR

    DATA_PATH = data_path
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_BRANCHES_DIR = DATA_PATH / "branches"
    DATA_TASKS_DIR = DATA_PATH / "tasks"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
