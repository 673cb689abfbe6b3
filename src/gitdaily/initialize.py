# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from gitdaily import configuration
from gitdaily.logger import configure_logging
from gitdaily.model.id_map import IdMap
from gitdaily.repository.configuration import CONFIGURATION_REPO
from gitdaily.service.branch import ensure_main_branch
from gitdaily.template.id_map import get_id_map_template
from gitdaily.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])

    ensure_main_branch()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_ID_MAP_PATH.is_file():
        id_map: IdMap = get_id_map_template()
        configuration.DATA_ID_MAP_PATH.write_text(dump(id_map, Dumper=Dumper))

    # Directory-based entity stores (one file per entity)
    configuration.DATA_BRANCHES_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
