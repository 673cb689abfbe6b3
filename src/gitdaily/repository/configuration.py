# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gitdaily import configuration
from gitdaily.model.granularity_type import Alignment


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: back-fill any key added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        branch_spacing: Optional[float] = None,
        granularity: Optional[str] = None,
        alignment: Optional[Alignment] = None,
        viewport_width: Optional[int] = None,
        show_header: Optional[bool] = None,
        random_color_for_branches: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if branch_spacing is not None:
            if not (
                configuration.MIN_BRANCH_SPACING
                <= branch_spacing
                <= configuration.MAX_BRANCH_SPACING
            ):
                raise ValueError(
                    f"branch_spacing must be between {configuration.MIN_BRANCH_SPACING}"
                    f" and {configuration.MAX_BRANCH_SPACING}"
                )
            self.config["branch_spacing"] = branch_spacing
        if granularity is not None:
            self.config["granularity"] = granularity
        if alignment is not None:
            self.config["alignment"] = alignment
        if viewport_width is not None:
            self.config["viewport_width"] = viewport_width
        if show_header is not None:
            self.config["show_header"] = show_header
        if random_color_for_branches is not None:
            self.config["random_color_for_branches"] = random_color_for_branches
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
