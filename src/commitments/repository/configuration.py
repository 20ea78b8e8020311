# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from commitments import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not self.path.is_file():
            # Config doesn't exist yet, use defaults
            logger.debug("no configuration at %s, using defaults", self.path)
            self._config = configuration.get_default_configuration()
            return

        try:
            loaded = load(self.path.read_text(), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise configuration.ConfigurationError(f"{self.path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise configuration.ConfigurationError(
                f"{self.path}: expected a mapping of settings"
            )

        # Back-fill settings added after the file was written
        config = configuration.get_default_configuration()
        for key in config:
            if key in loaded:
                config[key] = loaded[key]  # type: ignore[literal-required]

        configuration.validate_configuration(config)
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        day_start_hour: Optional[int] = None,
        week_start: Optional[str] = None,
        snapshot_path: Optional[str] = None,
        remove_snapshot_path: bool = False,
    ) -> None:
        updated = self.get_config()

        if day_start_hour is not None:
            updated["day_start_hour"] = day_start_hour
        if week_start is not None:
            updated["week_start"] = week_start
        if snapshot_path is not None:
            updated["snapshot_path"] = snapshot_path
        if remove_snapshot_path:
            updated["snapshot_path"] = None

        configuration.validate_configuration(updated)
        self._config = updated
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
