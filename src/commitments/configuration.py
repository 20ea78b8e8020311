# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

from commitments.service.day import WEEK_START_INDEX

APP_NAME = "commitments"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DEFAULT_SNAPSHOT_PATH: Path = DATA_PATH / "commitments.json"


class ConfigurationError(Exception):
    """Raised when the configuration file holds unusable settings."""

    pass


class Configuration(TypedDict):
    day_start_hour: int
    week_start: str
    snapshot_path: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "day_start_hour": 0,
        "week_start": "sunday",
        "snapshot_path": None,
    }


def validate_configuration(config: Configuration) -> None:
    day_start_hour = config["day_start_hour"]
    if not isinstance(day_start_hour, int) or not 0 <= day_start_hour <= 23:
        raise ConfigurationError(
            f"day_start_hour must be an integer between 0 and 23, got {day_start_hour!r}"
        )
    if config["week_start"] not in WEEK_START_INDEX:
        raise ConfigurationError(
            f"week_start must be one of {', '.join(WEEK_START_INDEX)}, got {config['week_start']!r}"
        )


def get_snapshot_path(config: Configuration) -> Path:
    if config["snapshot_path"] is not None:
        return Path(config["snapshot_path"]).expanduser()
    return DEFAULT_SNAPSHOT_PATH
