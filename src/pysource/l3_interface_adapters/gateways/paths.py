"""Shared path constants for configuration and the user module directory."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

APP_NAME = 'pysource'

CONFIG_DIR = user_config_path(APP_NAME)
USER_MODULES_DIR = user_data_path(APP_NAME) / 'modules'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]

SEARCH_PATH_ENV = 'PYSOURCE_PATH'
