"""Configuration defaults and search path assembly — lives in L4, not domain."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping

from pysource.l1_entities.config import AppConfig
from pysource.l3_interface_adapters.gateways.paths import SEARCH_PATH_ENV, USER_MODULES_DIR
from pysource.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'search_path': {
        'module_dir': str(USER_MODULES_DIR),
        'extensions': ['.py'],
        'include_cwd': True,
        'extra': [],
    },
    'plugins': {
        'enabled': True,
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


def default_templates(config: AppConfig) -> list[str]:
    """User module dir with and without extensions, then the current-directory equivalents."""
    sp = config.search_path
    templates = [os.path.join(sp.module_dir, '%s')]
    templates += [os.path.join(sp.module_dir, f'%s{ext}') for ext in sp.extensions]
    if sp.include_cwd:
        templates.append('./%s')
        templates += [f'./%s{ext}' for ext in sp.extensions]
    return templates + list(sp.extra)


def build_search_path(config: AppConfig, environ: Mapping[str, str] | None = None) -> list[str]:
    """Return template strings in precedence order. A non-empty PYSOURCE_PATH replaces the defaults."""
    env = os.environ if environ is None else environ
    override = env.get(SEARCH_PATH_ENV, '')
    from_env = [t for t in override.split(os.pathsep) if t]
    if from_env:
        return from_env
    return default_templates(config)
