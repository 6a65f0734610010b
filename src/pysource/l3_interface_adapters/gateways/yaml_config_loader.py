"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import yaml

from pysource.l1_entities.errors import ConfigError
from pysource.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads pysource settings from an explicit file or the first default location found."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return settings as a plain dict (before Pydantic validation).

        Raises FileNotFoundError for a missing explicit path and ConfigError
        when the file's top level is not a mapping.
        """
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
        else:
            path = _first_existing(DEFAULT_CONFIG_PATHS)

        settings = _read_settings(path) if path is not None else {}
        return deep_merge(settings, overrides or {})


def _first_existing(candidates: Iterable[Path]) -> Path | None:
    return next((p for p in candidates if p.exists()), None)


def _read_settings(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping of settings, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Merge *override* into *base* in place; nested mappings merge, anything else replaces."""
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        else:
            base[key] = value
    return base
