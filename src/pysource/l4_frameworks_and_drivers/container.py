"""Composition root — builds a ResolverContext from configuration."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping

from pysource.l1_entities.config import AppConfig
from pysource.l1_entities.search_path import SearchPathRegistry
from pysource.l2_use_cases.ports.config_loader import ConfigLoader
from pysource.l2_use_cases.resolver_context import ResolverContext
from pysource.l3_interface_adapters.gateways.default_searcher import DefaultSearcher
from pysource.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from pysource.l4_frameworks_and_drivers.config import build_app_config, build_search_path
from pysource.l4_frameworks_and_drivers.plugins import load_searcher_plugins


def build_context(
    config: AppConfig,
    *,
    extra_templates: Iterable[str] = (),
    plugins: bool | None = None,
    environ: Mapping[str, str] | None = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> ResolverContext:
    """Registry from config (+ extra templates), default searcher first, then plugins."""
    registry = SearchPathRegistry(build_search_path(config, environ))
    registry.extend(extra_templates)

    context = ResolverContext(search_path=registry)
    context.add_searcher(DefaultSearcher(registry, exists=exists))

    load_plugins = config.plugins.enabled if plugins is None else plugins
    if load_plugins:
        load_searcher_plugins(context)
    return context


def default_context(config_path: str | None = None, loader: ConfigLoader | None = None) -> ResolverContext:
    """Build a fresh context from the user's config file (or defaults)."""
    raw = (loader or YamlConfigLoader()).load_raw(config_path)
    return build_context(build_app_config(raw))
