"""pysource — resolve a bare module name against a search path and run it in the current scope."""

from __future__ import annotations

__version__ = '0.1.0'

from pysource.l1_entities.errors import (  # noqa: E402
    ConfigError,
    ResolutionExhaustedError,
    SearchPathTemplateError,
    UsageError,
)
from pysource.l1_entities.resolution import Attempt, Exhausted, Failed, Resolved  # noqa: E402
from pysource.l1_entities.search_path import SearchPathRegistry, SearchPathTemplate  # noqa: E402
from pysource.l2_use_cases.resolver_context import ResolverContext  # noqa: E402
from pysource.l2_use_cases.searcher_chain import SearcherChain  # noqa: E402
from pysource.l3_interface_adapters.gateways.default_searcher import DefaultSearcher  # noqa: E402
from pysource.l4_frameworks_and_drivers.container import build_context, default_context  # noqa: E402
from pysource.l4_frameworks_and_drivers.dispatcher import dot, source  # noqa: E402

__all__ = [
    'Attempt',
    'ConfigError',
    'DefaultSearcher',
    'Exhausted',
    'Failed',
    'ResolutionExhaustedError',
    'Resolved',
    'ResolverContext',
    'SearchPathRegistry',
    'SearchPathTemplate',
    'SearchPathTemplateError',
    'SearcherChain',
    'UsageError',
    'build_context',
    'default_context',
    'dot',
    'source',
]
