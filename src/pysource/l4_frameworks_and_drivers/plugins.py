"""Searcher plugins discovered through the ``pysource.searchers`` entry point group."""

from __future__ import annotations

import logging
from importlib.metadata import entry_points

from pysource.l2_use_cases.resolver_context import ResolverContext

ENTRY_POINT_GROUP = 'pysource.searchers'

log = logging.getLogger('pysource.plugins')


def load_searcher_plugins(context: ResolverContext) -> list[str]:
    """Append plugin searchers to *context* in entry point name order.

    Each entry point names a factory called with the context and returning a
    searcher. A failing plugin is logged and skipped. Returns the names added.
    """
    added: list[str] = []
    for ep in sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda e: e.name):
        try:
            factory = ep.load()
            searcher = factory(context)
            context.add_searcher(searcher)
        except Exception as e:
            log.warning("Skipping searcher plugin '%s': %s", ep.name, e)
            continue
        log.debug("Registered searcher plugin '%s' as '%s'", ep.name, searcher.name)
        added.append(searcher.name)
    return added
