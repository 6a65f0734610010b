"""Gateway: filesystem searcher — implements the Searcher port over the search path."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable

from pysource.l1_entities.resolution import Failed, Resolved, SearchResult
from pysource.l1_entities.search_path import SearchPathRegistry

log = logging.getLogger('pysource.searcher')

_LITERAL_RE = re.compile(r'^(\.|\.\.|/)')


def looks_literal(module_name: str) -> bool:
    """True when the name starts with a relative or absolute path marker."""
    return bool(_LITERAL_RE.match(module_name)) or os.path.isabs(module_name)


class DefaultSearcher:
    """Tries the name as a literal path, then every search path template in order."""

    name = 'default'

    def __init__(
        self,
        search_path: SearchPathRegistry,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self._search_path = search_path
        self._exists = exists

    def resolve(self, module_name: str) -> SearchResult:
        candidates: list[str] = []

        if looks_literal(module_name):
            if self._exists(module_name):
                log.debug("Literal path '%s' exists", module_name)
                return Resolved(path=module_name, searcher=self.name)
            candidates.append(module_name)

        # A literal-looking name that is missing still falls through to the search path.
        for template in self._search_path.snapshot():
            path = template.expand(module_name)
            if self._exists(path):
                log.debug("Template '%s' matched: %s", template, path)
                return Resolved(path=path, searcher=self.name)
            log.debug('No file %s', path)
            candidates.append(path)

        return Failed(candidates=tuple(candidates))
