"""Port: module searcher strategy."""

from __future__ import annotations

from typing import Protocol

from pysource.l1_entities.resolution import SearchResult


class Searcher(Protocol):
    """Abstract searcher — maps a module name to a path or the paths it rejected."""

    name: str

    def resolve(self, module_name: str) -> SearchResult:
        """Return Resolved on success, or Failed with every candidate checked."""
        ...
