"""Resolver context — the registry and searcher chain a caller resolves against."""

from __future__ import annotations

from pysource.l1_entities.errors import ResolutionExhaustedError
from pysource.l1_entities.resolution import Exhausted, ResolutionResult
from pysource.l1_entities.search_path import SearchPathRegistry
from pysource.l2_use_cases.ports.searcher import Searcher
from pysource.l2_use_cases.resolve_module_use_case import ResolveModuleUseCase
from pysource.l2_use_cases.searcher_chain import SearcherChain


class ResolverContext:
    """Owns the search path and searcher chain. Pass it to whatever resolves names.

    Setup code mutates both through the registration methods before any
    resolution happens.
    """

    def __init__(
        self,
        search_path: SearchPathRegistry | None = None,
        searchers: SearcherChain | None = None,
    ) -> None:
        self.search_path = search_path if search_path is not None else SearchPathRegistry()
        self.searchers = searchers if searchers is not None else SearcherChain()

    def add_template(self, template: str) -> None:
        self.search_path.append(template)

    def add_searcher(self, searcher: Searcher) -> None:
        self.searchers.append(searcher)

    def resolve(self, module_name: str) -> ResolutionResult:
        return ResolveModuleUseCase(self.searchers).execute(module_name)

    def require(self, module_name: str) -> str:
        """Resolve *module_name* to a path. Raises ResolutionExhaustedError on failure."""
        result = self.resolve(module_name)
        if isinstance(result, Exhausted):
            raise ResolutionExhaustedError(result)
        return result.path
