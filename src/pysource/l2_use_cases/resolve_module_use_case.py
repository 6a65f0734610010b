"""Use case: resolve a module name by walking the searcher chain."""

from __future__ import annotations

import logging

from pysource.l1_entities.resolution import Attempt, Exhausted, ResolutionResult, Resolved
from pysource.l2_use_cases.searcher_chain import SearcherChain

log = logging.getLogger('pysource.resolve')


class ResolveModuleUseCase:
    """Pure orchestration over searcher results; performs no filesystem access.

    The first searcher that resolves wins. Failures are collected in
    registration order and only surface if every searcher fails.
    """

    def __init__(self, searchers: SearcherChain) -> None:
        self._searchers = searchers

    def execute(self, module_name: str) -> ResolutionResult:
        attempts: list[Attempt] = []
        for searcher in self._searchers:
            result = searcher.resolve(module_name)
            if isinstance(result, Resolved):
                log.info("Resolved '%s' -> %s (searcher: %s)", module_name, result.path, searcher.name)
                return Resolved(path=result.path, searcher=searcher.name)
            attempts.extend(Attempt(searcher=searcher.name, path=p) for p in result.candidates)
            log.debug(
                "Searcher '%s' failed for '%s' (%d candidate(s))", searcher.name, module_name, len(result.candidates)
            )

        log.info("No script called '%s' (%d candidate(s) tried)", module_name, len(attempts))
        return Exhausted(name=module_name, attempts=tuple(attempts))
