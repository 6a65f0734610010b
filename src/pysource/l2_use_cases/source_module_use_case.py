"""Use case: resolve a module and hand it to the load primitive."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pysource.l1_entities.errors import UsageError
from pysource.l1_entities.resolution import Exhausted, ResolutionResult
from pysource.l2_use_cases.ports.script_loader import ScriptLoader
from pysource.l2_use_cases.resolver_context import ResolverContext

log = logging.getLogger('pysource.resolve')


class SourceModuleUseCase:
    """Resolves a name and loads it. Returns the result; never terminates the process."""

    def __init__(self, context: ResolverContext, loader: ScriptLoader) -> None:
        self._context = context
        self._loader = loader

    def execute(self, module_name: str, args: Sequence[str] = ()) -> ResolutionResult:
        """Resolve then load. Raises UsageError on an empty name; load errors propagate."""
        if not module_name:
            raise UsageError('script name is required')

        result = self._context.resolve(module_name)
        if isinstance(result, Exhausted):
            return result

        log.debug('Loading %s with %d argument(s)', result.path, len(args))
        self._loader.load(result.path, list(args))
        return result
