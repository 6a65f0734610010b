"""SourceController — runs the source use case and turns its outcome into diagnostics and a status."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pysource.l1_entities.errors import NOT_FOUND_STATUS, UsageError
from pysource.l1_entities.resolution import Exhausted
from pysource.l2_use_cases.ports.script_loader import ScriptLoader
from pysource.l2_use_cases.resolver_context import ResolverContext
from pysource.l2_use_cases.source_module_use_case import SourceModuleUseCase

log = logging.getLogger('pysource.controller')


def format_usage_error(label: str) -> str:
    return f'{label}: error: script name is required'


def format_exhausted(label: str, exhausted: Exhausted) -> list[str]:
    """Header line for the missing name, then one line per candidate in searcher order."""
    lines = [f"{label}: error: no script called '{exhausted.name}'"]
    lines.extend(f"\tno file '{path}'" for path in exhausted.candidates)
    return lines


class SourceController:
    """Bridges the source use case to a diagnostic stream.

    *label* distinguishes the strict ``source`` entry point from the ``.``
    alias; only diagnostics differ between them. Errors raised by the
    loaded module are not caught.
    """

    def __init__(
        self,
        context: ResolverContext,
        loader: ScriptLoader,
        emit: Callable[[str], None],
        label: str = 'source',
    ) -> None:
        self.label = label
        self._emit = emit
        self._uc = SourceModuleUseCase(context, loader)

    def run(self, module_name: str | None, args: Sequence[str] = ()) -> int:
        """Source *module_name*. Returns 0 on success, else the failure status."""
        try:
            result = self._uc.execute(module_name or '', args)
        except UsageError as e:
            self._emit(format_usage_error(self.label))
            return e.status

        if isinstance(result, Exhausted):
            self.report(result)
            return NOT_FOUND_STATUS
        return 0

    def report(self, exhausted: Exhausted) -> None:
        log.debug("Reporting %d failed candidate(s) for '%s'", len(exhausted.candidates), exhausted.name)
        for line in format_exhausted(self.label, exhausted):
            self._emit(line)
