"""Top-level source/dot entry points — report and terminate on failure."""

from __future__ import annotations

import sys

from pysource.l1_entities.errors import USAGE_STATUS
from pysource.l2_use_cases.resolver_context import ResolverContext
from pysource.l3_interface_adapters.controllers.source_controller import SourceController, format_usage_error
from pysource.l3_interface_adapters.gateways.exec_script_loader import ExecScriptLoader
from pysource.l4_frameworks_and_drivers.container import default_context


def _err(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def _dispatch(
    label: str,
    name: str | None,
    args: tuple[str, ...],
    namespace: dict,
    context: ResolverContext | None,
) -> None:
    if not name:
        _err(format_usage_error(label))
        sys.exit(USAGE_STATUS)
    controller = SourceController(
        context if context is not None else default_context(),
        ExecScriptLoader(namespace),
        emit=_err,
        label=label,
    )
    status = controller.run(name, args)
    if status:
        sys.exit(status)


def source(
    name: str | None = None,
    *args: str,
    namespace: dict | None = None,
    context: ResolverContext | None = None,
) -> None:
    """Find *name* on the search path and run it in the caller's globals.

    Remaining arguments are visible to the module as ``sys.argv[1:]``.
    Exits with status 1 if nothing matches, 2 if no name was given.
    """
    ns = namespace if namespace is not None else sys._getframe(1).f_globals
    _dispatch('source', name, args, ns, context)


def dot(
    name: str | None = None,
    *args: str,
    namespace: dict | None = None,
    context: ResolverContext | None = None,
) -> None:
    """Same as :func:`source`, reported under the ``.`` label."""
    ns = namespace if namespace is not None else sys._getframe(1).f_globals
    _dispatch('.', name, args, ns, context)
