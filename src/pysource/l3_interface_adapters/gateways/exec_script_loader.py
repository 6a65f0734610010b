"""Gateway: exec-based script loader — implements the ScriptLoader port."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger('pysource.loader')


class ExecScriptLoader:
    """Runs a file's source inside *namespace*, with ``sys.argv`` set for the run.

    Nothing raised by the loaded code is caught here.
    """

    def __init__(self, namespace: dict | None = None) -> None:
        self.namespace: dict = namespace if namespace is not None else {'__name__': '__main__'}

    def load(self, path: str, args: Sequence[str]) -> None:
        source = Path(path).read_bytes()
        code = compile(source, path, 'exec')

        saved_argv = sys.argv
        saved_file = self.namespace.get('__file__')
        sys.argv = [path, *args]
        self.namespace['__file__'] = path
        log.debug('Executing %s', path)
        try:
            exec(code, self.namespace)  # noqa: S102 -- executing the resolved module is the point
        finally:
            sys.argv = saved_argv
            if saved_file is None:
                self.namespace.pop('__file__', None)
            else:
                self.namespace['__file__'] = saved_file
