"""Logging setup for the pysource logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

_STDERR_FORMAT = '%(levelname)s %(name)s: %(message)s'
_FILE_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def setup_logging(level: str = 'WARNING', log_path: Path | str | None = None) -> logging.Logger:
    """Configure the ``pysource`` logger. Safe to call more than once."""
    root = logging.getLogger('pysource')
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for h in list(root.handlers):
        if getattr(h, '_pysource', False):
            root.removeHandler(h)
            h.close()

    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(_STDERR_FORMAT))
    stream._pysource = True  # type: ignore[attr-defined]
    root.addHandler(stream)

    if log_path is not None:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
        handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handler._pysource = True  # type: ignore[attr-defined]
        root.addHandler(handler)
        root.debug('File logging started → %s', path)
    return root
