"""Port: host load primitive."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ScriptLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract loader — runs a file's contents in the current scope."""

    def load(self, path: str, args: Sequence[str]) -> None:
        """Execute *path*, forwarding *args*. Errors from the file propagate unchanged."""
        ...
