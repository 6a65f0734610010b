"""Ordered chain of searcher strategies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pysource.l2_use_cases.ports.searcher import Searcher


class SearcherChain:
    """Searchers in registration order. Later entries run only if earlier ones fail."""

    def __init__(self, searchers: Iterable[Searcher] = ()) -> None:
        self._searchers: list[Searcher] = []
        for searcher in searchers:
            self.append(searcher)

    def append(self, searcher: Searcher) -> None:
        if searcher.name in self.names():
            raise ValueError(f"Searcher already registered: '{searcher.name}'")
        self._searchers.append(searcher)

    def remove(self, name: str) -> Searcher:
        for i, searcher in enumerate(self._searchers):
            if searcher.name == name:
                return self._searchers.pop(i)
        raise KeyError(name)

    def names(self) -> list[str]:
        return [s.name for s in self._searchers]

    def snapshot(self) -> tuple[Searcher, ...]:
        return tuple(self._searchers)

    def __iter__(self) -> Iterator[Searcher]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._searchers)

    def __contains__(self, name: object) -> bool:
        return name in self.names()
