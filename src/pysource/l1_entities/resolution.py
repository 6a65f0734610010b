"""Resolution result values — pure data, no I/O."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Attempt(BaseModel):
    """One candidate path a searcher checked and rejected."""

    model_config = ConfigDict(frozen=True)

    searcher: str
    path: str


class Resolved(BaseModel):
    """A path confirmed to exist at check time."""

    model_config = ConfigDict(frozen=True)

    path: str
    searcher: str = ''


class Failed(BaseModel):
    """A single searcher's rejection: every path it checked, in order."""

    model_config = ConfigDict(frozen=True)

    candidates: tuple[str, ...] = ()


class Exhausted(BaseModel):
    """Every searcher failed. Attempts are kept in searcher-registration order."""

    model_config = ConfigDict(frozen=True)

    name: str
    attempts: tuple[Attempt, ...] = Field(default_factory=tuple)

    @property
    def candidates(self) -> list[str]:
        return [a.path for a in self.attempts]


SearchResult = Union[Resolved, Failed]
ResolutionResult = Union[Resolved, Exhausted]
