"""Domain error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysource.l1_entities.resolution import Exhausted

USAGE_STATUS = 2
NOT_FOUND_STATUS = 1


class SearchPathTemplateError(ValueError):
    """Raised when a search path template does not hold exactly one slot."""


class UsageError(Exception):
    """Raised when a source call is made without a module name."""

    status = USAGE_STATUS


class ResolutionExhaustedError(Exception):
    """Raised when every searcher failed to find the requested module."""

    status = NOT_FOUND_STATUS

    def __init__(self, exhausted: Exhausted) -> None:
        self.exhausted = exhausted
        super().__init__(f"no script called '{exhausted.name}'")


class ConfigError(ValueError):
    """Raised when a config file is readable YAML but not a mapping of settings."""
