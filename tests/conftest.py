"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import pytest

from pysource.l1_entities.config import AppConfig
from pysource.l1_entities.resolution import Failed, Resolved, SearchResult
from pysource.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeSearcher:
    """Fake searcher — either always resolves to *resolved* or fails with *candidates*."""

    def __init__(self, name: str, resolved: str | None = None, candidates: Iterable[str] = ()):
        self.name = name
        self._resolved = resolved
        self._candidates = tuple(candidates)
        self.calls: list[str] = []

    def resolve(self, module_name: str) -> SearchResult:
        self.calls.append(module_name)
        if self._resolved is not None:
            return Resolved(path=self._resolved, searcher=self.name)
        return Failed(candidates=self._candidates)


class FakeScriptLoader:
    """Fake load primitive — records every (path, args) pair."""

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.load_calls: list[tuple[str, list[str]]] = []

    def load(self, path: str, args: Sequence[str]) -> None:
        self.load_calls.append((path, list(args)))
        if self._error is not None:
            raise self._error


class RecordingExists:
    """Stand-in for os.path.exists that records every path it is asked about."""

    def __init__(self, existing: Iterable[str] = ()) -> None:
        self.existing = set(existing)
        self.calls: list[str] = []

    def __call__(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.existing


# --- Standard Fixtures ---


@pytest.fixture(autouse=True)
def _reset_pysource_logger():
    yield
    root = logging.getLogger('pysource')
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _no_env_search_path(monkeypatch):
    monkeypatch.delenv('PYSOURCE_PATH', raising=False)


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def module_dir(tmp_path: Path, monkeypatch) -> Path:
    """A scratch working directory the tests can drop modules into."""
    d = tmp_path / 'work'
    d.mkdir()
    monkeypatch.chdir(d)
    return d


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
search_path:
  module_dir: "/opt/modules"
  extensions: [".py", ".pysrc"]
  include_cwd: false
  extra:
    - "/srv/lib/%s.py"
plugins:
  enabled: false
logging:
  level: "DEBUG"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
