"""Tests for SourceController — diagnostics and exit statuses."""

from __future__ import annotations

from pysource.l1_entities.resolution import Attempt, Exhausted
from pysource.l1_entities.search_path import SearchPathRegistry
from pysource.l2_use_cases.resolver_context import ResolverContext
from pysource.l3_interface_adapters.controllers.source_controller import (
    SourceController,
    format_exhausted,
    format_usage_error,
)
from pysource.l3_interface_adapters.gateways.default_searcher import DefaultSearcher
from tests.conftest import FakeScriptLoader, FakeSearcher, RecordingExists


def _context(*searchers) -> ResolverContext:
    ctx = ResolverContext()
    for s in searchers:
        ctx.add_searcher(s)
    return ctx


class TestFormatting:
    def test_usage_error(self):
        assert format_usage_error('source') == 'source: error: script name is required'

    def test_exhausted(self):
        ex = Exhausted(
            name='mod',
            attempts=(Attempt(searcher='default', path='./mod'), Attempt(searcher='default', path='./mod.py')),
        )
        assert format_exhausted('.', ex) == [
            ".: error: no script called 'mod'",
            "\tno file './mod'",
            "\tno file './mod.py'",
        ]


class TestSourceController:
    def test_success_returns_zero_and_loads(self):
        lines: list[str] = []
        loader = FakeScriptLoader()
        ctrl = SourceController(_context(FakeSearcher('default', resolved='./m.py')), loader, emit=lines.append)
        assert ctrl.run('m', ['a', 'b']) == 0
        assert loader.load_calls == [('./m.py', ['a', 'b'])]
        assert lines == []

    def test_first_failure_hidden_when_second_searcher_succeeds(self):
        lines: list[str] = []
        ctx = _context(
            FakeSearcher('default', candidates=['./m', './m.py', '/opt/m']),
            FakeSearcher('other', resolved='/srv/m.py'),
        )
        loader = FakeScriptLoader()
        assert SourceController(ctx, loader, emit=lines.append).run('m') == 0
        assert loader.load_calls == [('/srv/m.py', [])]
        assert lines == []

    def test_multi_searcher_failure_reports_all_candidates_in_order(self):
        lines: list[str] = []
        ctx = _context(
            FakeSearcher('default', candidates=['./m', './m.py']),
            FakeSearcher('other', candidates=['/opt/m', '/opt/m.py', '/opt/m.sh']),
        )
        loader = FakeScriptLoader()
        status = SourceController(ctx, loader, emit=lines.append).run('m')
        assert status == 1
        assert lines[0] == "source: error: no script called 'm'"
        assert lines[1:] == [
            "\tno file './m'",
            "\tno file './m.py'",
            "\tno file '/opt/m'",
            "\tno file '/opt/m.py'",
            "\tno file '/opt/m.sh'",
        ]
        assert loader.load_calls == []

    def test_label_only_changes_diagnostics(self):
        lines: list[str] = []
        ctx = _context(FakeSearcher('default', candidates=['./m']))
        status = SourceController(ctx, FakeScriptLoader(), emit=lines.append, label='.').run('m')
        assert status == 1
        assert lines == [".: error: no script called 'm'", "\tno file './m'"]

    def test_empty_name_is_usage_error_without_touching_filesystem(self):
        lines: list[str] = []
        exists = RecordingExists(['./m'])
        registry = SearchPathRegistry(['./%s'])
        ctx = _context(DefaultSearcher(registry, exists=exists))
        loader = FakeScriptLoader()
        for name in ('', None):
            assert SourceController(ctx, loader, emit=lines.append).run(name) == 2
        assert lines == ['source: error: script name is required'] * 2
        assert exists.calls == []
        assert loader.load_calls == []
