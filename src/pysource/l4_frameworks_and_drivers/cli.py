"""CLI entry points for pysource."""

from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError

from pysource import __version__
from pysource.l1_entities.errors import NOT_FOUND_STATUS, USAGE_STATUS, ConfigError, SearchPathTemplateError
from pysource.l1_entities.resolution import Exhausted
from pysource.l2_use_cases.resolver_context import ResolverContext
from pysource.l3_interface_adapters.controllers.source_controller import (
    SourceController,
    format_exhausted,
    format_usage_error,
)
from pysource.l3_interface_adapters.gateways.exec_script_loader import ExecScriptLoader
from pysource.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from pysource.l4_frameworks_and_drivers.config import build_app_config
from pysource.l4_frameworks_and_drivers.container import build_context
from pysource.l4_frameworks_and_drivers.logging_setup import setup_logging

log = logging.getLogger('pysource.cli')

# Everything after NAME belongs to the sourced module, including its own --flags.
_CONTEXT_SETTINGS = {'ignore_unknown_options': True, 'allow_interspersed_args': False}


def _err(line: str) -> None:
    click.echo(line, err=True)


def _source_options(f):
    """Options shared by the ``source`` and ``.`` commands."""
    decorators = [
        click.command(context_settings=_CONTEXT_SETTINGS),
        click.option(
            '-c',
            '--config',
            'config_path',
            default=None,
            type=click.Path(dir_okay=False),
            help='Path to YAML config file.',
        ),
        click.option(
            '-p',
            '--path',
            'extra_templates',
            multiple=True,
            metavar='TEMPLATE',
            help="Append a search path template, e.g. './lib/%s.py'. Repeatable.",
        ),
        click.option('--no-plugins', is_flag=True, help='Do not load searcher plugins.'),
        click.option('--which', is_flag=True, help='Print the resolved path instead of running it.'),
        click.option('--list-path', is_flag=True, help='Print the effective search path and exit.'),
        click.option('-v', '--verbose', is_flag=True, help='Log resolution steps to stderr.'),
        click.version_option(version=__version__),
        click.argument('name', required=False),
        click.argument('args', nargs=-1, type=click.UNPROCESSED),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


@_source_options
def cli(config_path, extra_templates, no_plugins, which, list_path, verbose, name, args):
    """Find NAME on the search path and run it, forwarding ARGS."""
    _run('source', config_path, extra_templates, no_plugins, which, list_path, verbose, name, args)


@_source_options
def dot_cli(config_path, extra_templates, no_plugins, which, list_path, verbose, name, args):
    """Same as pysource, reporting errors under the '.' label."""
    _run('.', config_path, extra_templates, no_plugins, which, list_path, verbose, name, args)


def _run(label, config_path, extra_templates, no_plugins, which, list_path, verbose, name, args) -> None:
    if not name and not list_path:
        _err(format_usage_error(label))
        sys.exit(USAGE_STATUS)

    try:
        config = build_app_config(YamlConfigLoader().load_raw(config_path))
    except (FileNotFoundError, ConfigError, ValidationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_logging('DEBUG' if verbose else config.logging.level, config.logging.file)

    try:
        context = build_context(
            config,
            extra_templates=extra_templates,
            plugins=False if no_plugins else None,
        )
    except SearchPathTemplateError as e:
        raise click.UsageError(str(e)) from e
    log.debug('Search path: %s', [str(t) for t in context.search_path])
    log.debug('Searchers: %s', context.searchers.names())

    if list_path:
        for template in context.search_path:
            click.echo(str(template))
        return

    if which:
        status = _which(label, context, name)
    else:
        controller = SourceController(context, ExecScriptLoader(), emit=_err, label=label)
        status = controller.run(name, args)
    if status:
        sys.exit(status)


def _which(label: str, context: ResolverContext, name: str) -> int:
    result = context.resolve(name)
    if isinstance(result, Exhausted):
        for line in format_exhausted(label, result):
            _err(line)
        return NOT_FOUND_STATUS
    click.echo(result.path)
    return 0
