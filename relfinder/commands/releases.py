"""
Release lookup commands for relfinder.

Output is JSONL by default (one result per line) so it pipes into jq;
--pretty (or output.pretty in the config) renders a table instead.
"""

import click
import json
import logging

from ..config import load_config
from ..exit_codes import NoProviderError, ReleaseLookupError
from ..providers import all_providers, find_provider
from ..render import render_results_table
from ..results import Status

logger = logging.getLogger(__name__)


def _pretty_default(pretty):
    """--pretty wins; otherwise fall back to output.pretty from the config."""
    return pretty or bool(load_config().get('output', {}).get('pretty', False))


def _resolve(query):
    """Find the provider for a query, raising NoProviderError if none matches."""
    provider, project_id = find_provider(query)
    if provider is None:
        raise NoProviderError(query)

    logger.debug(f"{provider.name()} matched {query!r} as {project_id}")
    return provider, project_id


@click.command('latest')
@click.argument('query')
@click.option('--pretty', is_flag=True, help='Display as a table instead of JSONL')
def latest_handler(query, pretty):
    """Show the latest release for QUERY (e.g., a repository URL)."""
    provider, project_id = _resolve(query)
    pretty = _pretty_default(pretty)

    result, status = provider.latest(project_id)
    if status != Status.OK:
        raise ReleaseLookupError(provider.name(), project_id, status)

    if pretty:
        render_results_table([result], title=f"{project_id} ({provider.name()})")
    else:
        print(result.to_jsonl(), flush=True)


@click.command('releases')
@click.argument('query')
@click.option('--pretty', is_flag=True, help='Display as a table instead of JSONL')
def releases_handler(query, pretty):
    """List every release for QUERY in upstream order."""
    provider, project_id = _resolve(query)
    pretty = _pretty_default(pretty)

    results, status = provider.releases(project_id)
    if status != Status.OK:
        raise ReleaseLookupError(provider.name(), project_id, status)

    if pretty:
        render_results_table(results, title=f"{project_id} ({provider.name()})")
    else:
        for result in results:
            print(result.to_jsonl(), flush=True)


@click.command('providers')
def providers_handler():
    """List the registered providers in match order."""
    for provider in all_providers():
        print(json.dumps({'name': provider.name()}, ensure_ascii=False))
