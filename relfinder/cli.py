#!/usr/bin/env python3

import click

from relfinder.config import configure_logging
from relfinder.commands.config import config_cmd
from relfinder.commands.releases import latest_handler, releases_handler, providers_handler


@click.group()
@click.version_option(package_name='relfinder')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug):
    """relfinder - Find the latest upstream release of a project.

    Give it a source reference such as a repository URL; the first
    provider that recognizes it looks up the project's releases.
    """
    configure_logging(debug=debug)


cli.add_command(latest_handler, name='latest')
cli.add_command(releases_handler, name='releases')
cli.add_command(providers_handler, name='providers')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
