#!/usr/bin/env python3
"""prsummary CLI - Pull request summaries from git history"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..domain.git.changes import GitChangeCollector
from ..domain.report.formatter import format_report
from ..domain.summary import PRSummaryGenerator
from ..infra.config.env_loader import EnvLoader
from ..infra.config.manager import ConfigError, ConfigManager
from ..shared.utils import CliUtils, is_debug


def setup_logging() -> None:
    """Send diagnostics to stderr so stdout carries only the report"""
    level = logging.WARNING
    if is_debug():
        level = logging.DEBUG if os.getenv('PRSUMMARY_DEBUG') == '2' else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(message)s',
        datefmt='[%X]',
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, markup=False)],
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name='prsummary')
@click.argument('base_branch', required=False)
def cli(base_branch):
    """Print a pull request summary for the current branch against BASE_BRANCH.

    BASE_BRANCH defaults to the default branch of origin.
    """
    EnvLoader.load()
    setup_logging()

    repo_root = CliUtils.get_git_root() or os.getcwd()
    try:
        config = ConfigManager(repo_root).get()
    except ConfigError as error:
        CliUtils.handle_error('configuration', error)
        sys.exit(1)

    changes = GitChangeCollector().collect(base_branch)
    summary = PRSummaryGenerator(config).summarize_changes(changes)

    click.echo(format_report(
        branch=changes.current_branch,
        commits=changes.commits,
        changes_overview=changes.diff_stat,
        summary=summary,
    ))


if __name__ == '__main__':
    cli()
