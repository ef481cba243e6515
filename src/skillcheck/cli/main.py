"""skillcheck CLI -- Integrity verification for installed agent skills.

Entry point for the ``skillcheck`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    verify  -- Verify installed skills against the lock file.
    agents  -- List known agents and their skills directories.

Usage::

    skillcheck verify                       # Project skills
    skillcheck verify --global              # Global skills
    skillcheck verify -a claude-code -a cursor
    skillcheck verify --verbose
    skillcheck verify --json
    skillcheck agents
"""

from __future__ import annotations

import logging

import click

from skillcheck import __version__
from skillcheck.cli.agents_cmd import agents_command
from skillcheck.cli.verify import verify_command

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (messages go to stderr).",
)
def cli(log_level: str) -> None:
    """skillcheck: Verify installed agent skills against their lock files.

    Detects modified, missing, untracked and invalid skills, and agent
    symlinks that no longer point at the canonical skill store.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(verify_command)
cli.add_command(agents_command)
