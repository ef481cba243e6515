"""``skillcheck verify`` -- Verify installed skills against the lock file.

Reads the project (or, with ``--global``, the global) lock file, lists the
skills installed in the canonical store and agent directories, and reports
each skill's status along with any agent symlinks that no longer point at
the canonical copy. Nothing on disk is changed.

Exit Codes:
    0 -- Every skill verified, or only untracked skills were found.
    1 -- A skill is modified, missing or invalid, a link is broken, or an
        unknown agent was requested.
    2 -- The lock file could not be read.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from skillcheck.agents import default_registry
from skillcheck.core.verify import verify_skills
from skillcheck.exceptions import LockfileError, UnknownAgentError
from skillcheck.scope import Scope


def _split_agents(values: tuple[str, ...]) -> list[str] | None:
    """Flatten repeated and comma-separated ``--agent`` values."""
    names = [n.strip() for v in values for n in v.split(",") if n.strip()]
    return names or None


@click.command("verify")
@click.option(
    "--global", "-g", "is_global",
    is_flag=True,
    help="Verify global skills instead of project skills.",
)
@click.option(
    "--agent", "-a", "agents",
    multiple=True,
    metavar="AGENT",
    help="Only check these agents (repeatable, or comma-separated).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show details for every skill, not only problems.",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the summary as JSON.",
)
def verify_command(
    is_global: bool,
    agents: tuple[str, ...],
    verbose: bool,
    as_json: bool,
) -> None:
    """Verify installed skills against the recorded lock state.

    Reports modified, missing, untracked and invalid skills, and agent
    symlinks that do not point at the canonical copy.

    Exit code 0 if everything verifies (untracked skills are informational),
    1 if any issue is found, 2 if the lock file cannot be read.
    """
    registry = default_registry()
    cwd = Path.cwd()
    home = Path.home()
    scope = Scope.from_flag(is_global)

    try:
        summary = verify_skills(
            scope=scope,
            agent_filter=_split_agents(agents),
            cwd=cwd,
            home=home,
            registry=registry,
        )
    except UnknownAgentError as exc:
        from skillcheck.cli.output import console
        console.print(f"[yellow]Invalid agents: {escape(', '.join(exc.unknown))}[/yellow]")
        console.print(f"[dim]Valid agents: {', '.join(exc.valid)}[/dim]")
        sys.exit(1)
    except LockfileError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
    elif verbose:
        from skillcheck.cli.output import print_verify_verbose
        print_verify_verbose(summary, cwd, home, registry)
    else:
        from skillcheck.cli.output import print_verify_standard
        print_verify_standard(summary, cwd, home)

    sys.exit(1 if summary.counts.has_failures else 0)
