"""``skillcheck agents`` -- List known agents and where they keep skills.

Prints a table of every registered agent with its project and global
skills directories and whether it is installed on this machine.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from skillcheck.agents import default_registry, detect_installed_agents


@click.command("agents")
def agents_command() -> None:
    """List known agents, their skills directories, and detection state."""
    from skillcheck.cli.output import print_agents_table

    registry = default_registry()
    print_agents_table(registry, detect_installed_agents(registry))
