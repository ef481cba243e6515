"""The verification entry point: wire the collaborators into the reconciler.

``verify_skills`` reads the lock file for the requested scope, lists the
skills installed on disk, detects which agents are installed, and hands all
three to a ``Reconciler``. It writes nothing.

Only a lock file that cannot be read makes it raise; every per-skill problem
is reported inside the returned summary.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillcheck.agents import AgentRegistry, default_registry, detect_installed_agents
from skillcheck.core.lockfile import read_lock
from skillcheck.core.verify.models import VerifySummary
from skillcheck.core.verify.reconciler import Reconciler
from skillcheck.discovery import InstallLayout, list_installed_skills
from skillcheck.scope import Scope

logger = logging.getLogger(__name__)


def verify_skills(
    scope: Scope = Scope.PROJECT,
    agent_filter: list[str] | None = None,
    cwd: Path | None = None,
    home: Path | None = None,
    registry: AgentRegistry | None = None,
) -> VerifySummary:
    """Verify installed skills against the lock file for one scope.

    Args:
        scope: Project or global installation.
        agent_filter: Restrict discovery and link checks to these agents.
            None means every registered agent for discovery and every
            detected agent for link checks.
        cwd: Project root. Defaults to the current working directory.
        home: Home directory. Defaults to ``Path.home()``.
        registry: Agent catalog. Defaults to ``default_registry()``.

    Returns:
        The verification summary.

    Raises:
        LockfileError: If the lock file exists but cannot be read.
        UnknownAgentError: If ``agent_filter`` names an unknown agent.
    """
    registry = registry if registry is not None else default_registry()
    layout = InstallLayout(registry, cwd=cwd, home=home)
    if agent_filter is not None:
        agent_filter = registry.validate_names(agent_filter)

    lock = read_lock(scope, layout.cwd, layout.home)
    installed = list_installed_skills(layout, scope, agent_filter)

    detected = detect_installed_agents(registry, home=layout.home)
    agents_to_check = (
        [a for a in detected if a in agent_filter]
        if agent_filter is not None
        else detected
    )

    logger.debug(
        "Verifying %s scope: %d locked, %d installed, checking agents: %s",
        scope.value, len(lock.skills), len(installed),
        ", ".join(agents_to_check) or "none",
    )
    return Reconciler(layout).reconcile(lock.skills, installed, scope, agents_to_check)
