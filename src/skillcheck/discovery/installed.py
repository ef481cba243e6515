"""List the skills installed in the canonical store and agent directories.

Discovery Algorithm:
    1. Every non-hidden subdirectory of the canonical store is a skill.
    2. Every non-hidden directory (or symlink to one) in a checked agent's
       skills directory is a skill too; names not present in the canonical
       store use the agent's copy as their content path.
    3. A skill's ``agents`` are the checked agents whose skills directory
       holds an entry of that name, whatever its type. Agents that read the
       canonical store directly see every canonical skill.

No SKILL.md validation happens here; a directory with a broken or absent
descriptor is still installed, and the reconciler classifies it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillcheck.discovery.layout import InstallLayout
from skillcheck.discovery.models import InstalledSkill
from skillcheck.scope import Scope

logger = logging.getLogger(__name__)


def _skill_dirs(base: Path) -> list[Path]:
    """Return non-hidden directories directly under ``base``, sorted by name."""
    try:
        entries = sorted(base.iterdir())
    except FileNotFoundError:
        return []
    except (PermissionError, OSError):
        logger.warning("Cannot list skills directory: %s", base)
        return []

    dirs: list[Path] = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            if entry.is_dir():
                dirs.append(entry)
        except (PermissionError, OSError):
            logger.warning("Cannot inspect: %s", entry)
    return dirs


def list_installed_skills(
    layout: InstallLayout,
    scope: Scope,
    agent_filter: list[str] | None = None,
) -> list[InstalledSkill]:
    """Discover installed skills for one scope.

    Args:
        layout: Path resolution for this run.
        scope: Project or global installation.
        agent_filter: Restrict agent-directory scanning to these agents.
            None scans every registered agent.

    Returns:
        Installed skills sorted by name, one per distinct name.

    Raises:
        UnknownAgentError: If ``agent_filter`` names an unknown agent.
    """
    agents = (
        layout.registry.validate_names(agent_filter)
        if agent_filter is not None
        else layout.registry.names
    )
    canonical_dir = layout.canonical_skills_dir(scope)

    content_paths: dict[str, Path] = {p.name: p for p in _skill_dirs(canonical_dir)}
    agent_dirs = {agent: layout.agent_base_dir(agent, scope) for agent in agents}

    for agent, base in agent_dirs.items():
        if layout.shares_canonical_dir(agent, scope):
            continue
        for path in _skill_dirs(base):
            content_paths.setdefault(path.name, path)

    skills: list[InstalledSkill] = []
    for name in sorted(content_paths):
        seen_by = tuple(
            agent for agent, base in agent_dirs.items()
            if os.path.lexists(base / name)
        )
        skills.append(InstalledSkill(
            name=name,
            canonical_path=content_paths[name],
            agents=seen_by,
        ))

    logger.debug("Found %d installed %s skills", len(skills), scope.value)
    return skills
