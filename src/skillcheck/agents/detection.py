"""Detect which registered agents are installed on this machine."""

from __future__ import annotations

import logging
from pathlib import Path

from skillcheck.agents.registry import AgentProfile, AgentRegistry

logger = logging.getLogger(__name__)


def _profile_installed(home: Path, profile: AgentProfile) -> bool:
    for rel in profile.detect_paths:
        candidate = home / rel
        try:
            if candidate.exists():
                return True
        except (PermissionError, OSError):
            logger.warning("Cannot probe %s for %s", candidate, profile.name)
            continue
    return False


def detect_installed_agents(
    registry: AgentRegistry,
    home: Path | None = None,
) -> list[str]:
    """Return identifiers of installed agents, in registry order.

    An agent counts as installed when any of its ``detect_paths`` exists
    under the home directory.

    Args:
        registry: The agent catalog to probe.
        home: Override the home directory (for testing).

    Returns:
        Agent identifiers whose detection paths were found.
    """
    home_dir = home if home is not None else Path.home()
    found = [p.name for p in registry if _profile_installed(home_dir, p)]
    logger.debug("Detected agents: %s", ", ".join(found) or "none")
    return found
