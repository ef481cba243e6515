"""Agent catalog and installed-agent detection.

Public API::

    from skillcheck.agents import default_registry, detect_installed_agents

    registry = default_registry()
    for name in detect_installed_agents(registry):
        print(registry.display_name(name))
"""

from __future__ import annotations

from skillcheck.agents.detection import detect_installed_agents
from skillcheck.agents.registry import AgentProfile, AgentRegistry, default_registry

__all__ = [
    "AgentProfile",
    "AgentRegistry",
    "default_registry",
    "detect_installed_agents",
]
