"""Filesystem layout of the canonical skill store and agent directories.

``InstallLayout`` binds a working directory, a home directory and an agent
registry together, and answers the two path questions every other module
asks:

- ``canonical_skills_dir(scope)``: where the single authoritative copy of
  each skill lives (``<cwd>/.agents/skills`` or ``~/.agents/skills``).
- ``agent_base_dir(agent, scope)``: where a given agent looks for skills.

Paths are made absolute but not resolved through symlinks, so they compare
lexically with link targets read back from disk.
"""

from __future__ import annotations

import os
from pathlib import Path

from skillcheck.agents.registry import AgentRegistry
from skillcheck.scope import Scope

CANONICAL_SKILLS_DIR = ".agents/skills"


class InstallLayout:
    """Path resolution for one verification run.

    Args:
        registry: Agent catalog used to look up per-agent directories.
        cwd: Project root. Defaults to the current working directory.
        home: Home directory. Defaults to ``Path.home()``.
    """

    def __init__(
        self,
        registry: AgentRegistry,
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> None:
        self.registry = registry
        self.cwd = Path(os.path.abspath(cwd if cwd is not None else Path.cwd()))
        self.home = Path(os.path.abspath(home if home is not None else Path.home()))

    def _root(self, scope: Scope) -> Path:
        return self.home if scope is Scope.GLOBAL else self.cwd

    def canonical_skills_dir(self, scope: Scope) -> Path:
        """Return the canonical store directory for ``scope``."""
        return self._root(scope) / CANONICAL_SKILLS_DIR

    def agent_base_dir(self, agent: str, scope: Scope) -> Path:
        """Return the directory in which ``agent`` looks for skills.

        Raises:
            UnknownAgentError: If ``agent`` is not in the registry.
        """
        profile = self.registry.get(agent)
        rel = profile.global_skills_dir if scope is Scope.GLOBAL else profile.skills_dir
        return self._root(scope) / rel

    def shares_canonical_dir(self, agent: str, scope: Scope) -> bool:
        """True when ``agent`` reads skills directly from the canonical store."""
        return self.agent_base_dir(agent, scope) == self.canonical_skills_dir(scope)
