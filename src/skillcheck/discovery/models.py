"""Data models for the discovery package."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class InstalledSkill:
    """A skill observed on disk during one verification run.

    Attributes:
        name: Skill directory name.
        canonical_path: Absolute path of the skill's content. Normally inside
            the canonical store; for a skill that exists only in an agent
            directory it is that agent's copy.
        agents: Identifiers of agents whose skills directory holds an entry
            (symlink or copy) for this skill, in the order they were checked.
    """

    name: str
    canonical_path: Path
    agents: tuple[str, ...] = field(default_factory=tuple)
