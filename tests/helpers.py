"""Shared test helpers for building fake skill installations.

Each helper creates a minimal but realistic directory structure: a
canonical store under ``.agents/skills``, agent skills directories, and
project or global lock files.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from skillcheck.agents import AgentProfile, AgentRegistry


def write_skill(
    store: Path,
    name: str,
    description: str | None = None,
    body: str = "This is a test skill.\n",
) -> Path:
    """Create a skill folder with a valid SKILL.md under ``store``."""
    skill_dir = store / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "SKILL.md").write_text(
        "---\n"
        f"name: {name}\n"
        f"description: {description or f'A test skill called {name}'}\n"
        "---\n\n"
        f"# {name}\n\n"
        f"{body}"
    )
    return skill_dir


def write_local_lock(cwd: Path, skills: dict[str, dict[str, str]], version: int = 1) -> Path:
    """Write ``skills-lock.json`` under ``cwd``."""
    path = cwd / "skills-lock.json"
    path.write_text(json.dumps({"version": version, "skills": skills}, indent=2))
    return path


def write_global_lock(home: Path, skills: dict[str, dict[str, str]], version: int = 3) -> Path:
    """Write ``~/.agents/.skill-lock.json`` under ``home``."""
    path = home / ".agents" / ".skill-lock.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"version": version, "skills": skills}, indent=2))
    return path


def local_entry(computed_hash: str, source: str = "test/repo") -> dict[str, str]:
    """A project lock entry in on-disk (camelCase) form."""
    return {"source": source, "sourceType": "github", "computedHash": computed_hash}


def relative_link(link: Path, target: Path) -> None:
    """Create ``link`` as a relative symlink to ``target``."""
    link.parent.mkdir(parents=True, exist_ok=True)
    link.symlink_to(os.path.relpath(target, link.parent))


def make_registry() -> AgentRegistry:
    """Two agents with their own directories and one reading the store."""
    return AgentRegistry([
        AgentProfile(
            name="alpha",
            display_name="Alpha Agent",
            skills_dir=".alpha/skills",
            global_skills_dir=".alpha/skills",
            detect_paths=(".alpha",),
        ),
        AgentProfile(
            name="beta",
            display_name="Beta Agent",
            skills_dir=".beta/skills",
            global_skills_dir=".config/beta/skills",
            detect_paths=(".config/beta",),
        ),
        AgentProfile(
            name="shared",
            display_name="Shared Agent",
            skills_dir=".agents/skills",
            global_skills_dir=".shared/skills",
            detect_paths=(".shared",),
        ),
    ])
