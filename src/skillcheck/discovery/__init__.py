"""Install layout and installed-skill discovery.

Public API::

    from skillcheck.discovery import InstallLayout, list_installed_skills

    layout = InstallLayout(default_registry())
    for skill in list_installed_skills(layout, Scope.PROJECT):
        print(skill.name, skill.agents)
"""

from __future__ import annotations

from skillcheck.discovery.installed import list_installed_skills
from skillcheck.discovery.layout import CANONICAL_SKILLS_DIR, InstallLayout
from skillcheck.discovery.models import InstalledSkill

__all__ = [
    "CANONICAL_SKILLS_DIR",
    "InstallLayout",
    "InstalledSkill",
    "list_installed_skills",
]
