"""Skill descriptor parsing."""

from __future__ import annotations

from skillcheck.parsers.skill_md import (
    SKILL_MD,
    SkillDescriptor,
    parse_skill_md,
    parse_skill_text,
)

__all__ = ["SKILL_MD", "SkillDescriptor", "parse_skill_md", "parse_skill_text"]
