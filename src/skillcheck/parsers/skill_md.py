"""Parser for ``SKILL.md`` skill descriptors.

Every skill folder carries a ``SKILL.md`` Markdown file whose YAML
frontmatter, delimited by ``---`` lines, declares at least the skill's
``name`` and ``description``::

    ---
    name: pdf-tools
    description: Extract text and tables from PDF files
    ---

    # PDF tools
    ...

The regex only locates the frontmatter block; its content is parsed with
PyYAML's ``safe_load``. A descriptor without frontmatter, with malformed
YAML, or without a string ``name`` and ``description`` is invalid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from skillcheck.exceptions import ParseError

SKILL_MD = "SKILL.md"

# Match YAML frontmatter: ---\n...\n--- (closing delimiter may end the file).
_FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)


@dataclass
class SkillDescriptor:
    """Metadata declared in a skill's ``SKILL.md`` frontmatter.

    Attributes:
        name: Declared skill name.
        description: One-line summary of what the skill does.
        body: Markdown content after the frontmatter.
        metadata: Any other frontmatter keys, unvalidated.
        source_path: Path of the parsed ``SKILL.md``.
    """

    name: str
    description: str
    body: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_path: Path | None = None


def _parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    match = _FRONTMATTER_PATTERN.match(text)
    if match is None:
        raise ParseError("SKILL.md has no frontmatter")
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid frontmatter YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError("Frontmatter is not a mapping")
    return data, text[match.end():]


def parse_skill_text(text: str, source_path: Path | None = None) -> SkillDescriptor:
    """Parse ``SKILL.md`` content.

    Raises:
        ParseError: If the frontmatter is missing, malformed, or lacks a
            string ``name`` or ``description``.
    """
    data, body = _parse_frontmatter(text)
    name = data.pop("name", None)
    description = data.pop("description", None)
    if not isinstance(name, str) or not name.strip():
        raise ParseError("Frontmatter 'name' must be a non-empty string")
    if not isinstance(description, str) or not description.strip():
        raise ParseError("Frontmatter 'description' must be a non-empty string")
    return SkillDescriptor(
        name=name.strip(),
        description=description.strip(),
        body=body,
        metadata=data,
        source_path=source_path,
    )


def parse_skill_md(path: Path) -> SkillDescriptor | None:
    """Parse a ``SKILL.md`` file, returning None when it is missing or invalid.

    Args:
        path: Path to the ``SKILL.md`` file itself.

    Returns:
        The parsed descriptor, or None if the file cannot be read or does
        not declare valid frontmatter.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    try:
        return parse_skill_text(text, source_path=path)
    except ParseError:
        return None
