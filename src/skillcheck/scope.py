"""Installation scope shared by the lockfile, discovery and verify packages."""

from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    """Where a set of skills is installed.

    ``PROJECT`` skills live under the working directory and are recorded in
    ``skills-lock.json`` with a locally computed content hash. ``GLOBAL``
    skills live under the home directory and are recorded in
    ``~/.agents/.skill-lock.json`` with a remote tree identifier.
    """

    PROJECT = "project"
    GLOBAL = "global"

    @classmethod
    def from_flag(cls, is_global: bool) -> "Scope":
        """Map a ``--global`` style boolean onto a scope."""
        return cls.GLOBAL if is_global else cls.PROJECT
