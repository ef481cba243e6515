"""Reading project and global lock files.

Two lock files record what should be installed:

- ``<project>/skills-lock.json`` (schema version 1)::

      {"version": 1,
       "skills": {"pdf-tools": {"source": "acme/skills",
                                "sourceType": "github",
                                "computedHash": "3f1c..."}}}

- ``~/.agents/.skill-lock.json`` (schema version 3)::

      {"version": 3,
       "skills": {"pdf-tools": {"source": "acme/skills",
                                "sourceType": "github",
                                "sourceUrl": "https://github.com/acme/skills",
                                "skillPath": "skills/pdf-tools/SKILL.md",
                                "skillFolderHash": "9ab0...",
                                "installedAt": "...", "updatedAt": "..."}}}

A lock file that does not exist is an empty lock. A global lock written by
an older schema is also treated as empty, since its entries cannot be
interpreted. Anything else that prevents reading the file raises
``LockfileError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from skillcheck.core.lockfile.models import (
    GlobalLockEntry,
    LocalLockEntry,
    LockState,
)
from skillcheck.exceptions import LockfileError
from skillcheck.scope import Scope

logger = logging.getLogger(__name__)

LOCAL_LOCK_FILENAME = "skills-lock.json"
GLOBAL_LOCK_PATH = ".agents/.skill-lock.json"

LOCAL_LOCK_VERSION = 1
GLOBAL_LOCK_VERSION = 3


def local_lock_path(cwd: Path) -> Path:
    """Return the project lock file path for a project root."""
    return cwd / LOCAL_LOCK_FILENAME


def global_lock_path(home: Path) -> Path:
    """Return the global lock file path for a home directory."""
    return home / GLOBAL_LOCK_PATH


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a lock file as a JSON object, or None if it does not exist."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise LockfileError(f"Cannot read lock file {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LockfileError(f"Lock file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise LockfileError(f"Lock file {path} must contain a JSON object")
    return data


def _read_version(data: dict[str, Any], path: Path, supported: int) -> int:
    version = data.get("version")
    if isinstance(version, bool) or not isinstance(version, int):
        raise LockfileError(f"Lock file {path} has no integer 'version' field")
    if version > supported:
        raise LockfileError(
            f"Lock file {path} has version {version}; "
            f"this tool supports up to version {supported}"
        )
    return version


def _skill_entries(data: dict[str, Any], path: Path) -> dict[str, dict[str, Any]]:
    skills = data.get("skills", {})
    if not isinstance(skills, dict):
        raise LockfileError(f"Lock file {path}: 'skills' must be an object")
    for name, entry in skills.items():
        if not isinstance(entry, dict):
            raise LockfileError(
                f"Lock file {path}: entry for {name!r} must be an object"
            )
    return skills


def _str_field(entry: dict[str, Any], key: str) -> str:
    """Return a string field, treating null and non-string values as absent."""
    value = entry.get(key)
    return value if isinstance(value, str) else ""


def read_local_lock(cwd: Path) -> LockState:
    """Read the project lock file under ``cwd``.

    Raises:
        LockfileError: If the file exists but cannot be interpreted.
    """
    path = local_lock_path(cwd)
    data = _load_json(path)
    if data is None:
        logger.debug("No project lock file at %s", path)
        return LockState(scope=Scope.PROJECT, version=LOCAL_LOCK_VERSION)

    version = _read_version(data, path, LOCAL_LOCK_VERSION)
    state = LockState(scope=Scope.PROJECT, version=version)
    for name, entry in _skill_entries(data, path).items():
        state.skills[name] = LocalLockEntry(
            name=name,
            source=_str_field(entry, "source"),
            source_type=_str_field(entry, "sourceType"),
            computed_hash=_str_field(entry, "computedHash"),
        )
    return state


def read_global_lock(home: Path) -> LockState:
    """Read the global lock file under ``home``.

    Raises:
        LockfileError: If the file exists but cannot be interpreted.
    """
    path = global_lock_path(home)
    data = _load_json(path)
    if data is None:
        logger.debug("No global lock file at %s", path)
        return LockState(scope=Scope.GLOBAL, version=GLOBAL_LOCK_VERSION)

    version = _read_version(data, path, GLOBAL_LOCK_VERSION)
    if version < GLOBAL_LOCK_VERSION:
        logger.warning(
            "Ignoring global lock file %s with outdated version %d", path, version
        )
        return LockState(scope=Scope.GLOBAL, version=version)

    state = LockState(scope=Scope.GLOBAL, version=version)
    for name, entry in _skill_entries(data, path).items():
        state.skills[name] = GlobalLockEntry(
            name=name,
            source=_str_field(entry, "source"),
            source_type=_str_field(entry, "sourceType"),
            source_url=_str_field(entry, "sourceUrl"),
            skill_path=_str_field(entry, "skillPath"),
            skill_folder_hash=_str_field(entry, "skillFolderHash"),
            installed_at=_str_field(entry, "installedAt"),
            updated_at=_str_field(entry, "updatedAt"),
        )
    return state


def read_lock(scope: Scope, cwd: Path, home: Path) -> LockState:
    """Read the lock file for ``scope``.

    Args:
        scope: Which lock file to read.
        cwd: Project root (used for project scope).
        home: Home directory (used for global scope).

    Raises:
        LockfileError: If the lock file exists but cannot be interpreted.
    """
    if scope is Scope.GLOBAL:
        return read_global_lock(home)
    return read_local_lock(cwd)
