"""Lock file data models -- LocalLockEntry, GlobalLockEntry and LockState.

Defines the recorded expected state of installed skills. These are pure
data holders (dataclasses) with no business logic, safe to import from any
other module without circular-dependency concerns.

The two scopes record different fingerprints:

- Project scope (``skills-lock.json``) stores ``computed_hash``, a SHA-256
  over the skill folder's local content. It can be recomputed and compared.
- Global scope (``~/.agents/.skill-lock.json``) stores
  ``skill_folder_hash``, the tree identifier of the skill folder in its
  remote repository. It cannot be reproduced from local bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from skillcheck.scope import Scope


@dataclass
class LocalLockEntry:
    """A skill recorded in the project lock file.

    Attributes:
        name: Skill name (unique key).
        source: Origin identifier, e.g. "owner/repo" or a local path.
        source_type: Kind of origin ("github", "local", ...).
        computed_hash: Hex SHA-256 of the skill folder at install time.
    """

    name: str
    source: str
    source_type: str
    computed_hash: str = ""


@dataclass
class GlobalLockEntry:
    """A skill recorded in the global lock file.

    Attributes:
        name: Skill name (unique key).
        source: Origin identifier, e.g. "owner/repo".
        source_type: Kind of origin ("github", "well-known", ...).
        source_url: Full URL the skill was fetched from.
        skill_path: Path of the skill folder inside its source repository.
        skill_folder_hash: Remote tree identifier of the skill folder.
        installed_at: ISO 8601 timestamp of first installation.
        updated_at: ISO 8601 timestamp of the last update.
    """

    name: str
    source: str
    source_type: str
    source_url: str = ""
    skill_path: str = ""
    skill_folder_hash: str = ""
    installed_at: str = ""
    updated_at: str = ""


LockEntry = Union[LocalLockEntry, GlobalLockEntry]


@dataclass
class LockState:
    """The parsed content of one lock file.

    Attributes:
        scope: Which lock file this came from.
        version: Schema version tag read from the file (or the current
            version for a lock file that does not exist yet).
        skills: Mapping of skill name to its lock entry.
    """

    scope: Scope
    version: int
    skills: dict[str, LockEntry] = field(default_factory=dict)
