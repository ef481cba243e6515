"""Skill Lock Files --- the recorded expected state of installed skills.

The package is split into focused submodules:

- ``models``: Data classes (``LocalLockEntry``, ``GlobalLockEntry``,
  ``LockState``).
- ``lockfile``: Reading the project and global lock files.
- ``hashing``: The content fingerprint recorded for project skills.

All public names are re-exported here so callers can write
``from skillcheck.core.lockfile import read_lock``.
"""

from skillcheck.core.lockfile.hashing import SKIP_DIRS, compute_skill_folder_hash
from skillcheck.core.lockfile.lockfile import (
    GLOBAL_LOCK_PATH,
    GLOBAL_LOCK_VERSION,
    LOCAL_LOCK_FILENAME,
    LOCAL_LOCK_VERSION,
    global_lock_path,
    local_lock_path,
    read_global_lock,
    read_local_lock,
    read_lock,
)
from skillcheck.core.lockfile.models import (
    GlobalLockEntry,
    LocalLockEntry,
    LockEntry,
    LockState,
)

__all__ = [
    "GLOBAL_LOCK_PATH",
    "GLOBAL_LOCK_VERSION",
    "GlobalLockEntry",
    "LOCAL_LOCK_FILENAME",
    "LOCAL_LOCK_VERSION",
    "LocalLockEntry",
    "LockEntry",
    "LockState",
    "SKIP_DIRS",
    "compute_skill_folder_hash",
    "global_lock_path",
    "local_lock_path",
    "read_global_lock",
    "read_local_lock",
    "read_lock",
]
