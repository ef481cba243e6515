"""Content fingerprints for skill folders.

The fingerprint recorded as ``computedHash`` in the project lock file is a
SHA-256 over every regular file in the skill folder:

1. Collect files recursively, skipping ``.git`` and ``node_modules``
   directories and any symlink or special file.
2. Sort by relative POSIX path.
3. For each file, feed its relative path (as the original filesystem bytes)
   and then its raw bytes into a single SHA-256.

The result is the lowercase hex digest. Two folders with the same file
names and bytes always produce the same fingerprint, independent of
filesystem iteration order, timestamps, or permissions.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from skillcheck.exceptions import HashComputationError

SKIP_DIRS: frozenset[str] = frozenset({".git", "node_modules"})


def _collect_files(root: Path, current: Path, out: list[tuple[str, Path]]) -> None:
    for entry in current.iterdir():
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if entry.name in SKIP_DIRS:
                continue
            _collect_files(root, entry, out)
        elif entry.is_file():
            out.append((entry.relative_to(root).as_posix(), entry))


def compute_skill_folder_hash(skill_dir: Path) -> str:
    """Compute the content fingerprint of a skill folder.

    Args:
        skill_dir: The skill folder (usually inside the canonical store).

    Returns:
        Hex-encoded SHA-256 digest.

    Raises:
        HashComputationError: If the folder or any file in it cannot be
            read.
    """
    files: list[tuple[str, Path]] = []
    try:
        _collect_files(skill_dir, skill_dir, files)
        files.sort(key=lambda item: item[0])

        digest = hashlib.sha256()
        for rel_path, path in files:
            digest.update(os.fsencode(rel_path))
            digest.update(path.read_bytes())
    except (OSError, UnicodeError) as exc:
        raise HashComputationError(
            f"Cannot hash {skill_dir}: {getattr(exc, 'strerror', None) or exc}"
        ) from exc
    return digest.hexdigest()
