"""Status reconciliation between the lock record and the installed skills.

The reconciler merges two independent views of the same skills into one
classified result per skill name:

==========  =========  ===============  ================================  ===========
In lock     Installed  SKILL.md valid   Hash check                        Status
==========  =========  ===============  ================================  ===========
yes         no         --               --                                missing
yes         yes        no               --                                invalid
yes         yes        yes              project scope, hash differs       modified
yes         yes        yes              project scope, hash equal         ok
yes         yes        yes              project scope, hash unreadable    invalid
yes         yes        yes              global scope (not recomputable)   ok
no          yes        --               --                                untracked
==========  =========  ===============  ================================  ===========

Algorithm:
    1. Index installed skills by name in a dict.
    2. Lock pass: classify each lock entry, popping its name from the index.
    3. Sweep pass: everything left in the index is untracked.
    4. Sort results by name using Unicode collation.

Each name is visited exactly once across the two passes, so the summary
holds exactly one result per distinct name and the work is linear in the
number of skills. Every installed skill, whatever its status, also goes
through the symlink integrity check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache
from pathlib import Path

from pyuca import Collator

from skillcheck.core.lockfile import (
    LocalLockEntry,
    LockEntry,
    compute_skill_folder_hash,
)
from skillcheck.core.verify.models import (
    BrokenSymlink,
    VerifyResult,
    VerifyStatus,
    VerifySummary,
)
from skillcheck.core.verify.symlinks import check_symlink_integrity
from skillcheck.discovery.layout import InstallLayout
from skillcheck.discovery.models import InstalledSkill
from skillcheck.exceptions import HashComputationError
from skillcheck.parsers.skill_md import SKILL_MD, SkillDescriptor, parse_skill_md
from skillcheck.scope import Scope

logger = logging.getLogger(__name__)

DescriptorParser = Callable[[Path], "SkillDescriptor | None"]
Fingerprinter = Callable[[Path], str]
LinkChecker = Callable[[str, Path, "list[str]", Scope], "list[BrokenSymlink]"]

MISSING_ERROR = "Skill in lock file but not found on disk"
INVALID_DESCRIPTOR_ERROR = "SKILL.md is missing or invalid"
UNTRACKED_ERROR = "Skill on disk but not in lock file"


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def result_sort_key(result: VerifyResult) -> tuple[tuple[int, ...], str]:
    """Locale-aware name ordering with the raw name as tie-breaker.

    Uses the default Unicode Collation Algorithm table, so accented letters
    sort with their base letter and lowercase precedes uppercase when names
    are otherwise equal.
    """
    return (_collator().sort_key(result.name), result.name)


class Reconciler:
    """Classify every skill in the lock record and on disk.

    The reconciler performs no I/O of its own. Reading descriptors,
    fingerprinting folders and checking links go through the collaborators
    passed in, which default to the real filesystem implementations.

    Args:
        layout: Path resolution for this run; used by the default link
            checker.
        parse_descriptor: ``SKILL.md`` path -> descriptor, or None if
            invalid.
        compute_hash: Skill folder -> content fingerprint. May raise
            ``HashComputationError``.
        check_links: ``(name, canonical_path, agents, scope)`` -> findings.
    """

    def __init__(
        self,
        layout: InstallLayout,
        parse_descriptor: DescriptorParser = parse_skill_md,
        compute_hash: Fingerprinter = compute_skill_folder_hash,
        check_links: LinkChecker | None = None,
    ) -> None:
        self._layout = layout
        self._parse_descriptor = parse_descriptor
        self._compute_hash = compute_hash
        self._check_links = check_links or self._default_link_checker

    def _default_link_checker(
        self,
        skill_name: str,
        canonical_path: Path,
        agents: list[str],
        scope: Scope,
    ) -> list[BrokenSymlink]:
        return check_symlink_integrity(
            skill_name, canonical_path, agents, scope, self._layout
        )

    # -- Public API ---------------------------------------------------------

    def reconcile(
        self,
        lock_entries: Mapping[str, LockEntry],
        installed_skills: Iterable[InstalledSkill],
        scope: Scope,
        agents_to_check: list[str],
    ) -> VerifySummary:
        """Produce the verification summary for one scope.

        Args:
            lock_entries: Recorded skills keyed by name.
            installed_skills: Skills observed on disk.
            scope: The scope being verified. Decides whether hashes are
                recomputed.
            agents_to_check: Agents whose links are inspected.

        Returns:
            An immutable summary with one result per distinct skill name.
        """
        remaining: dict[str, InstalledSkill] = {s.name: s for s in installed_skills}
        results: list[VerifyResult] = []

        for name, entry in lock_entries.items():
            installed = remaining.pop(name, None)
            if installed is None:
                results.append(VerifyResult(
                    name=name,
                    path="",
                    status=VerifyStatus.MISSING,
                    error=MISSING_ERROR,
                ))
                continue
            results.append(self._classify_locked(entry, installed, scope, agents_to_check))

        for installed in remaining.values():
            results.append(VerifyResult(
                name=installed.name,
                path=str(installed.canonical_path),
                status=VerifyStatus.UNTRACKED,
                agents=tuple(installed.agents),
                broken_symlinks=self._links(installed, scope, agents_to_check),
                error=UNTRACKED_ERROR,
            ))

        results.sort(key=result_sort_key)
        return VerifySummary(scope=scope, results=tuple(results))

    # -- Classification -----------------------------------------------------

    def _links(
        self,
        installed: InstalledSkill,
        scope: Scope,
        agents: list[str],
    ) -> tuple[BrokenSymlink, ...]:
        return tuple(self._check_links(
            installed.name, installed.canonical_path, list(agents), scope
        ))

    def _classify_locked(
        self,
        entry: LockEntry,
        installed: InstalledSkill,
        scope: Scope,
        agents: list[str],
    ) -> VerifyResult:
        path = installed.canonical_path
        broken = self._links(installed, scope, agents)

        descriptor = self._parse_descriptor(path / SKILL_MD)
        if descriptor is None:
            return VerifyResult(
                name=installed.name,
                path=str(path),
                status=VerifyStatus.INVALID,
                agents=tuple(installed.agents),
                broken_symlinks=broken,
                error=INVALID_DESCRIPTOR_ERROR,
            )

        if scope is Scope.GLOBAL:
            # Global entries record a remote tree id; presence is all we check.
            return VerifyResult(
                name=installed.name,
                path=str(path),
                status=VerifyStatus.OK,
                agents=tuple(installed.agents),
                broken_symlinks=broken,
            )

        expected = entry.computed_hash if isinstance(entry, LocalLockEntry) else ""
        try:
            actual = self._compute_hash(path)
        except (HashComputationError, OSError) as exc:
            logger.warning("Hash computation failed for %s: %s", installed.name, exc)
            return VerifyResult(
                name=installed.name,
                path=str(path),
                status=VerifyStatus.INVALID,
                expected_hash=expected or None,
                agents=tuple(installed.agents),
                broken_symlinks=broken,
                error=f"Failed to compute content hash: {exc}",
            )

        status = VerifyStatus.OK
        if expected and actual != expected:
            status = VerifyStatus.MODIFIED
        return VerifyResult(
            name=installed.name,
            path=str(path),
            status=status,
            expected_hash=expected or None,
            actual_hash=actual,
            agents=tuple(installed.agents),
            broken_symlinks=broken,
        )
