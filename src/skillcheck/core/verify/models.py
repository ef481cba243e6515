"""Data models for verification: VerifyStatus, BrokenSymlink, VerifyResult, VerifySummary.

These are the types produced by the reconciler and consumed by the CLI
renderers. They are decoupled from the reconciliation logic so that
renderers can import them without pulling in filesystem code.

``VerifySummary`` is immutable and its ``counts`` are derived from its
results on access. The tally therefore always agrees with the results; no
caller can set one without the other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from skillcheck.scope import Scope


# ---------------------------------------------------------------------------
# VerifyStatus: Per-skill classification
# ---------------------------------------------------------------------------


class VerifyStatus(str, Enum):
    """Outcome of verifying one skill.

    - **OK**: Recorded and installed; content matches (or cannot be
      recomputed, for global skills).
    - **MODIFIED**: Installed content hash differs from the recorded hash.
    - **MISSING**: Recorded in the lock file but not found on disk.
    - **UNTRACKED**: Found on disk but not recorded in the lock file.
    - **INVALID**: Recorded and installed, but SKILL.md is missing or
      invalid, or the content hash could not be computed.
    """

    OK = "ok"
    MODIFIED = "modified"
    MISSING = "missing"
    UNTRACKED = "untracked"
    INVALID = "invalid"


class LinkIssue(str, Enum):
    """Why an agent's installation point was reported."""

    TARGET_MISMATCH = "target_mismatch"
    UNEXPECTED_ENTRY_TYPE = "unexpected_entry_type"


# ---------------------------------------------------------------------------
# BrokenSymlink / VerifyResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BrokenSymlink:
    """An agent installation point that does not reach the canonical copy.

    Attributes:
        agent: Agent identifier whose skills directory holds the entry.
        link: Absolute path of the entry.
        reason: ``TARGET_MISMATCH`` for a symlink resolving elsewhere,
            ``UNEXPECTED_ENTRY_TYPE`` for an entry that is neither a
            symlink nor a directory.
    """

    agent: str
    link: str
    reason: LinkIssue = LinkIssue.TARGET_MISMATCH

    def to_dict(self) -> dict[str, Any]:
        return {"agent": self.agent, "link": self.link, "reason": self.reason.value}


@dataclass(frozen=True)
class VerifyResult:
    """Verification outcome for a single skill name.

    Attributes:
        name: Skill name.
        path: Content path on disk, or "" for a missing skill.
        status: The skill's classification.
        expected_hash: Hash recorded in the project lock file, if any.
        actual_hash: Hash recomputed from disk, if computed.
        agents: Agents that currently see this skill.
        broken_symlinks: Link topology findings for this skill.
        error: Human-readable explanation for non-ok statuses.
    """

    name: str
    path: str
    status: VerifyStatus
    expected_hash: str | None = None
    actual_hash: str | None = None
    agents: tuple[str, ...] = field(default_factory=tuple)
    broken_symlinks: tuple[BrokenSymlink, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def has_issues(self) -> bool:
        """True unless the skill is ``ok`` with no broken links."""
        return self.status is not VerifyStatus.OK or bool(self.broken_symlinks)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "status": self.status.value,
            "agents": list(self.agents),
            "brokenSymlinks": [b.to_dict() for b in self.broken_symlinks],
        }
        if self.expected_hash is not None:
            data["expectedHash"] = self.expected_hash
        if self.actual_hash is not None:
            data["actualHash"] = self.actual_hash
        if self.error is not None:
            data["error"] = self.error
        return data


# ---------------------------------------------------------------------------
# VerifyCounts / VerifySummary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VerifyCounts:
    """Aggregate tally of a summary's results."""

    ok: int = 0
    modified: int = 0
    missing: int = 0
    untracked: int = 0
    invalid: int = 0
    broken_symlinks: int = 0

    @classmethod
    def from_results(cls, results: tuple[VerifyResult, ...]) -> VerifyCounts:
        by_status = {status: 0 for status in VerifyStatus}
        broken = 0
        for result in results:
            by_status[result.status] += 1
            broken += len(result.broken_symlinks)
        return cls(
            ok=by_status[VerifyStatus.OK],
            modified=by_status[VerifyStatus.MODIFIED],
            missing=by_status[VerifyStatus.MISSING],
            untracked=by_status[VerifyStatus.UNTRACKED],
            invalid=by_status[VerifyStatus.INVALID],
            broken_symlinks=broken,
        )

    @property
    def has_failures(self) -> bool:
        """True if anything other than untracked skills was found.

        Untracked skills are informational only.
        """
        return bool(
            self.modified or self.missing or self.invalid or self.broken_symlinks
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "ok": self.ok,
            "modified": self.modified,
            "missing": self.missing,
            "untracked": self.untracked,
            "invalid": self.invalid,
            "brokenSymlinks": self.broken_symlinks,
        }


@dataclass(frozen=True)
class VerifySummary:
    """Complete, immutable outcome of one verification run.

    Attributes:
        scope: The scope that was verified.
        results: One result per distinct skill name, sorted by name.
    """

    scope: Scope
    results: tuple[VerifyResult, ...] = field(default_factory=tuple)

    @property
    def counts(self) -> VerifyCounts:
        """Tally of ``results`` by status plus total broken links."""
        return VerifyCounts.from_results(self.results)

    def get(self, name: str) -> VerifyResult | None:
        """Return the result for ``name``, or None."""
        for result in self.results:
            if result.name == name:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, with camelCase keys."""
        return {
            "scope": self.scope.value,
            "results": [r.to_dict() for r in self.results],
            "counts": self.counts.to_dict(),
        }
