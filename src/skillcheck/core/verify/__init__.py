"""Skill verification: status reconciliation and symlink integrity.

- ``models``: ``VerifyStatus``, ``BrokenSymlink``, ``VerifyResult``,
  ``VerifyCounts``, ``VerifySummary``.
- ``symlinks``: ``check_symlink_integrity`` for one skill across agents.
- ``reconciler``: ``Reconciler`` merging lock entries and installed skills.
- ``engine``: ``verify_skills``, the single public entry point.
"""

from skillcheck.core.verify.engine import verify_skills
from skillcheck.core.verify.models import (
    BrokenSymlink,
    LinkIssue,
    VerifyCounts,
    VerifyResult,
    VerifyStatus,
    VerifySummary,
)
from skillcheck.core.verify.reconciler import Reconciler
from skillcheck.core.verify.symlinks import check_symlink_integrity

__all__ = [
    "BrokenSymlink",
    "LinkIssue",
    "Reconciler",
    "VerifyCounts",
    "VerifyResult",
    "VerifyStatus",
    "VerifySummary",
    "check_symlink_integrity",
    "verify_skills",
]
