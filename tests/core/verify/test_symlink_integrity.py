"""Tests for check_symlink_integrity.

Verifies:
    - Links resolving to the canonical path are consistent.
    - Links resolving elsewhere are reported (even when status is ok).
    - Copy-mode directories and absent entries are not reported.
    - Agents sharing the canonical directory are skipped.
    - Regular files at the installation point are reported as unexpected.
"""

from __future__ import annotations

from pathlib import Path

from skillcheck.core.verify import BrokenSymlink, LinkIssue, check_symlink_integrity
from skillcheck.discovery import InstallLayout
from skillcheck.scope import Scope
from tests.helpers import relative_link, write_skill


def _check(layout: InstallLayout, name: str, canonical: Path, agents: list[str]) -> list[BrokenSymlink]:
    return check_symlink_integrity(name, canonical, agents, Scope.PROJECT, layout)


class TestConsistentLinks:
    def test_relative_link_to_canonical(self, layout: InstallLayout, store: Path, project: Path) -> None:
        canonical = write_skill(store, "s1")
        relative_link(project / ".alpha" / "skills" / "s1", canonical)
        assert _check(layout, "s1", canonical, ["alpha"]) == []

    def test_absolute_link_to_canonical(self, layout: InstallLayout, store: Path, project: Path) -> None:
        canonical = write_skill(store, "s1")
        link = project / ".alpha" / "skills" / "s1"
        link.parent.mkdir(parents=True)
        link.symlink_to(canonical)
        assert _check(layout, "s1", canonical, ["alpha"]) == []

    def test_copy_mode_directory(self, layout: InstallLayout, store: Path, project: Path) -> None:
        """A real directory is a copy-mode install and always consistent."""
        canonical = write_skill(store, "s1")
        write_skill(project / ".alpha" / "skills", "s1", description="diverged copy")
        assert _check(layout, "s1", canonical, ["alpha"]) == []

    def test_absent_entry_not_reported(self, layout: InstallLayout, store: Path) -> None:
        canonical = write_skill(store, "s1")
        assert _check(layout, "s1", canonical, ["alpha", "beta"]) == []

    def test_link_to_canonical_after_store_deleted(self, layout: InstallLayout, store: Path, project: Path) -> None:
        """Target comparison is lexical; a dangling link at the right path is fine."""
        canonical = store / "gone"
        relative_link(project / ".alpha" / "skills" / "gone", canonical)
        assert _check(layout, "gone", canonical, ["alpha"]) == []


class TestBrokenLinks:
    def test_link_to_other_location(self, layout: InstallLayout, store: Path, project: Path, tmp_path: Path) -> None:
        """A link to a different copy is reported with the link path."""
        canonical = write_skill(store, "x")
        other = write_skill(tmp_path / "other", "x")
        link = project / ".alpha" / "skills" / "x"
        relative_link(link, other)
        assert _check(layout, "x", canonical, ["alpha"]) == [
            BrokenSymlink(agent="alpha", link=str(link), reason=LinkIssue.TARGET_MISMATCH)
        ]

    def test_dangling_link_elsewhere(self, layout: InstallLayout, store: Path, project: Path) -> None:
        canonical = write_skill(store, "x")
        relative_link(project / ".beta" / "skills" / "x", project / "missing" / "x")
        findings = _check(layout, "x", canonical, ["alpha", "beta"])
        assert [f.agent for f in findings] == ["beta"]

    def test_findings_follow_agent_order(self, layout: InstallLayout, store: Path, project: Path, tmp_path: Path) -> None:
        canonical = write_skill(store, "x")
        other = write_skill(tmp_path / "other", "x")
        relative_link(project / ".alpha" / "skills" / "x", other)
        relative_link(project / ".beta" / "skills" / "x", other)
        findings = _check(layout, "x", canonical, ["beta", "alpha"])
        assert [f.agent for f in findings] == ["beta", "alpha"]

    def test_regular_file_is_unexpected(self, layout: InstallLayout, store: Path, project: Path) -> None:
        """A file where a link or directory belongs is its own finding."""
        canonical = write_skill(store, "x")
        entry = project / ".alpha" / "skills" / "x"
        entry.parent.mkdir(parents=True)
        entry.write_text("not a skill")
        assert _check(layout, "x", canonical, ["alpha"]) == [
            BrokenSymlink(agent="alpha", link=str(entry), reason=LinkIssue.UNEXPECTED_ENTRY_TYPE)
        ]


class TestSharedCanonicalDir:
    def test_agent_using_store_is_skipped(self, layout: InstallLayout, store: Path, tmp_path: Path) -> None:
        """An agent whose directory is the store contributes nothing, whatever is there."""
        other = write_skill(tmp_path / "other", "x")
        relative_link(store / "x", other)
        assert _check(layout, "x", store / "x", ["shared"]) == []

    def test_global_scope_uses_global_dirs(self, layout: InstallLayout, home: Path, tmp_path: Path) -> None:
        canonical = write_skill(home / ".agents" / "skills", "g")
        other = write_skill(tmp_path / "other", "g")
        link = home / ".config" / "beta" / "skills" / "g"
        relative_link(link, other)
        findings = check_symlink_integrity("g", canonical, ["beta"], Scope.GLOBAL, layout)
        assert findings == [BrokenSymlink(agent="beta", link=str(link))]
