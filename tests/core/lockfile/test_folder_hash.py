"""Tests for the skill folder content fingerprint."""

from __future__ import annotations

import hashlib
import os
import sys
from pathlib import Path

import pytest

from skillcheck.core.lockfile import compute_skill_folder_hash
from skillcheck.exceptions import HashComputationError


def _expected(files: list[tuple[str, bytes]]) -> str:
    digest = hashlib.sha256()
    for rel, content in sorted(files):
        digest.update(rel.encode("utf-8"))
        digest.update(content)
    return digest.hexdigest()


class TestComputeSkillFolderHash:
    def test_matches_manual_digest(self, tmp_path: Path) -> None:
        """Paths and bytes are hashed in sorted relative-path order."""
        (tmp_path / "SKILL.md").write_bytes(b"skill")
        (tmp_path / "scripts").mkdir()
        (tmp_path / "scripts" / "run.sh").write_bytes(b"echo hi\n")
        assert compute_skill_folder_hash(tmp_path) == _expected([
            ("SKILL.md", b"skill"),
            ("scripts/run.sh", b"echo hi\n"),
        ])

    def test_empty_folder(self, tmp_path: Path) -> None:
        assert compute_skill_folder_hash(tmp_path) == hashlib.sha256().hexdigest()

    def test_content_change_changes_hash(self, tmp_path: Path) -> None:
        target = tmp_path / "SKILL.md"
        target.write_text("one")
        before = compute_skill_folder_hash(tmp_path)
        target.write_text("two")
        assert compute_skill_folder_hash(tmp_path) != before

    def test_rename_changes_hash(self, tmp_path: Path) -> None:
        """The relative path is part of the fingerprint."""
        (tmp_path / "a.md").write_text("same")
        before = compute_skill_folder_hash(tmp_path)
        (tmp_path / "a.md").rename(tmp_path / "b.md")
        assert compute_skill_folder_hash(tmp_path) != before

    def test_skips_git_and_node_modules(self, tmp_path: Path) -> None:
        (tmp_path / "SKILL.md").write_text("x")
        before = compute_skill_folder_hash(tmp_path)
        for skipped in (".git", "node_modules"):
            (tmp_path / skipped).mkdir()
            (tmp_path / skipped / "junk").write_text("ignored")
        assert compute_skill_folder_hash(tmp_path) == before

    def test_skips_symlinks(self, tmp_path: Path) -> None:
        (tmp_path / "SKILL.md").write_text("x")
        before = compute_skill_folder_hash(tmp_path)
        (tmp_path / "alias.md").symlink_to(tmp_path / "SKILL.md")
        assert compute_skill_folder_hash(tmp_path) == before

    @pytest.mark.skipif(sys.platform != "linux", reason="needs byte-valued file names")
    def test_undecodable_file_name(self, tmp_path: Path) -> None:
        """Names that are not valid UTF-8 are hashed as their raw bytes."""
        (tmp_path / os.fsdecode(b"bad\xff.txt")).write_bytes(b"payload")
        expected = hashlib.sha256(b"bad\xff.txt" + b"payload").hexdigest()
        assert compute_skill_folder_hash(tmp_path) == expected

    def test_missing_folder_raises(self, tmp_path: Path) -> None:
        with pytest.raises(HashComputationError):
            compute_skill_folder_hash(tmp_path / "absent")
