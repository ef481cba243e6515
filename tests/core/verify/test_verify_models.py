"""Tests for the verification data models."""

from __future__ import annotations

import dataclasses

import pytest

from skillcheck.core.verify import (
    BrokenSymlink,
    LinkIssue,
    VerifyCounts,
    VerifyResult,
    VerifyStatus,
    VerifySummary,
)
from skillcheck.scope import Scope


def _result(name: str, status: VerifyStatus, broken: int = 0) -> VerifyResult:
    links = tuple(BrokenSymlink(agent=f"a{i}", link=f"/l/{name}{i}") for i in range(broken))
    return VerifyResult(name=name, path=f"/s/{name}", status=status, broken_symlinks=links)


class TestVerifyCounts:
    def test_derived_from_results(self) -> None:
        summary = VerifySummary(scope=Scope.PROJECT, results=(
            _result("a", VerifyStatus.OK, broken=2),
            _result("b", VerifyStatus.MODIFIED),
            _result("c", VerifyStatus.MISSING),
            _result("d", VerifyStatus.UNTRACKED, broken=1),
            _result("e", VerifyStatus.INVALID),
            _result("f", VerifyStatus.OK),
        ))
        assert summary.counts == VerifyCounts(
            ok=2, modified=1, missing=1, untracked=1, invalid=1, broken_symlinks=3,
        )

    def test_empty_summary(self) -> None:
        assert VerifySummary(scope=Scope.GLOBAL).counts == VerifyCounts()

    def test_untracked_is_not_a_failure(self) -> None:
        assert VerifyCounts(untracked=3).has_failures is False

    @pytest.mark.parametrize("field", ["modified", "missing", "invalid", "broken_symlinks"])
    def test_failure_fields(self, field: str) -> None:
        assert VerifyCounts(**{field: 1}).has_failures is True


class TestImmutability:
    def test_summary_is_frozen(self) -> None:
        summary = VerifySummary(scope=Scope.PROJECT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.results = ()  # type: ignore[misc]

    def test_counts_not_settable(self) -> None:
        summary = VerifySummary(scope=Scope.PROJECT)
        with pytest.raises(AttributeError):
            summary.counts = VerifyCounts(ok=5)  # type: ignore[misc]


class TestSerialization:
    def test_to_dict(self) -> None:
        result = VerifyResult(
            name="x",
            path="/s/x",
            status=VerifyStatus.MODIFIED,
            expected_hash="h1",
            actual_hash="h2",
            agents=("alpha",),
            broken_symlinks=(BrokenSymlink(
                agent="beta", link="/b/x", reason=LinkIssue.UNEXPECTED_ENTRY_TYPE,
            ),),
        )
        data = VerifySummary(scope=Scope.PROJECT, results=(result,)).to_dict()
        assert data["scope"] == "project"
        assert data["counts"]["modified"] == 1
        assert data["counts"]["brokenSymlinks"] == 1
        assert data["results"][0] == {
            "name": "x",
            "path": "/s/x",
            "status": "modified",
            "expectedHash": "h1",
            "actualHash": "h2",
            "agents": ["alpha"],
            "brokenSymlinks": [
                {"agent": "beta", "link": "/b/x", "reason": "unexpected_entry_type"}
            ],
        }

    def test_optional_fields_omitted(self) -> None:
        data = _result("a", VerifyStatus.OK).to_dict()
        assert "expectedHash" not in data
        assert "actualHash" not in data
        assert "error" not in data

    def test_has_issues(self) -> None:
        assert _result("a", VerifyStatus.OK).has_issues is False
        assert _result("a", VerifyStatus.OK, broken=1).has_issues is True
        assert _result("a", VerifyStatus.UNTRACKED).has_issues is True

    def test_get(self) -> None:
        summary = VerifySummary(scope=Scope.PROJECT, results=(_result("a", VerifyStatus.OK),))
        assert summary.get("a") is not None
        assert summary.get("b") is None
