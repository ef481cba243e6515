"""Shared fixtures for skillcheck tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.agents import AgentRegistry
from skillcheck.discovery import InstallLayout
from skillcheck.scope import Scope
from tests.helpers import make_registry


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """An empty home directory."""
    root = tmp_path / "home"
    root.mkdir()
    return root


@pytest.fixture
def registry() -> AgentRegistry:
    """A fabricated agent registry (alpha, beta, shared)."""
    return make_registry()


@pytest.fixture
def layout(registry: AgentRegistry, project: Path, home: Path) -> InstallLayout:
    """Install layout bound to the temporary project and home."""
    return InstallLayout(registry, cwd=project, home=home)


@pytest.fixture
def store(layout: InstallLayout) -> Path:
    """The project-scope canonical store, created."""
    path = layout.canonical_skills_dir(Scope.PROJECT)
    path.mkdir(parents=True)
    return path
