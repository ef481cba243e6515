"""Registry of known coding agents and where they keep installed skills.

Each ``AgentProfile`` describes where a specific agent looks for skills in
project scope (relative to the working directory) and in global scope
(relative to the home directory), plus the dot-directories whose presence
means the agent is installed.

The catalog is an explicit ``AgentRegistry`` instance rather than a
module-level lookup table, so the install layout and the verification
engine receive the agent set they operate on as a parameter. Tests build
registries with fabricated agents; ``default_registry()`` supplies the
built-in catalog.

Agents that read skills straight from the canonical store use
``.agents/skills`` as their project directory. The symlink checker skips
them, since the canonical copy *is* their copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from skillcheck.exceptions import UnknownAgentError


@dataclass(frozen=True)
class AgentProfile:
    """Describes where an agent keeps its installed skills.

    Attributes:
        name: Machine identifier used on the CLI (e.g., "claude-code").
        display_name: Human-readable name (e.g., "Claude Code").
        skills_dir: Project-scope skills directory, relative to the
            working directory.
        global_skills_dir: Global-scope skills directory, relative to the
            home directory.
        detect_paths: Paths relative to the home directory; the agent is
            considered installed if any of them exists.
    """

    name: str
    display_name: str
    skills_dir: str
    global_skills_dir: str
    detect_paths: tuple[str, ...] = field(default_factory=tuple)


class AgentRegistry:
    """Ordered mapping from agent identifier to ``AgentProfile``.

    Registration order is preserved and used for detection, listing and
    symlink checking, so output is stable across runs.
    """

    def __init__(self, profiles: list[AgentProfile] | None = None) -> None:
        self._profiles: dict[str, AgentProfile] = {}
        for profile in profiles or []:
            self.register(profile)

    def register(self, profile: AgentProfile) -> None:
        """Add a profile, replacing any existing one with the same name."""
        self._profiles[profile.name] = profile

    def get(self, name: str) -> AgentProfile:
        """Return the profile for ``name``.

        Raises:
            UnknownAgentError: If no agent with that name is registered.
        """
        try:
            return self._profiles[name]
        except KeyError:
            raise UnknownAgentError([name], self.names) from None

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self):
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    @property
    def names(self) -> list[str]:
        """Return agent identifiers in registration order."""
        return list(self._profiles)

    def validate_names(self, names: list[str]) -> list[str]:
        """Check an agent filter against the registry.

        Args:
            names: Agent identifiers supplied by the caller.

        Returns:
            The same names, de-duplicated, in the order given.

        Raises:
            UnknownAgentError: If any name is not registered.
        """
        unknown = [n for n in names if n not in self._profiles]
        if unknown:
            raise UnknownAgentError(unknown, self.names)
        return list(dict.fromkeys(names))

    def display_name(self, name: str) -> str:
        """Return the display name for ``name``, or ``name`` itself if unknown."""
        profile = self._profiles.get(name)
        return profile.display_name if profile is not None else name


def _build_profiles() -> list[AgentProfile]:
    """Build the built-in list of agent profiles."""
    return [
        # -- Agents with their own skills directory --
        AgentProfile(
            name="claude-code",
            display_name="Claude Code",
            skills_dir=".claude/skills",
            global_skills_dir=".claude/skills",
            detect_paths=(".claude",),
        ),
        AgentProfile(
            name="cursor",
            display_name="Cursor",
            skills_dir=".cursor/skills",
            global_skills_dir=".cursor/skills",
            detect_paths=(".cursor",),
        ),
        AgentProfile(
            name="windsurf",
            display_name="Windsurf",
            skills_dir=".windsurf/skills",
            global_skills_dir=".codeium/windsurf/skills",
            detect_paths=(".codeium/windsurf",),
        ),
        AgentProfile(
            name="cline",
            display_name="Cline",
            skills_dir=".cline/skills",
            global_skills_dir=".cline/skills",
            detect_paths=(".cline",),
        ),
        AgentProfile(
            name="roo",
            display_name="Roo Code",
            skills_dir=".roo/skills",
            global_skills_dir=".roo/skills",
            detect_paths=(".roo",),
        ),
        AgentProfile(
            name="goose",
            display_name="Goose",
            skills_dir=".goose/skills",
            global_skills_dir=".config/goose/skills",
            detect_paths=(".config/goose",),
        ),
        # -- Agents reading the canonical store in project scope --
        AgentProfile(
            name="codex",
            display_name="Codex",
            skills_dir=".agents/skills",
            global_skills_dir=".codex/skills",
            detect_paths=(".codex",),
        ),
        AgentProfile(
            name="amp",
            display_name="Amp",
            skills_dir=".agents/skills",
            global_skills_dir=".config/agents/skills",
            detect_paths=(".config/amp",),
        ),
        AgentProfile(
            name="gemini-cli",
            display_name="Gemini CLI",
            skills_dir=".agents/skills",
            global_skills_dir=".gemini/skills",
            detect_paths=(".gemini",),
        ),
        AgentProfile(
            name="github-copilot",
            display_name="GitHub Copilot",
            skills_dir=".agents/skills",
            global_skills_dir=".copilot/skills",
            detect_paths=(".copilot",),
        ),
        AgentProfile(
            name="opencode",
            display_name="OpenCode",
            skills_dir=".agents/skills",
            global_skills_dir=".config/opencode/skills",
            detect_paths=(".config/opencode",),
        ),
    ]


def default_registry() -> AgentRegistry:
    """Create a registry pre-populated with the built-in agent profiles.

    Returns a fresh instance on every call; callers may register extra
    agents without affecting anyone else.
    """
    return AgentRegistry(_build_profiles())
