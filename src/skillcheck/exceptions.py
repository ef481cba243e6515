"""skillcheck exception hierarchy.

All public exceptions inherit from SkillCheckError, giving callers a single
base class to catch when they want to handle any skillcheck-specific failure
without swallowing unrelated errors.

Per-skill problems (missing, modified, untracked, invalid, broken links) are
never raised. They are reported as values in a ``VerifySummary``.
"""


class SkillCheckError(Exception):
    """Base exception for all skillcheck errors."""


class LockfileError(SkillCheckError):
    """Raised when a lock file cannot be read at all.

    Covers unparseable JSON, payloads that are not a JSON object, and
    lock files written by a newer, unsupported schema version. This is
    the only failure that aborts a whole verification run.
    """


class HashComputationError(SkillCheckError):
    """Raised when a skill folder's content fingerprint cannot be computed.

    Covers unreadable files and directories inside the skill folder. The
    reconciler turns this into an ``invalid`` status for that skill only.
    """


class ParseError(SkillCheckError):
    """Raised when a SKILL.md descriptor is structurally invalid.

    Used internally by the frontmatter parser; the public
    ``parse_skill_md`` function maps it to ``None``.
    """


class UnknownAgentError(SkillCheckError):
    """Raised when an agent filter names an agent the registry does not know.

    Attributes:
        unknown: The agent identifiers that were not recognised.
        valid: All identifiers the registry does know, in registry order.
    """

    def __init__(self, unknown: list[str], valid: list[str]) -> None:
        self.unknown = unknown
        self.valid = valid
        super().__init__(f"Invalid agents: {', '.join(unknown)}")
