"""Symlink integrity checking between agent directories and the canonical store.

For one skill, every checked agent's expected installation point
``<agent skills dir>/<skill name>`` is inspected without following links:

==========================  ==============================================
Entry at installation point  Outcome
==========================  ==============================================
agent dir is canonical dir   agent skipped (the canonical copy is its copy)
absent                       nothing reported (agent does not use the skill)
symlink -> canonical path    consistent
symlink -> anywhere else     ``TARGET_MISMATCH``
directory                    consistent (copy-mode install)
anything else                ``UNEXPECTED_ENTRY_TYPE``
==========================  ==============================================

Link targets are resolved relative to the link's own directory and
normalised lexically; they are not followed through further symlinks. A
link pointing at the canonical path is consistent even if the canonical
directory itself has since disappeared (that is reported as ``missing``).
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from skillcheck.core.verify.models import BrokenSymlink, LinkIssue
from skillcheck.discovery.layout import InstallLayout
from skillcheck.scope import Scope

logger = logging.getLogger(__name__)


def resolve_link_target(link: Path) -> Path:
    """Return the absolute, lexically normalised target of ``link``.

    Raises:
        OSError: If ``link`` is not a symlink or cannot be read.
    """
    target = os.readlink(link)
    return Path(os.path.normpath(os.path.join(os.path.dirname(link), target)))


def check_symlink_integrity(
    skill_name: str,
    canonical_path: Path,
    agents_to_check: list[str],
    scope: Scope,
    layout: InstallLayout,
) -> list[BrokenSymlink]:
    """Report agent installation points that do not reach ``canonical_path``.

    Args:
        skill_name: Name of the skill (its directory name).
        canonical_path: Absolute path of the skill's canonical copy.
        agents_to_check: Agent identifiers to inspect, in order.
        scope: Project or global installation.
        layout: Path resolution for this run.

    Returns:
        Findings in ``agents_to_check`` order. Empty if every installed
        agent entry is consistent.
    """
    broken: list[BrokenSymlink] = []
    expected = Path(os.path.normpath(canonical_path))

    for agent in agents_to_check:
        if layout.shares_canonical_dir(agent, scope):
            continue

        link = layout.agent_base_dir(agent, scope) / skill_name
        try:
            mode = link.lstat().st_mode
        except FileNotFoundError:
            continue
        except OSError:
            logger.warning("Cannot inspect %s for %s", link, agent, exc_info=True)
            continue

        if stat.S_ISLNK(mode):
            try:
                target = resolve_link_target(link)
            except OSError:
                logger.warning("Cannot read symlink %s", link, exc_info=True)
                continue
            if target != expected:
                logger.debug("%s -> %s, expected %s", link, target, expected)
                broken.append(BrokenSymlink(agent=agent, link=str(link)))
        elif stat.S_ISDIR(mode):
            continue
        else:
            broken.append(BrokenSymlink(
                agent=agent,
                link=str(link),
                reason=LinkIssue.UNEXPECTED_ENTRY_TYPE,
            ))

    return broken
