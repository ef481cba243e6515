"""Rich output formatting helpers for the skillcheck CLI.

Provides the standard (issues only), verbose (one block per skill) and
agent-table renderers. JSON output is produced directly by the commands.

Status Color Mapping:
    modified = yellow, missing = red, untracked = cyan, invalid = red,
    ok = green
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from skillcheck.agents import AgentRegistry
from skillcheck.core.verify import VerifyCounts, VerifyStatus, VerifySummary

_STATUS_STYLES: dict[VerifyStatus, str] = {
    VerifyStatus.OK: "green",
    VerifyStatus.MODIFIED: "yellow",
    VerifyStatus.MISSING: "red",
    VerifyStatus.UNTRACKED: "cyan",
    VerifyStatus.INVALID: "red",
}

_STATUS_LABELS: dict[VerifyStatus, str] = {
    VerifyStatus.MODIFIED: "modified - hash mismatch",
    VerifyStatus.MISSING: "missing - in lock file but not on disk",
    VerifyStatus.UNTRACKED: "untracked - not in lock file",
}

console = Console()


def status_style(status: VerifyStatus) -> str:
    """Return the Rich style string for a verification status."""
    return _STATUS_STYLES.get(status, "white")


def shorten_path(path: str, cwd: Path, home: Path) -> str:
    """Abbreviate ``path`` relative to the project (``.``) or home (``~``)."""
    for base, prefix in ((str(cwd), "."), (str(home), "~")):
        if path == base:
            return prefix
        if path.startswith(base.rstrip(os.sep) + os.sep):
            return prefix + path[len(base.rstrip(os.sep)):]
    return path


def _print(text: str | Text) -> None:
    console.print(text, soft_wrap=True, highlight=False)


def _summary_parts(counts: VerifyCounts, ok_label: str) -> list[str]:
    parts: list[str] = []
    if counts.ok:
        parts.append(f"[green]{counts.ok} {ok_label}[/green]")
    if counts.modified:
        parts.append(f"[yellow]{counts.modified} modified[/yellow]")
    if counts.missing:
        parts.append(f"[red]{counts.missing} missing[/red]")
    if counts.untracked:
        parts.append(f"[cyan]{counts.untracked} untracked[/cyan]")
    if counts.invalid:
        parts.append(f"[red]{counts.invalid} invalid[/red]")
    if counts.broken_symlinks:
        parts.append(f"[red]{counts.broken_symlinks} broken symlinks[/red]")
    return parts


def print_verify_standard(summary: VerifySummary, cwd: Path, home: Path) -> None:
    """Print only the skills with problems, then a one-line summary.

    Args:
        summary: Verification summary to render.
        cwd: Project root, for path shortening.
        home: Home directory, for path shortening.
    """
    scope = summary.scope.value
    _print(f"Verifying {scope} skills...\n")
    if not summary.results:
        _print(f"[dim]No {scope} skills found.[/dim]")
        return

    for result in summary.results:
        if not result.has_issues:
            continue
        style = status_style(result.status)
        if result.status is VerifyStatus.OK:
            _print(f"  {escape(result.name)}")
        else:
            label = _STATUS_LABELS.get(
                result.status, f"{result.status.value} - {result.error}"
            )
            _print(f"  [{style}]{escape(result.name)}[/{style}] [dim]({escape(label)})[/dim]")
        for broken in result.broken_symlinks:
            link = escape(shorten_path(broken.link, cwd, home))
            _print(f"    [red]broken symlink:[/red] {link}")

    counts = summary.counts
    _print("")
    parts = _summary_parts(counts, "verified")
    if parts:
        _print("Summary: " + ", ".join(parts))
    if not counts.has_failures and not counts.untracked:
        _print(f"[green]All {len(summary.results)} skills verified successfully.[/green]")


def print_verify_verbose(
    summary: VerifySummary,
    cwd: Path,
    home: Path,
    registry: AgentRegistry,
) -> None:
    """Print a detailed block for every skill, then a summary line.

    Args:
        summary: Verification summary to render.
        cwd: Project root, for path shortening.
        home: Home directory, for path shortening.
        registry: Agent catalog, for display names.
    """
    scope = summary.scope.value
    _print(f"Verifying {scope} skills...\n")
    if not summary.results:
        _print(f"[dim]No {scope} skills found.[/dim]")
        return

    for result in summary.results:
        icon = "[red]✗[/red]" if result.has_issues else "[green]✓[/green]"
        path = shorten_path(result.path, cwd, home) if result.path else "N/A"
        _print(f"{icon} [bold]{escape(result.name)}[/bold]")
        _print(f"    Path: [dim]{escape(path)}[/dim]")

        if result.status is not VerifyStatus.OK:
            _print(f"    Status: [yellow]{result.status.value}[/yellow]")

        if result.expected_hash:
            matches = result.expected_hash == result.actual_hash
            verdict = "[green]matches[/green]" if matches else "[yellow]mismatch[/yellow]"
            _print(f"    Hash: {verdict}")
            if not matches and result.actual_hash:
                _print(f"      Expected: [dim]{result.expected_hash[:16]}[/dim]...")
                _print(f"      Actual:   [dim]{result.actual_hash[:16]}[/dim]...")

        if result.agents:
            names = ", ".join(registry.display_name(a) for a in result.agents)
            _print(f"    Agents: {escape(names)}")

        for broken in result.broken_symlinks:
            link = escape(shorten_path(broken.link, cwd, home))
            agent = escape(registry.display_name(broken.agent))
            _print(f"    [red]Broken symlink:[/red] {link} ({agent})")

        if result.error and result.status is not VerifyStatus.OK:
            _print(f"    Error: [dim]{escape(result.error)}[/dim]")
        _print("")

    _print("Summary: " + ", ".join(_summary_parts(summary.counts, "ok")))


def print_agents_table(registry: AgentRegistry, detected: list[str]) -> None:
    """Print the agent catalog with per-scope directories and detection state."""
    table = Table(title="Known Agents", show_header=True, header_style="bold")
    table.add_column("Agent", style="bold")
    table.add_column("Name")
    table.add_column("Project Dir", style="dim")
    table.add_column("Global Dir", style="dim")
    table.add_column("Detected", justify="center")

    for profile in registry:
        found = (
            Text("yes", style="green") if profile.name in detected
            else Text("no", style="dim")
        )
        table.add_row(
            profile.name,
            profile.display_name,
            profile.skills_dir,
            f"~/{profile.global_skills_dir}",
            found,
        )
    console.print(table)
