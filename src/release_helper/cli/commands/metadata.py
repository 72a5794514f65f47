"""Implementation of the 'metadata' command.

Computes the next version, the release decision and the release notes,
prints them and exposes them as GitHub Actions step outputs.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.panel import Panel

from release_helper.actions import write_outputs
from release_helper.cli.commands.common import (
    collect_release_metadata,
    load_project_config,
    print_plain,
)
from release_helper.exceptions import ReleaseHelperError

if TYPE_CHECKING:
    from rich.console import Console

    from release_helper.core.metadata import ReleaseMetadata


def render_summary(metadata: ReleaseMetadata, console: Console) -> None:
    """Print a human-readable summary of the release metadata."""
    if metadata.should_release:
        decision = f"[green]release {metadata.next_version}[/] ({metadata.bump} bump)"
        border = "green"
    else:
        decision = "[yellow]no release[/]"
        border = "yellow"

    console.print(
        Panel(
            f"Current version: [cyan]{metadata.current_version}[/]\n"
            f"Next version:    [cyan]{metadata.next_version}[/]\n"
            f"Commits:         {len(metadata.commits)}\n"
            f"Decision:        {decision}",
            title="[bold]Release Metadata[/]",
            border_style=border,
        )
    )
    console.print()
    print_plain(console, metadata.release_notes)


def run_metadata(
    path: str | None,
    source: str | None,
    default_version: str | None,
    json_output: bool,
    github_output: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the metadata command.

    Args:
        path: Optional path to project directory
        source: Commit source override ("github" or "git")
        default_version: Baseline used when there is no previous release
        json_output: Print machine-readable JSON instead of a summary
        github_output: Append step outputs to $GITHUB_OUTPUT when set
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        project_path, config = load_project_config(path, source, default_version)
        metadata = collect_release_metadata(project_path, config)
    except ReleaseHelperError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if github_output:
        write_outputs(metadata.as_outputs())

    if json_output:
        data = {
            "current_version": metadata.current_version,
            "next_version": metadata.next_version,
            "bump": str(metadata.bump),
            "should_release": metadata.should_release,
            "release_notes": metadata.release_notes,
        }
        print_plain(console, json.dumps(data, indent=2))
        return

    render_summary(metadata, console)
