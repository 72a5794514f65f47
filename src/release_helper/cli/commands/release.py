"""Implementation of the 'release' command.

Resolves the next version and publishes a GitHub release for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel

from release_helper.actions import write_outputs
from release_helper.cli.commands.common import (
    collect_release_metadata,
    github_client,
    load_project_config,
    print_plain,
)
from release_helper.exceptions import ReleaseHelperError

if TYPE_CHECKING:
    from rich.console import Console


def run_release(
    path: str | None,
    source: str | None,
    default_version: str | None,
    draft: bool | None,
    prerelease: bool | None,
    dry_run: bool | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the release command.

    Args:
        path: Optional path to project directory
        source: Commit source override ("github" or "git")
        default_version: Baseline used when there is no previous release
        draft: Create the release as a draft (None uses config)
        prerelease: Mark the release as a pre-release (None uses config)
        dry_run: Only report what would be released (None uses config)
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        project_path, config = load_project_config(path, source, default_version)
        metadata = collect_release_metadata(project_path, config)
    except ReleaseHelperError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    write_outputs(metadata.as_outputs())

    if not metadata.should_release:
        console.print(
            f"[yellow]No releasable changes since {metadata.current_version}. Nothing to do.[/]"
        )
        return

    is_draft = config.release.draft if draft is None else draft
    is_prerelease = config.release.prerelease if prerelease is None else prerelease
    is_dry_run = config.release.dry_run if dry_run is None else dry_run
    tag = config.tag_for(metadata.next_version)

    if is_dry_run:
        console.print(
            Panel(
                f"[bold]Would create release [cyan]{tag}[/][/]\n\n"
                f"  • Previous version: [cyan]{metadata.current_version}[/]\n"
                f"  • Bump: {metadata.bump}\n"
                f"  • Draft: {is_draft}\n"
                f"  • Pre-release: {is_prerelease}",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        print_plain(console, metadata.release_notes)
        return

    try:
        with github_client(config) as client:
            release = client.create_release(
                tag=tag,
                name=tag,
                body=metadata.release_notes,
                draft=is_draft,
                prerelease=is_prerelease,
            )
    except ReleaseHelperError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    url = release.get("html_url", "")
    console.print(
        Panel(
            f"[green]Released {tag}![/]\n\n{url}",
            title="[green]Release Created[/]",
            border_style="green",
        )
    )
