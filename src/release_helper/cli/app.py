"""Command line interface for release-helper."""

from __future__ import annotations

import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler

from release_helper import __version__
from release_helper.cli.commands.metadata import run_metadata
from release_helper.cli.commands.release import run_release

app = typer.Typer(
    name="release-helper",
    help="Compute the next semantic version and release notes from conventional commits.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


class Source(str, Enum):
    """Where commit history comes from."""

    github = "github"
    git = "git"


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-helper {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Compute the next semantic version and release notes from conventional commits."""
    setup_logging(verbose)


@app.command("metadata")
def metadata(
    path: str | None = typer.Option(None, "--path", "-p", help="Project directory (default: cwd)"),
    source: Source | None = typer.Option(None, "--source", "-s", help="Commit source"),
    default_version: str | None = typer.Option(
        None, "--default-version", help="Version to start from when there is no release"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a summary"),
    github_output: bool = typer.Option(
        True,
        "--github-output/--no-github-output",
        help="Append step outputs to $GITHUB_OUTPUT when it is set",
    ),
) -> None:
    """Show the next version, the release decision and the release notes."""
    run_metadata(
        path=path,
        source=source.value if source else None,
        default_version=default_version,
        json_output=json_output,
        github_output=github_output,
        console=console,
        err_console=err_console,
    )


@app.command("release")
def release(
    path: str | None = typer.Option(None, "--path", "-p", help="Project directory (default: cwd)"),
    source: Source | None = typer.Option(None, "--source", "-s", help="Commit source"),
    default_version: str | None = typer.Option(
        None, "--default-version", help="Version to start from when there is no release"
    ),
    draft: bool | None = typer.Option(None, "--draft/--no-draft", help="Create a draft release"),
    prerelease: bool | None = typer.Option(
        None, "--prerelease/--no-prerelease", help="Mark the release as a pre-release"
    ),
    dry_run: bool | None = typer.Option(
        None, "--dry-run/--execute", help="Preview without creating the release"
    ),
) -> None:
    """Create a GitHub release for the next version."""
    run_release(
        path=path,
        source=source.value if source else None,
        default_version=default_version,
        draft=draft,
        prerelease=prerelease,
        dry_run=dry_run,
        console=console,
        err_console=err_console,
    )


if __name__ == "__main__":
    app()
