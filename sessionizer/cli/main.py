#!/usr/bin/env python3
"""
Command-line interface for sessionizer.

Scans project directories, lets the user pick one with fzf and opens it
in a tmux session named after the project.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Literal

import typer

from sessionizer.cli.logger import CLILogger
from sessionizer.config.cli import settings
from sessionizer.exceptions import SelectionError, SessionizerError
from sessionizer.services.launcher import SessionLauncherService
from sessionizer.services.scanner import ProjectScanner
from sessionizer.services.selector import FzfSelector
from sessionizer.services.tmux import TmuxClient, is_inside_session

app = typer.Typer(
    name='sessionizer',
    help='Pick a project and open it in a tmux session',
    add_completion=False,
)

# Exit status for scan and subprocess failures; selection failures use 1
FATAL_EXIT_CODE = 2


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f'{settings.APP_NAME} {settings.VERSION}')
        raise typer.Exit()


@app.command()
def launch(
    directories: list[Path] | None = typer.Option(
        None, '--directory', '-d', help='Parent directory whose subdirectories are projects (repeatable)'
    ),
    projects: list[Path] | None = typer.Option(
        None, '--project', '-p', help='Project directory to offer as-is (repeatable)'
    ),
    style: Literal['parent', 'name'] | None = typer.Option(
        None, '--style', help="Label style: 'parent' (parent/name) or 'name'"
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
    version: bool = typer.Option(
        False, '--version', callback=_version_callback, is_eager=True, help='Show version and exit'
    ),
) -> None:
    """Pick a project with fzf and switch to (or attach) its tmux session.

    A session is created in the project directory when none exists yet.

    Examples:
        sessionizer -d ~/work -d ~/oss
        sessionizer -d ~/work -p ~/dotfiles
    """
    logger = CLILogger(verbose=verbose)

    directories = directories or []
    projects = projects or []
    if not directories and not projects:
        directories = [path.expanduser() for path in settings.DEFAULT_DIRECTORIES]
    if not directories and not projects:
        raise typer.BadParameter(
            'Provide at least one -d/--directory or -p/--project (or set SESSIONIZER_DEFAULT_DIRECTORIES)'
        )

    service = SessionLauncherService(
        scanner=ProjectScanner(style=style or settings.DISPLAY_STYLE, logger=logger),
        client=TmuxClient(settings.TMUX_BINARY, logger=logger),
        selector=FzfSelector(settings.FZF_BINARY),
        selector_options=settings.FZF_OPTIONS,
        live_color=settings.LIVE_COLOR,
        attached_color=settings.ATTACHED_COLOR,
        logger=logger,
    )

    try:
        service.launch(directories, projects, inside_session=is_inside_session(os.environ))
    except SelectionError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except SessionizerError as e:
        logger.error(str(e))
        if verbose:
            traceback.print_exc()
        raise typer.Exit(FATAL_EXIT_CODE)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
