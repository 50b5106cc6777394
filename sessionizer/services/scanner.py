"""
Project scanner - turns configured directories into project candidates.

Parent directories are listed one level deep; every child that is a
directory becomes a candidate. Direct project paths are taken as given.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from sessionizer.exceptions import ProjectScanError
from sessionizer.paths import DisplayStyle, display_name
from sessionizer.protocols import LoggerProtocol, NullLogger
from sessionizer.schemas import ProjectCandidate

__all__ = ['ProjectScanner']


class ProjectScanner:
    """
    Collects project candidates from parent directories and direct paths.

    Output order is the direct projects in argument order, followed by the
    children of each parent directory in the order the filesystem lists
    them. Nothing is sorted or deduplicated.
    """

    def __init__(self, style: DisplayStyle = 'parent', logger: LoggerProtocol | None = None) -> None:
        self.style = style
        self.logger = logger or NullLogger()

    def scan(self, directories: Sequence[Path], projects: Sequence[Path] = ()) -> list[ProjectCandidate]:
        """
        Build the candidate list.

        Args:
            directories: Parent directories whose immediate subdirectories are projects
            projects: Project paths added verbatim, without existence checks

        Returns:
            Candidates with their picker labels

        Raises:
            ProjectScanError: If a parent directory cannot be listed
        """
        paths = [Path(project) for project in projects]
        for directory in directories:
            paths.extend(self.list_subdirectories(Path(directory)))

        return [ProjectCandidate(path=path, label=display_name(path, self.style)) for path in paths]

    def list_subdirectories(self, directory: Path) -> list[Path]:
        """
        List immediate child directories, skipping entries that cannot be inspected.

        Symlinks to directories count as directories.
        """
        self.logger.info(f'Scanning {directory}')
        try:
            with os.scandir(directory) as entries:
                children = []
                for entry in entries:
                    try:
                        if entry.is_dir():
                            children.append(directory / entry.name)
                    except OSError as e:
                        self.logger.info(f'Skipping {entry.path}: {e}')
        except OSError as e:
            raise ProjectScanError(directory, e) from e

        return children
