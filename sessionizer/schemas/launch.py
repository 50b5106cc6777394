"""
Launch operation schemas.

A ProjectCandidate lives for one invocation: scanned, labelled, offered in
the picker, and discarded at exit. A LaunchPlan is what the launcher
decided to do with the chosen one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from sessionizer.base_model import StrictModel
from sessionizer.paths import session_name

ConnectMode = Literal['attach', 'switch']


class ProjectCandidate(StrictModel):
    """A directory offered as a project, with its uncolored picker label."""

    path: Path
    label: str

    @property
    def session_name(self) -> str:
        """tmux-safe name of the session for this project."""
        return session_name(self.label)


class LaunchPlan(StrictModel):
    """
    Multiplexer calls needed to open a project.

    When `create` is set, a detached session is made first; the terminal is
    then connected to it with `connect` ('switch' from inside tmux,
    'attach' from a plain shell).
    """

    session_name: str
    project_path: Path
    create: bool
    connect: ConnectMode
