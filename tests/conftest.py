"""
Shared test doubles for the tmux and fzf collaborators.

RecordingMultiplexer records every control call so tests can assert on
exactly which tmux commands would have run.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest


class RecordingMultiplexer:
    """MultiplexerClient fake with canned query answers."""

    def __init__(self, sessions: Sequence[str] = (), attached: str = '') -> None:
        self.sessions = list(sessions)
        self.attached = attached
        self.calls: list[tuple[str, ...]] = []

    def list_sessions(self) -> list[str]:
        return list(self.sessions)

    def attached_session_name(self) -> str:
        return self.attached

    def create_session(self, name: str, path: Path) -> None:
        self.calls.append(('new-session', name, str(path)))

    def switch_to(self, name: str) -> None:
        self.calls.append(('switch', name))

    def attach_to(self, name: str) -> None:
        self.calls.append(('attach', name))


class ScriptedSelector:
    """Selector fake that returns a fixed answer and remembers what it was shown."""

    def __init__(self, answer: str | Exception = '') -> None:
        self.answer = answer
        self.shown: list[str] = []
        self.options: list[str] = []

    def select(self, lines: Sequence[str], options: Sequence[str]) -> str:
        self.shown = list(lines)
        self.options = list(options)
        if isinstance(self.answer, Exception):
            raise self.answer
        return self.answer


@pytest.fixture
def multiplexer() -> RecordingMultiplexer:
    return RecordingMultiplexer()


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """A 'work' directory with three projects and one stray file."""
    work = tmp_path / 'work'
    for name in ('siteA', 'client.v2', 'api'):
        (work / name).mkdir(parents=True)
    (work / 'notes.txt').write_text('not a project')
    return work
