"""
Shared exceptions for sessionizer.

Services raise these; only the CLI turns them into exit codes.

Exception Hierarchy:
    SessionizerError (base)
    ├── ProjectScanError (parent directory cannot be listed)
    ├── ExternalCommandError (tmux/fzf could not run or exited abnormally)
    │   ├── MultiplexerError
    │   └── SelectorError
    └── SelectionError (user-facing, exit status 1)
        ├── SelectionCancelledError (selector aborted, nothing chosen)
        └── SelectionNotFoundError (choice maps to no candidate)
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class SessionizerError(Exception):
    """Base exception for all sessionizer errors."""


class ProjectScanError(SessionizerError):
    """Raised when a parent directory cannot be opened for listing."""

    def __init__(self, directory: Path, reason: OSError) -> None:
        self.directory = directory
        self.reason = reason
        super().__init__(f'Cannot list directory {directory}: {reason.strerror or reason}')


class ExternalCommandError(SessionizerError):
    """Raised when an external command cannot be spawned or fails."""

    def __init__(self, command: Sequence[str], detail: str, returncode: int | None = None) -> None:
        self.command = list(command)
        self.detail = detail
        self.returncode = returncode
        status = f' (exit status {returncode})' if returncode is not None else ''
        super().__init__(f"'{' '.join(self.command)}' failed{status}: {detail}")


class MultiplexerError(ExternalCommandError):
    """Raised when a tmux invocation fails."""


class SelectorError(ExternalCommandError):
    """Raised when the fzf invocation fails."""


class SelectionError(SessionizerError):
    """Base exception for expected, user-facing selection failures."""


class SelectionCancelledError(SelectionError):
    """Raised when the selector returns without a choice."""

    def __init__(self) -> None:
        super().__init__('no option selected')


class SelectionNotFoundError(SelectionError):
    """Raised when the selected line matches no candidate label."""

    def __init__(self, selection: str) -> None:
        self.selection = selection
        super().__init__(f'no index found for selected option: {selection!r}')
