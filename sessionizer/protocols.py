"""
Shared protocols for sessionizer services.

The external collaborators (tmux, fzf) and the console logger sit behind
these so the services can be driven by fakes in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Protocol for logger - enables services to work with any logging implementation.

    Implementations:
    - CLILogger (cli/logger.py): Logs to stderr with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class NullLogger:
    """
    No-op logger implementation for when logging is optional.

    Use this when a function requires a LoggerProtocol but the caller
    doesn't need logging output.
    """

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class MultiplexerClient(Protocol):
    """Narrow view of the terminal multiplexer used by the launcher."""

    def list_sessions(self) -> list[str]: ...
    def attached_session_name(self) -> str: ...
    def create_session(self, name: str, path: Path) -> None: ...
    def switch_to(self, name: str) -> None: ...
    def attach_to(self, name: str) -> None: ...


class Selector(Protocol):
    """Interactive picker returning the single line the user chose."""

    def select(self, lines: Sequence[str], options: Sequence[str]) -> str: ...
