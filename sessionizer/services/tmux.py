"""
tmux client - session queries and session control through the tmux CLI.

Every call blocks until tmux exits. Query commands capture stdout; control
commands inherit the terminal so `attach` can take it over.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from sessionizer.exceptions import MultiplexerError
from sessionizer.protocols import LoggerProtocol, NullLogger

__all__ = ['TMUX_ENV_MARKER', 'TmuxClient', 'is_inside_session']

# Set by tmux for every process running inside one of its panes
TMUX_ENV_MARKER = 'TMUX'


def is_inside_session(environ: Mapping[str, str]) -> bool:
    """Whether the process owning `environ` runs inside a tmux session."""
    return TMUX_ENV_MARKER in environ


class TmuxClient:
    """
    MultiplexerClient backed by the tmux binary.

    Queries answer "nothing" when tmux exits non-zero, which is how it
    reports that no server is running or no client is attached. A tmux
    that cannot be started, or dies from a signal, raises MultiplexerError.
    Control commands raise on any non-zero exit.
    """

    def __init__(self, binary: str = 'tmux', logger: LoggerProtocol | None = None) -> None:
        self.binary = binary
        self.logger = logger or NullLogger()

    def list_sessions(self) -> list[str]:
        """
        Names of all live sessions, in tmux order.

        Blank lines (including the one after the final newline) are dropped.
        """
        output = self._query(['list-session', '-F', '#S'])
        return [line for line in output.split('\n') if line]

    def attached_session_name(self) -> str:
        """Name of the session the invoking terminal is attached to, or ''."""
        return self._query(['display-message', '-p', '#S']).rstrip('\r\n')

    def create_session(self, name: str, path: Path) -> None:
        """Create a detached session rooted at `path`."""
        self._control(['new-session', '-ds', name, '-c', str(path)])

    def switch_to(self, name: str) -> None:
        """Switch the current tmux client to session `name`."""
        self._control(['switch', '-t', name])

    def attach_to(self, name: str) -> None:
        """Attach the invoking terminal to session `name`."""
        self._control(['attach', '-t', name])

    def _query(self, args: Sequence[str]) -> str:
        result = self._run(args, capture=True)
        if result.returncode != 0:
            self.logger.info(f'tmux {args[0]} answered nothing: {result.stderr.strip()}')
            return ''
        return result.stdout

    def _control(self, args: Sequence[str]) -> None:
        result = self._run(args, capture=False)
        if result.returncode != 0:
            raise MultiplexerError(self._command(args), 'tmux reported an error', result.returncode)

    def _run(self, args: Sequence[str], *, capture: bool) -> subprocess.CompletedProcess[str]:
        command = self._command(args)
        self.logger.info(f'Running: {" ".join(command)}')
        try:
            result = subprocess.run(command, capture_output=capture, text=True)
        except OSError as e:
            raise MultiplexerError(command, f'could not start {self.binary}: {e}') from e

        if result.returncode < 0:
            raise MultiplexerError(command, f'killed by signal {-result.returncode}', result.returncode)
        return result

    def _command(self, args: Sequence[str]) -> list[str]:
        return [self.binary, *args]
