"""
fzf selector - hands the labels to fzf and reads back the chosen line.

fzf draws its interface on the controlling terminal, so only its stdout
is captured.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from sessionizer.exceptions import SelectionCancelledError, SelectorError

__all__ = ['FzfSelector']

# fzf exit statuses: 1 = no match, 130 = interrupted with Esc/Ctrl-C
CANCELLED_EXIT_CODES = frozenset({1, 130})


class FzfSelector:
    """Selector backed by the fzf binary."""

    def __init__(self, binary: str = 'fzf') -> None:
        self.binary = binary

    def select(self, lines: Sequence[str], options: Sequence[str]) -> str:
        """
        Let the user pick one line.

        Args:
            lines: Entries to offer, one per line
            options: Flags passed through to fzf (e.g. ['--ansi'])

        Returns:
            The chosen line, without its trailing newline

        Raises:
            SelectionCancelledError: If the user aborted or chose nothing
            SelectorError: If fzf cannot be started or fails
        """
        command = [self.binary, *options]
        try:
            result = subprocess.run(
                command,
                input='\n'.join(lines),
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise SelectorError(command, f'could not start {self.binary}: {e}') from e

        if result.returncode in CANCELLED_EXIT_CODES:
            raise SelectionCancelledError()
        if result.returncode != 0:
            raise SelectorError(command, 'fzf reported an error', result.returncode)

        selection = result.stdout.rstrip('\r\n')
        if not selection:
            raise SelectionCancelledError()
        return selection
