"""
Path and name helpers for project candidates.

tmux treats some characters in a session name as target separators
(`.` splits window from pane, `:` splits session from window) and
rewrites them itself, so names are sanitized before any tmux call:

- `.` -> `_`
- `:` -> `_`
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

__all__ = ['DisplayStyle', 'display_name', 'session_name']

DisplayStyle = Literal['parent', 'name']

SEPARATOR_CHARS = ('.', ':')
SEPARATOR_REPLACEMENT = '_'


def display_name(path: Path | str, style: DisplayStyle = 'parent') -> str:
    """
    Build the picker label for a project path.

    The label is taken from the normalised absolute form of the path, so a
    project gets the same label whether its parent was given as `.`, `..`
    or an absolute path.
    Nothing is read from disk and symlinks are not resolved.

    Args:
        path: Project directory
        style: 'parent' for '<parent>/<name>', 'name' for the final component only

    Returns:
        Label shown in the selector

    Examples:
        >>> display_name('/home/me/work/siteA')
        'work/siteA'

        >>> display_name('/home/me/work/siteA', style='name')
        'siteA'
    """
    path = Path(os.path.abspath(path))

    if style == 'name' or not path.parent.name:
        return path.name
    return f'{path.parent.name}/{path.name}'


def session_name(label: str) -> str:
    """
    Sanitize a label into a tmux session name.

    Examples:
        >>> session_name('work/client.v2')
        'work/client_v2'
    """
    result = label
    for char in SEPARATOR_CHARS:
        result = result.replace(char, SEPARATOR_REPLACEMENT)
    return result
