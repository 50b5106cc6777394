"""
Option formatting - ANSI coloring of picker labels.

Labels of sessions that already exist are colored so the user can see
what is running. Coloring only wraps the label; strip_color() recovers it.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence

from sessionizer.paths import session_name
from sessionizer.schemas import ProjectCandidate

__all__ = ['colorize', 'format_options', 'strip_color']

RESET = '\x1b[0m'
ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*m')


def colorize(
    label: str,
    live_sessions: Collection[str],
    attached_session_name: str,
    *,
    live_color: int = 34,
    attached_color: int = 32,
) -> str:
    """
    Color a label by the state of its session.

    The attached session wins over merely live ones; everything else is
    returned unchanged. Labels are compared by their sanitized session name.
    """
    name = session_name(label)
    if attached_session_name and name == attached_session_name:
        return _wrap(label, attached_color)
    if name in live_sessions:
        return _wrap(label, live_color)
    return label


def strip_color(text: str) -> str:
    """Remove ANSI SGR sequences."""
    return ANSI_ESCAPE.sub('', text)


def format_options(
    candidates: Sequence[ProjectCandidate],
    live_sessions: Collection[str],
    attached_session_name: str,
    *,
    live_color: int = 34,
    attached_color: int = 32,
) -> list[str]:
    """Colored picker lines, one per candidate, in candidate order."""
    return [
        colorize(
            candidate.label,
            live_sessions,
            attached_session_name,
            live_color=live_color,
            attached_color=attached_color,
        )
        for candidate in candidates
    ]


def _wrap(label: str, color: int) -> str:
    return f'\x1b[{color}m{label}{RESET}'
