"""Service layer for project session operations."""

from sessionizer.services.formatter import colorize, format_options, strip_color
from sessionizer.services.launcher import SessionLauncherService, execute_plan, plan_launch, resolve_selection
from sessionizer.services.scanner import ProjectScanner
from sessionizer.services.selector import FzfSelector
from sessionizer.services.tmux import TmuxClient, is_inside_session

__all__ = [
    'FzfSelector',
    'ProjectScanner',
    'SessionLauncherService',
    'TmuxClient',
    'colorize',
    'execute_plan',
    'format_options',
    'is_inside_session',
    'plan_launch',
    'resolve_selection',
    'strip_color',
]
