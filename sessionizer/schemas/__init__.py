"""Models passed between the sessionizer services."""

from sessionizer.schemas.launch import ConnectMode, LaunchPlan, ProjectCandidate

__all__ = [
    'ConnectMode',
    'LaunchPlan',
    'ProjectCandidate',
]
