"""
Session launcher - from picked label to an open tmux session.

The pipeline runs strictly in sequence:

1. scan directories into candidates
2. query tmux for live sessions and the attached one
3. color the labels and hand them to the selector
4. map the chosen line back to its candidate
5. create the session if needed, then switch or attach

Steps 4 and 5 are split into pure functions (resolve_selection,
plan_launch) so the decision table can be tested without tmux.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from pathlib import Path

from sessionizer.exceptions import SelectionNotFoundError
from sessionizer.protocols import LoggerProtocol, MultiplexerClient, NullLogger, Selector
from sessionizer.schemas import LaunchPlan, ProjectCandidate
from sessionizer.services.formatter import format_options, strip_color
from sessionizer.services.scanner import ProjectScanner

__all__ = [
    'SessionLauncherService',
    'execute_plan',
    'plan_launch',
    'resolve_selection',
]


def resolve_selection(selection: str, candidates: Sequence[ProjectCandidate]) -> ProjectCandidate:
    """
    Find the candidate whose uncolored label equals the selection.

    Any color the selector echoed back is stripped first, so colored and
    plain lines resolve the same way. The first match wins.

    Raises:
        SelectionNotFoundError: If no label matches
    """
    plain = strip_color(selection)
    for candidate in candidates:
        if candidate.label == plain:
            return candidate
    raise SelectionNotFoundError(selection)


def plan_launch(candidate: ProjectCandidate, live_sessions: Collection[str], inside_session: bool) -> LaunchPlan:
    """
    Decide which tmux calls open `candidate`.

    | live | inside tmux | calls                |
    |------|-------------|----------------------|
    | no   | no          | new-session, attach  |
    | no   | yes         | new-session, switch  |
    | yes  | no          | attach               |
    | yes  | yes         | switch               |
    """
    name = candidate.session_name
    return LaunchPlan(
        session_name=name,
        project_path=candidate.path,
        create=name not in live_sessions,
        connect='switch' if inside_session else 'attach',
    )


def execute_plan(plan: LaunchPlan, client: MultiplexerClient) -> None:
    """Run the plan's tmux calls in order."""
    if plan.create:
        client.create_session(plan.session_name, plan.project_path)

    if plan.connect == 'switch':
        client.switch_to(plan.session_name)
    else:
        client.attach_to(plan.session_name)


class SessionLauncherService:
    """
    Runs the whole pick-and-open flow against injected collaborators.

    Errors propagate as SessionizerError subclasses; deciding exit codes is
    left to the caller.
    """

    def __init__(
        self,
        scanner: ProjectScanner,
        client: MultiplexerClient,
        selector: Selector,
        *,
        selector_options: Sequence[str] = ('--ansi',),
        live_color: int = 34,
        attached_color: int = 32,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.scanner = scanner
        self.client = client
        self.selector = selector
        self.selector_options = list(selector_options)
        self.live_color = live_color
        self.attached_color = attached_color
        self.logger = logger or NullLogger()

    def launch(
        self,
        directories: Sequence[Path],
        projects: Sequence[Path],
        inside_session: bool,
    ) -> LaunchPlan:
        """
        Let the user pick a project and open its session.

        Args:
            directories: Parent directories to scan
            projects: Direct project paths
            inside_session: Whether the caller already runs inside tmux

        Returns:
            The plan that was executed

        Raises:
            ProjectScanError: If a parent directory cannot be listed
            MultiplexerError: If a tmux call fails
            SelectorError: If fzf fails
            SelectionError: If nothing was chosen or the choice is unknown
        """
        self.logger.info(f'Directories: {[str(d) for d in directories]}')
        candidates = self.scanner.scan(directories, projects)
        self.logger.info(f'Found {len(candidates)} project(s)')
        if not candidates:
            self.logger.warning('No projects found')

        live_sessions = self.client.list_sessions()
        # display-message names the most recent session even from a plain shell
        attached = self.client.attached_session_name() if inside_session else ''
        self.logger.info(f'Live sessions: {live_sessions}, attached: {attached or "-"}')

        options = format_options(
            candidates,
            set(live_sessions),
            attached,
            live_color=self.live_color,
            attached_color=self.attached_color,
        )
        selection = self.selector.select(options, self.selector_options)

        candidate = resolve_selection(selection, candidates)
        plan = plan_launch(candidate, set(live_sessions), inside_session)
        self.logger.info(
            f'{"Creating and opening" if plan.create else "Opening"} {plan.session_name} '
            f'at {plan.project_path} via {plan.connect}'
        )

        execute_plan(plan, self.client)
        return plan
