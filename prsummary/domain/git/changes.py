"""Collect branch changes from git"""

import logging
from typing import Callable, Optional

from ...infra.shell.executor import run_command
from ..types import BranchChanges

logger = logging.getLogger(__name__)

Runner = Callable[..., str]


class GitChangeCollector:
    """Collects commits and diffs between the current branch and its base.

    Every query goes through the command runner, so a failing git command
    ends the process instead of producing a partial result.
    """

    COMMIT_FORMAT = '--pretty=format:%h - %s'

    def __init__(self, runner: Runner = run_command):
        self.runner = runner

    def _git(self, *args: str) -> str:
        return self.runner('git', *args)

    def current_branch(self) -> str:
        return self._git('rev-parse', '--abbrev-ref', 'HEAD')

    def default_base_branch(self) -> str:
        """Default branch of origin, e.g. 'main' for origin/main"""
        ref = self._git('rev-parse', '--abbrev-ref', 'origin/HEAD')
        if ref.startswith('origin/'):
            ref = ref[len('origin/'):]
        return ref

    def commits(self, base: str, head: str) -> str:
        return self._git('log', f'{base}..{head}', self.COMMIT_FORMAT)

    def diff(self, base: str, head: str) -> str:
        return self._git('diff', f'{base}..{head}')

    def diff_stat(self, base: str, head: str) -> str:
        return self._git('diff', '--stat', f'{base}..{head}')

    def collect(self, base_branch: Optional[str] = None) -> BranchChanges:
        """Gather everything needed for a report"""
        current = self.current_branch()
        base = base_branch or self.default_base_branch()
        logger.info("Comparing %s against %s", current, base)

        changes = BranchChanges(
            current_branch=current,
            base_branch=base,
            commits=self.commits(base, current),
            diff=self.diff(base, current),
            diff_stat=self.diff_stat(base, current),
        )
        logger.info("Found %d commits", changes.commit_count)
        return changes
