"""Shared utilities for prsummary"""

import os
import subprocess
import traceback
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..infra.shell.executor import ShellExecutor

err_console = Console(stderr=True)


class CliUtils:
    """CLI utility functions"""

    @staticmethod
    def get_git_root() -> Optional[str]:
        """Get git repository root, return None if not in repo"""
        try:
            result = ShellExecutor.git_exec(['rev-parse', '--show-toplevel'])
            return result.stdout.strip()
        except (subprocess.CalledProcessError, OSError):
            return None

    @staticmethod
    def handle_error(context: str, error: Exception) -> None:
        """Report CLI errors on stderr with nice formatting"""
        err_console.print(f"[red]Error during {context}:[/red] {escape(str(error))}", markup=True, highlight=False)

        if is_debug():
            err_console.print(traceback.format_exc(), markup=False, highlight=False)


def is_debug() -> bool:
    """Whether PRSUMMARY_DEBUG is set to a truthy value"""
    return os.getenv('PRSUMMARY_DEBUG', '').lower() not in ('', '0', 'false', 'no')
