"""Shell command execution for prsummary"""

import logging
import subprocess
import sys
from typing import List, Union

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Execute external commands without a shell"""

    DANGEROUS_CHARS = ('&', ';', '|', '<', '>', '$', '`', '\\')

    @staticmethod
    def run(command: Union[str, List[str]], **kwargs) -> subprocess.CompletedProcess:
        """Execute command safely using subprocess.run"""
        # Default options for safety
        defaults = {
            'capture_output': True,
            'text': True,
            'check': False,
            'shell': False  # Never use shell
        }
        defaults.update(kwargs)

        if isinstance(command, str):
            command = command.split()

        ShellExecutor._validate_command(command[0])

        return subprocess.run(command, **defaults)

    @staticmethod
    def git_exec(args: List[str], **kwargs) -> subprocess.CompletedProcess:
        """Execute git commands, raising CalledProcessError on failure"""
        return ShellExecutor.run(['git'] + args, check=True, **kwargs)

    @staticmethod
    def _validate_command(command: str) -> None:
        """Validate command name to prevent path traversal and injection"""
        if not command or '..' in command or '/' in command:
            raise ValueError(f"Invalid command: {command!r}")

        if any(char in command for char in ShellExecutor.DANGEROUS_CHARS):
            raise ValueError(f"Command contains dangerous characters: {command}")


def run_command(name: str, *args: str) -> str:
    """Run a command and return its trimmed stdout.

    Any failure (non-zero exit, missing executable, rejected command name)
    is fatal: the error is logged and the process exits with status 1.
    """
    command = [name, *args]
    try:
        result = ShellExecutor.run(command, check=True)
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or '').strip()
        logger.error("Error executing command: %s: exit status %s", ' '.join(command), e.returncode)
        if stderr:
            logger.error("%s", stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error("Error executing command: %s: %s", ' '.join(command), e)
        sys.exit(1)

    return result.stdout.strip()
