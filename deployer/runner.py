"""
Process runners for external tools.

Workflows never call subprocess directly. They hand a command and a working
directory to a ProcessRunner, which lets tests swap in a fake and lets the
CLI swap in a dry-run runner.
"""

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from deployer.exceptions import ToolNotFoundError, WorkingDirectoryNotFoundError
from deployer.util.redact import redact_command

logger = logging.getLogger(__name__)


class ProcessRunner(ABC):
    """Abstract base class for running external commands."""

    dry_run = False

    @abstractmethod
    def run(self, command: list[str], cwd: Path) -> int:
        """
        Run a command to completion.

        Args:
            command: Executable followed by its arguments
            cwd: Working directory for the process

        Returns:
            Process exit code
        """
        pass


class SubprocessRunner(ProcessRunner):
    """Runs commands for real, streaming their output to the console."""

    def run(self, command: list[str], cwd: Path) -> int:
        logger.debug("Running %s (cwd=%s)", shlex.join(redact_command(command)), cwd)
        try:
            # stdout/stderr are inherited so output reaches the operator as it happens
            result = subprocess.run(command, cwd=cwd, check=False)
        except FileNotFoundError as e:
            # Raised for a missing executable as well as a missing cwd
            if not Path(cwd).is_dir():
                raise WorkingDirectoryNotFoundError(str(cwd), command) from e
            raise ToolNotFoundError(command[0], command) from e

        logger.debug("%s exited with %d", command[0], result.returncode)
        return result.returncode


class DryRunRunner(ProcessRunner):
    """Prints commands instead of running them and reports success."""

    dry_run = True

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.commands: list[list[str]] = []

    def run(self, command: list[str], cwd: Path) -> int:
        self.commands.append(command)
        line = shlex.join(redact_command(command))
        self.console.print(
            f"[dim]\\[dry-run] ({escape(str(cwd))})[/dim] {escape(line)}",
            highlight=False,
            soft_wrap=True,
        )
        return 0


def get_runner(dry_run: bool = False, console: Console | None = None) -> ProcessRunner:
    """
    Factory function to get the process runner for this invocation.

    Args:
        dry_run: Print commands instead of executing them
        console: Console used by the dry-run runner

    Returns:
        ProcessRunner instance
    """
    if dry_run:
        return DryRunRunner(console)
    return SubprocessRunner()
