"""Shell command execution with a single dry-run chokepoint.

Every externally visible effect of a provisioning run (package installs,
downloads, file moves, service reloads) is a shell command line handed to
:class:`CommandRunner`. In dry-run mode the runner only reports the line;
in real mode it echoes the line and executes it through an executor.
"""

import subprocess
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from .base import DRY_RUN_PREFIX, BaseOrchestrator

ECHO_PREFIX = "+"


class CommandFailed(RuntimeError):
    """A required command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"command exited with status {returncode}: {command}")
        self.command = command
        self.returncode = returncode


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command line handed to the runner."""

    command: str
    executed: bool
    returncode: Optional[int] = None
    best_effort: bool = False

    @property
    def ok(self) -> bool:
        return not self.executed or self.returncode == 0


class Executor(Protocol):
    """Something that can run a shell command line and report its status."""

    def execute(self, command: str) -> int:
        ...


class ShellExecutor:
    """
    Run command lines through bash.

    stdout/stderr are inherited so the operator sees the output of package
    managers and installers as it happens.
    """

    def __init__(self, shell: str = "/bin/bash"):
        self.shell = shell

    def execute(self, command: str) -> int:
        result = subprocess.run([self.shell, "-c", command], check=False)
        return result.returncode


class RecordingExecutor:
    """
    Executor that records command lines instead of running them.

    Args:
        failures: Mapping of substring -> exit status. The first entry whose
            substring occurs in a command decides that command's status;
            commands matching nothing succeed.
    """

    def __init__(self, failures: Optional[Dict[str, int]] = None):
        self.failures = dict(failures or {})
        self.commands: List[str] = []

    def execute(self, command: str) -> int:
        self.commands.append(command)
        for needle, status in self.failures.items():
            if needle in command:
                return status
        return 0


class CommandRunner(BaseOrchestrator):
    """
    Executes (or, in dry-run mode, only prints) shell command lines.

    The runner never interprets shell syntax; the string is passed through
    as given. Whether a failure aborts the run is decided by the caller via
    ``best_effort``.
    """

    def __init__(
        self,
        dry_run: bool = False,
        verbose: bool = False,
        executor: Optional[Executor] = None,
        settle_seconds: float = 0.0,
    ):
        super().__init__(dry_run=dry_run, verbose=verbose)
        self.executor = executor or ShellExecutor()
        self.settle_seconds = settle_seconds
        self.history: List[CommandResult] = []

    def run(self, command: str, best_effort: bool = False) -> CommandResult:
        """
        Run a single command line.

        Args:
            command: Shell command line, executed verbatim
            best_effort: If True, a non-zero exit status is reported and ignored

        Returns:
            CommandResult describing what happened

        Raises:
            CommandFailed: If a required command exits with a non-zero status
        """
        if self.dry_run:
            print(f"{DRY_RUN_PREFIX} {command}", flush=True)
            result = CommandResult(command, executed=False, best_effort=best_effort)
            self.history.append(result)
            return result

        print(f"{ECHO_PREFIX} {command}", flush=True)
        returncode = self.executor.execute(command)
        result = CommandResult(command, executed=True, returncode=returncode, best_effort=best_effort)
        self.history.append(result)

        if returncode != 0:
            if not best_effort:
                raise CommandFailed(command, returncode)
            print(f"  (ignoring failure, exit {returncode})", flush=True)
        return result

    def pause(self) -> None:
        """Wait between consecutive network fetches (real mode only)."""
        if self.dry_run or self.settle_seconds <= 0:
            return
        time.sleep(self.settle_seconds)

    @property
    def commands(self) -> List[str]:
        """Command lines handed to the runner so far, in order."""
        return [r.command for r in self.history]
