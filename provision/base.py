"""Base orchestrator class for hostprep components."""

import sys
from typing import List

DRY_RUN_PREFIX = "[DRY RUN]"


class BaseOrchestrator:
    """
    Base class for hostprep components that talk to the operator.

    Provides common functionality for dry-run mode, console output, and
    change tracking. The command runner and the provisioner both inherit
    from this class so every line the tool prints goes through one place.
    """

    def __init__(self, dry_run: bool = False, verbose: bool = False):
        """
        Initialize the orchestrator.

        Args:
            dry_run: If True, only show what would be done without making changes
            verbose: If True, enable verbose output
        """
        self.dry_run = dry_run
        self.verbose = verbose
        self.changes: List[str] = []

    def log(self, msg: str) -> None:
        """
        Log a message with optional dry-run prefix.

        Args:
            msg: Message to log
        """
        prefix = f"{DRY_RUN_PREFIX} " if self.dry_run and msg else ""
        print(f"{prefix}{msg}", flush=True)

    def log_verbose(self, msg: str) -> None:
        """
        Log a message only if verbose mode is enabled.

        Args:
            msg: Message to log
        """
        if self.verbose:
            self.log(msg)

    def error(self, msg: str) -> None:
        """Print an error line to stderr."""
        print(f"ERROR: {msg}", file=sys.stderr, flush=True)

    def record_change(self, description: str) -> None:
        """
        Record a change that was made.

        Args:
            description: Description of the change
        """
        self.changes.append(description)

