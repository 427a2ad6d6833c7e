"""Runs the step catalog in order, stopping at the first required failure."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .base import BaseOrchestrator
from .catalog import STEPS, Step
from .context import ProvisionContext
from .packages import UnsupportedPackageManager
from .runner import CommandFailed

SUCCESS_MESSAGE = "The environment was successfully configured."


@dataclass
class StepResult:
    name: str
    ok: bool
    error: Optional[str] = None


class Provisioner(BaseOrchestrator):
    """
    Drives one provisioning run.

    Each step runs exactly once, in catalog order. A required command
    failing (CommandFailed) or an unsupported toolchain backend ends the
    run; nothing after the failing step executes and nothing already
    applied is rolled back.
    """

    def __init__(self, ctx: ProvisionContext, steps: Optional[Sequence[Step]] = None):
        super().__init__(dry_run=ctx.runner.dry_run, verbose=ctx.runner.verbose)
        self.ctx = ctx
        self.steps = list(STEPS if steps is None else steps)
        self.results: List[StepResult] = []

    @property
    def completed(self) -> List[str]:
        """Names of the steps that finished, in order."""
        return [r.name for r in self.results if r.ok]

    def run_step(self, step: Step) -> StepResult:
        """Run a single step and capture its outcome."""
        self.log(f"=== {step.name} ===")
        self.log_verbose(step.description)
        try:
            step.func(self.ctx)
        except (CommandFailed, UnsupportedPackageManager) as e:
            return StepResult(step.name, ok=False, error=str(e))
        return StepResult(step.name, ok=True)

    def run(self) -> int:
        """
        Run every step.

        Returns:
            Process exit code: 0 if all steps completed, 1 otherwise
        """
        self.log_verbose(f"Package Manager: {self.ctx.pm.binary}")
        self.log_verbose(f"Home: {self.ctx.paths.home}")

        for step in self.steps:
            result = self.run_step(step)
            self.results.append(result)
            if not result.ok:
                self.error(f"step '{result.name}' failed: {result.error}")
                return 1
            self.record_change(step.name)

        self._summarize_run()
        self.log(SUCCESS_MESSAGE)
        return 0

    def _summarize_run(self) -> None:
        runner = self.ctx.runner
        self.log("")
        self.log("=" * 60)
        if self.dry_run:
            self.log("Dry-run complete - no changes were made")
            self.log(f"Commands that would run: {len(runner.history)}")
        else:
            ignored = [r for r in runner.history if not r.ok]
            self.log(f"Steps completed: {len(self.changes)}")
            for name in self.changes:
                self.log(f"  - {name}")
            if ignored:
                self.log(f"Ignored failures: {len(ignored)}")
                for r in ignored:
                    self.log(f"  - {r.command} (exit {r.returncode})")
        self.log("=" * 60)
