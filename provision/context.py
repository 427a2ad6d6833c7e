"""Shared state handed to every provisioning step."""

import shutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional

from .distro import PackageManager
from .paths import UserPaths
from .runner import CommandResult, CommandRunner
from .settings import Settings


class Policy(Enum):
    REQUIRED = "required"
    BEST_EFFORT = "best-effort"


# step name -> actions whose failure is ignored; every other action is required
BEST_EFFORT_ACTIONS: Dict[str, FrozenSet[str]] = {
    "update_system": frozenset({"autoremove"}),
    "install_dev_tools": frozenset({"groupinstall"}),
    "flatpak_packages": frozenset({"refresh_appstream"}),
    "install_fonts": frozenset({"fc_cache"}),
    "set_ohmyzsh": frozenset({"clone_plugin", "install_starship", "backup_zshrc"}),
    "sysctl_set": frozenset({"backup", "reload"}),
    "configure_git": frozenset({"download_gitconfig"}),
}


def policy_for(step: str, action: str) -> Policy:
    """Failure policy for one action of one step."""
    if action in BEST_EFFORT_ACTIONS.get(step, frozenset()):
        return Policy.BEST_EFFORT
    return Policy.REQUIRED


@dataclass
class ProvisionContext:
    """
    Inputs of a provisioning step.

    The package manager and execution mode are fixed before the first step
    runs; steps only read them.
    """

    pm: PackageManager
    runner: CommandRunner
    settings: Settings = field(default_factory=Settings)
    paths: UserPaths = field(default_factory=UserPaths)
    which: Callable[[str], Optional[str]] = shutil.which

    def log(self, msg: str) -> None:
        self.runner.log(msg)

    def run(self, step: str, action: str, command: str) -> CommandResult:
        """
        Run one action of a step.

        Args:
            step: Name of the calling step (its key in BEST_EFFORT_ACTIONS)
            action: Action name within the step
            command: Shell command line
        """
        best_effort = policy_for(step, action) is Policy.BEST_EFFORT
        return self.runner.run(command, best_effort=best_effort)

    def has_command(self, name: str) -> bool:
        """Equivalent of `command -v name` on the host."""
        return self.which(name) is not None

    def pause(self) -> None:
        self.runner.pause()
