"""hostprep - bootstrap a fresh Linux workstation."""

from .catalog import STEPS, Step
from .context import ProvisionContext
from .distro import PackageManager, UnsupportedDistribution, detect_pm
from .orchestrator import Provisioner, StepResult
from .runner import CommandFailed, CommandResult, CommandRunner, RecordingExecutor, ShellExecutor
from .settings import Settings, load_settings

__all__ = [
    "STEPS",
    "Step",
    "ProvisionContext",
    "PackageManager",
    "UnsupportedDistribution",
    "detect_pm",
    "Provisioner",
    "StepResult",
    "CommandFailed",
    "CommandResult",
    "CommandRunner",
    "RecordingExecutor",
    "ShellExecutor",
    "Settings",
    "load_settings",
]
