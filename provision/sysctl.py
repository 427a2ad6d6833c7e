"""Kernel parameter tuning via /etc/sysctl.conf."""

from .context import ProvisionContext
from .paths import SYSCTL_CONF, backup_path


def sysctl_set(ctx: ProvisionContext) -> None:
    """Back up sysctl.conf, replace it with the remote copy, and reload it."""
    ctx.log("Applying sysctl configuration...")
    ctx.run("sysctl_set", "backup", f"sudo cp {SYSCTL_CONF} {backup_path(SYSCTL_CONF)} 2>/dev/null")
    ctx.run("sysctl_set", "download", f"sudo curl -fsSL {ctx.settings.sysctl_url} -o {SYSCTL_CONF}")
    ctx.run("sysctl_set", "reload", "sudo sysctl -p")
