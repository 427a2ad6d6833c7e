"""Cross-distro package management: system update, common apps, dev tools."""

from typing import List, Tuple

from .context import ProvisionContext
from .distro import PackageManager


class UnsupportedPackageManager(RuntimeError):
    """No command is known for this package manager."""


def _sudo(pm: PackageManager, *args: str) -> str:
    return " ".join(["sudo", pm.binary, *args])


def get_update_cmds(pm: PackageManager) -> List[Tuple[str, str]]:
    """
    Get the (action, command) sequence that updates the system.

    apt-get needs an explicit index refresh; the rpm-based managers
    refresh metadata as part of upgrade.
    """
    if pm == PackageManager.APT_GET:
        return [
            ("refresh", _sudo(pm, "update", "-qq")),
            ("upgrade", _sudo(pm, "upgrade", "-qq", "-y")),
            ("autoremove", _sudo(pm, "autoremove", "-qq", "-y")),
        ]
    return [
        ("upgrade", _sudo(pm, "upgrade", "-y")),
        ("autoremove", _sudo(pm, "autoremove", "-y")),
    ]


def get_install_cmd(pm: PackageManager, package: str) -> str:
    """Get the install command for a single package."""
    return _sudo(pm, "install", "-y", package)


# How each package manager gets a compiler toolchain
_DEV_TOOLS = {
    PackageManager.DNF: "groupinstall",
    PackageManager.YUM: "groupinstall",
    PackageManager.APT_GET: "build_essential",
}


def get_dev_tools_cmd(pm: PackageManager) -> Tuple[str, str]:
    """
    Get the (action, command) that installs a compiler toolchain.

    Raises:
        UnsupportedPackageManager: If no toolchain package is known for pm
    """
    action = _DEV_TOOLS.get(pm)
    if action == "groupinstall":
        # prefer groupinstall, fall back to the @development-tools group
        return action, (
            f"sudo {pm.binary} groupinstall -y 'Development Tools'"
            f" || sudo {pm.binary} install -y @development-tools"
        )
    if action == "build_essential":
        return action, get_install_cmd(pm, "build-essential")
    raise UnsupportedPackageManager(f"(Maybe) your distro is not supported: {pm.binary}")


def update_system(ctx: ProvisionContext) -> None:
    """Refresh the package index, upgrade, and remove orphans."""
    ctx.log(f"Updating system (using {ctx.pm.binary})...")
    for action, cmd in get_update_cmds(ctx.pm):
        ctx.run("update_system", action, cmd)


def install_apps(ctx: ProvisionContext) -> List[str]:
    """
    Install each common package whose command is not on PATH.

    One install per missing package; presence is checked by command name,
    the install uses the distro alias if one is configured.

    Returns:
        List of packages an install was issued for
    """
    ctx.log("Installing common software packages...")
    issued = []
    for app in ctx.settings.common_packages:
        if ctx.has_command(app):
            ctx.log(f"{app} is already installed.")
            continue
        package = ctx.settings.resolve_package(app, ctx.pm.binary)
        ctx.run("install_apps", "install", get_install_cmd(ctx.pm, package))
        issued.append(package)
    return issued


def install_dev_tools(ctx: ProvisionContext) -> None:
    """Install the distro's development tools group or meta-package."""
    ctx.log("Installing Development Tools...")
    action, cmd = get_dev_tools_cmd(ctx.pm)
    ctx.run("install_dev_tools", action, cmd)
