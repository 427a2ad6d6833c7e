"""Flatpak remote registration and application installs."""

from .context import ProvisionContext


def add_flathub(ctx: ProvisionContext) -> bool:
    """
    Register the Flathub remote if flatpak is available.

    Returns:
        True if the remote-add command was issued
    """
    if not ctx.has_command("flatpak"):
        ctx.log("flatpak not installed; skipping add_flathub")
        return False

    s = ctx.settings
    ctx.run(
        "add_flathub",
        "add_remote",
        f"sudo flatpak remote-add --if-not-exists {s.flatpak_remote} {s.flatpak_remote_url}",
    )
    return True


def flatpak_packages(ctx: ProvisionContext) -> bool:
    """
    Refresh appstream data and install the configured applications.

    All applications go in a single `flatpak install` call.

    Returns:
        True if the install command was issued
    """
    if not ctx.has_command("flatpak"):
        ctx.log("flatpak not available; skipping flatpak_packages")
        return False

    ctx.log("Installing Flatpak packages...")
    ctx.run("flatpak_packages", "refresh_appstream", "flatpak update --appstream -y")
    ctx.pause()

    apps = " ".join(ctx.settings.flatpak_apps)
    ctx.run("flatpak_packages", "install", f"flatpak install -y {ctx.settings.flatpak_remote} {apps}")
    return True
