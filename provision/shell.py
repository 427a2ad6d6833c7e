"""Login shell and Oh My Zsh setup."""

from shlex import quote

from .context import ProvisionContext
from .paths import backup_path


def zsh_path(ctx: ProvisionContext) -> str:
    """
    Path to hand to chsh.

    Falls back to a shell-side lookup when zsh is not on PATH yet, e.g. in a
    dry run before install_apps has installed it.
    """
    return ctx.which("zsh") or "$(command -v zsh)"


def install_zsh(ctx: ProvisionContext) -> bool:
    """
    Make zsh the login shell and install Oh My Zsh if missing.

    Returns:
        True if the Oh My Zsh installer was run
    """
    ctx.run("install_zsh", "chsh", f"chsh -s {zsh_path(ctx)}")

    if ctx.paths.ohmyzsh_dir.is_dir():
        ctx.log("Oh-My-Zsh already installed.")
        return False

    ctx.log("Installing Oh-My-Zsh (non-interactive)...")
    # RUNZSH/CHSH stop the installer from switching shells or launching zsh
    ctx.run(
        "install_zsh",
        "install_ohmyzsh",
        f'RUNZSH=no CHSH=no sh -c "$(curl -fsSL {ctx.settings.ohmyzsh_installer_url})"',
    )
    return True


def set_ohmyzsh(ctx: ProvisionContext) -> None:
    """Clone plugins, install starship, and replace ~/.zshrc."""
    ctx.log("Configuring Oh-My-Zsh (plugins/themes)...")
    paths = ctx.paths
    ctx.run(
        "set_ohmyzsh",
        "mkdir",
        f"mkdir -p {quote(str(paths.zsh_plugins_dir))} {quote(str(paths.zsh_completions_dir))}",
    )

    for name, repo in ctx.settings.zsh_plugins.items():
        dest = paths.zsh_plugins_dir / name
        ctx.run("set_ohmyzsh", "clone_plugin", f"git clone --depth=1 {repo} {quote(str(dest))}")
        ctx.pause()

    ctx.run("set_ohmyzsh", "install_starship", f"curl -sS {ctx.settings.starship_installer_url} | sh -s -- -y")

    zshrc = paths.zshrc
    ctx.run("set_ohmyzsh", "backup_zshrc", f"mv {quote(str(zshrc))} {quote(str(backup_path(zshrc)))} 2>/dev/null")
    ctx.run("set_ohmyzsh", "download_zshrc", f"wget -c {ctx.settings.zshrc_url} -O {quote(str(zshrc))}")
