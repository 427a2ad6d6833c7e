"""Centralized path constants for hostprep.

This module provides all path constants used throughout hostprep,
ensuring consistency and making paths easy to update.
"""

import os
import pwd
from pathlib import Path
from typing import Optional

# Project paths (relative to this file's location)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
CONFIGS_DIR = PROJECT_ROOT / "configs"
CONFIG_FILE = CONFIGS_DIR / "hostprep.toml"
CONFIG_ENV_VAR = "HOSTPREP_CONFIG"

# System paths
SYSCTL_CONF = Path("/etc/sysctl.conf")

BACKUP_SUFFIX = ".backup"


def get_user_home() -> Path:
    """
    Get real user's home directory (handles sudo).

    When running under sudo, returns the original user's home directory,
    not root's home.
    """
    sudo_user = os.environ.get("SUDO_USER")
    if sudo_user:
        try:
            return Path(pwd.getpwnam(sudo_user).pw_dir)
        except KeyError:
            pass
    return Path.home()


def get_config_path() -> Path:
    """Config file to load: $HOSTPREP_CONFIG if set, else configs/hostprep.toml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else CONFIG_FILE


def backup_path(path: Path) -> Path:
    """Path an existing file is moved/copied to before it is replaced."""
    return path.with_name(path.name + BACKUP_SUFFIX)


class UserPaths:
    """
    Per-user locations written by the provisioning steps.

    Args:
        home: Home directory to provision (defaults to get_user_home())
    """

    def __init__(self, home: Optional[Path] = None):
        self.home = Path(home) if home else get_user_home()

    @property
    def fonts_dir(self) -> Path:
        return self.home / ".local" / "share" / "fonts"

    @property
    def ohmyzsh_dir(self) -> Path:
        return self.home / ".oh-my-zsh"

    @property
    def zsh_plugins_dir(self) -> Path:
        return self.ohmyzsh_dir / "custom" / "plugins"

    @property
    def zsh_completions_dir(self) -> Path:
        return self.ohmyzsh_dir / "completions"

    @property
    def zshrc(self) -> Path:
        return self.home / ".zshrc"

    @property
    def workspace_dir(self) -> Path:
        return self.home / "Documents"

    @property
    def gitconfig(self) -> Path:
        return self.home / ".gitconfig"
