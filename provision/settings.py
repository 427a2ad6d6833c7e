"""Provisioning settings: the fixed package lists and remote locations.

The defaults below are what a plain run installs. A TOML file
(configs/hostprep.toml, or the path in $HOSTPREP_CONFIG) can override any
top-level field; see hostprep.example.toml.
"""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Union

from .paths import get_config_path

NERD_FONTS_RELEASE = "https://github.com/ryanoasis/nerd-fonts/releases/download/v3.4.0"
DOTFILES_BASE = "https://raw.githubusercontent.com/emanoelhenrick/MESS/main/files"


@dataclass
class Settings:
    """Everything a provisioning run installs, fetches, or creates."""

    common_packages: List[str] = field(default_factory=lambda: [
        "curl", "flatpak", "openssh-server", "zenity", "git", "vim", "neovim",
        "btop", "zsh", "shellcheck", "wget", "wine", "unzip",
    ])
    # Per package manager: common name -> distro package name
    aliases: Dict[str, Dict[str, str]] = field(default_factory=dict)

    sdkman_url: str = "https://get.sdkman.io"
    nvm_url: str = "https://raw.githubusercontent.com/nvm-sh/nvm/v0.39.4/install.sh"

    flatpak_remote: str = "flathub"
    flatpak_remote_url: str = "https://flathub.org/repo/flathub.flatpakrepo"
    flatpak_apps: List[str] = field(default_factory=lambda: [
        "com.protonvpn.www",
        "org.standardnotes.standardnotes",
        "io.github.peazip.PeaZip",
        "com.spotify.Client",
        "org.telegram.desktop",
        "org.torproject.torbrowser-launcher",
        "io.github.flattool.Warehouse",
        "com.github.tchx84.Flatseal",
    ])

    font_urls: List[str] = field(default_factory=lambda: [
        f"{NERD_FONTS_RELEASE}/JetBrainsMono.zip",
        f"{NERD_FONTS_RELEASE}/Noto.zip",
    ])

    ohmyzsh_installer_url: str = (
        "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
    )
    zsh_plugins: Dict[str, str] = field(default_factory=lambda: {
        "zsh-syntax-highlighting": "https://github.com/zsh-users/zsh-syntax-highlighting.git",
        "zsh-autosuggestions": "https://github.com/zsh-users/zsh-autosuggestions",
    })
    starship_installer_url: str = "https://starship.rs/install.sh"
    zshrc_url: str = f"{DOTFILES_BASE}/.zshrc"

    sysctl_url: str = f"{DOTFILES_BASE}/sysctl.conf"
    gitconfig_url: str = f"{DOTFILES_BASE}/.gitconfig"

    # Folder names created under ~/Documents
    workspace_folders: List[str] = field(default_factory=lambda: ["dev", "studies"])

    # Pause between consecutive network fetches
    settle_seconds: float = 1.0

    def resolve_package(self, package: str, pm_name: str) -> str:
        """Distro package name for a common package name."""
        return self.aliases.get(pm_name, {}).get(package, package)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings, applying TOML overrides when the config file exists.

    Args:
        path: Config file (defaults to get_config_path())

    Returns:
        Settings with overrides applied

    Raises:
        ValueError: If the file contains a key that is not a setting, or a
            value of the wrong type
    """
    config_path = Path(path) if path else get_config_path()
    if not config_path.exists():
        return Settings()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown setting(s) in {config_path}: {', '.join(unknown)}")

    defaults = Settings()
    overrides = {
        key: _check_value(key, value, getattr(defaults, key), config_path)
        for key, value in data.items()
    }
    return Settings(**overrides)


def _is_str_map(value: object) -> bool:
    return isinstance(value, dict) and all(isinstance(v, str) for v in value.values())


def _check_value(key: str, value: object, default: object, config_path: Path) -> object:
    """Check a TOML value against the type of the setting's default."""
    if isinstance(default, float):
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
        expected = "a number"
    elif isinstance(default, str):
        valid = isinstance(value, str)
        expected = "a string"
    elif isinstance(default, list):
        valid = isinstance(value, list) and all(isinstance(v, str) for v in value)
        expected = "a list of strings"
    elif key == "aliases":
        valid = isinstance(value, dict) and all(_is_str_map(v) for v in value.values())
        expected = "a table of tables of strings"
    else:
        valid = _is_str_map(value)
        expected = "a table of strings"

    if not valid:
        raise ValueError(
            f"Setting '{key}' in {config_path} must be {expected}, got {value!r}"
        )
    return float(value) if isinstance(default, float) else value
