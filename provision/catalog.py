"""The ordered provisioning step catalog."""

from dataclasses import dataclass
from typing import Callable, List

from .context import ProvisionContext
from .files import configure_git, create_dev_and_studies_folders
from .flatpak import add_flathub, flatpak_packages
from .fonts import download_fonts, install_fonts
from .packages import install_apps, install_dev_tools, update_system
from .shell import install_zsh, set_ohmyzsh
from .sysctl import sysctl_set
from .toolchains import setup_java_and_nvm


@dataclass(frozen=True)
class Step:
    """One named unit of the provisioning sequence."""

    name: str
    func: Callable[[ProvisionContext], object]
    description: str = ""


STEPS: List[Step] = [
    Step("update_system", update_system, "Refresh, upgrade, and clean packages"),
    Step("install_apps", install_apps, "Install common packages"),
    Step("install_dev_tools", install_dev_tools, "Install compiler toolchain"),
    Step("setup_java_and_nvm", setup_java_and_nvm, "Install SDKMAN! and nvm"),
    Step("add_flathub", add_flathub, "Register the Flathub remote"),
    Step("flatpak_packages", flatpak_packages, "Install Flatpak applications"),
    Step("download_fonts", download_fonts, "Download Nerd Fonts"),
    Step("install_fonts", install_fonts, "Install Nerd Fonts"),
    Step("install_zsh", install_zsh, "Switch to zsh and install Oh My Zsh"),
    Step("set_ohmyzsh", set_ohmyzsh, "Configure Oh My Zsh"),
    Step("sysctl_set", sysctl_set, "Apply kernel parameters"),
    Step("create_dev_and_studies_folders", create_dev_and_studies_folders, "Create workspace folders"),
    Step("configure_git", configure_git, "Seed ~/.gitconfig"),
]


def step_names() -> List[str]:
    return [step.name for step in STEPS]
