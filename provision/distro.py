"""Distribution detection: map /etc/os-release to a package manager."""

import shlex
from enum import Enum
from pathlib import Path
from typing import Dict, Union

OS_RELEASE = Path("/etc/os-release")


class UnsupportedDistribution(RuntimeError):
    """The host could not be identified, or its distro is not supported."""


class PackageManager(Enum):
    DNF = "dnf"
    YUM = "yum"
    APT_GET = "apt-get"

    @property
    def binary(self) -> str:
        return self.value


# Fixed mapping of os-release ID -> package manager
DISTRO_PACKAGE_MANAGERS: Dict[str, PackageManager] = {
    "fedora": PackageManager.DNF,
    "rhel": PackageManager.YUM,
    "centos": PackageManager.YUM,
    "ubuntu": PackageManager.APT_GET,
    "debian": PackageManager.APT_GET,
}


def parse_os_release(content: str) -> Dict[str, str]:
    """
    Parse os-release style KEY=value content.

    Values may be quoted the way a shell would quote them; blank lines and
    comments are skipped, as are lines without '='.
    """
    fields: Dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            parts = [raw.strip("\"'")]
        fields[key.strip()] = parts[0] if parts else ""
    return fields


def pm_for_id(distro_id: str) -> PackageManager:
    """Look up the package manager for an os-release ID."""
    try:
        return DISTRO_PACKAGE_MANAGERS[distro_id]
    except KeyError:
        raise UnsupportedDistribution(
            f"(Maybe) your distro is not supported: {distro_id or 'unknown'}"
        ) from None


def detect_pm(os_release: Union[str, Path] = OS_RELEASE) -> PackageManager:
    """
    Detect the system's package manager from os-release data.

    Args:
        os_release: Path to the os-release file

    Returns:
        The package manager for the host's distribution

    Raises:
        UnsupportedDistribution: If the file is unreadable or the ID is unknown
    """
    path = Path(os_release)
    try:
        content = path.read_text()
    except OSError:
        raise UnsupportedDistribution(f"{path} not found") from None

    return pm_for_id(parse_os_release(content).get("ID", ""))
