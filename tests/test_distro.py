from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from provision.distro import PackageManager, UnsupportedDistribution, detect_pm, parse_os_release


@pytest.mark.parametrize(
    ("distro_id", "expected"),
    [
        ("fedora", PackageManager.DNF),
        ("rhel", PackageManager.YUM),
        ("centos", PackageManager.YUM),
        ("ubuntu", PackageManager.APT_GET),
        ("debian", PackageManager.APT_GET),
    ],
)
def test_detect_supported_distros(os_release: Callable[[str], Path], distro_id: str, expected: PackageManager) -> None:
    path = os_release(f'NAME="Some Linux"\nID={distro_id}\nVERSION_ID="1"\n')
    assert detect_pm(path) is expected


@pytest.mark.parametrize("distro_id", ["arch", "opensuse-leap", "alpine", "Fedora"])
def test_detect_unsupported_distro(os_release: Callable[[str], Path], distro_id: str) -> None:
    path = os_release(f"ID={distro_id}\n")
    with pytest.raises(UnsupportedDistribution, match=distro_id):
        detect_pm(path)


def test_detect_missing_id(os_release: Callable[[str], Path]) -> None:
    path = os_release('NAME="Mystery"\n')
    with pytest.raises(UnsupportedDistribution, match="unknown"):
        detect_pm(path)


def test_detect_missing_file(tmp_path: Path) -> None:
    with pytest.raises(UnsupportedDistribution, match="not found"):
        detect_pm(tmp_path / "nope")


def test_parse_os_release_quoting_and_comments() -> None:
    fields = parse_os_release(
        "# comment\n"
        "\n"
        'PRETTY_NAME="Ubuntu 24.04 LTS"\n'
        "ID=ubuntu\n"
        "ID_LIKE='debian'\n"
        "garbage line\n"
    )
    assert fields == {
        "PRETTY_NAME": "Ubuntu 24.04 LTS",
        "ID": "ubuntu",
        "ID_LIKE": "debian",
    }


def test_package_manager_binary_names() -> None:
    assert [pm.binary for pm in PackageManager] == ["dnf", "yum", "apt-get"]
