from __future__ import annotations

from typing import Callable

import pytest

from provision import packages
from provision.context import ProvisionContext
from provision.distro import PackageManager
from provision.packages import (
    UnsupportedPackageManager,
    get_dev_tools_cmd,
    install_apps,
    install_dev_tools,
    update_system,
)
from provision.runner import CommandFailed
from provision.settings import Settings

MakeCtx = Callable[..., ProvisionContext]


def test_apt_update_uses_three_subcommands(make_ctx: MakeCtx) -> None:
    ctx = make_ctx(pm=PackageManager.APT_GET)
    update_system(ctx)
    assert ctx.runner.executor.commands == [
        "sudo apt-get update -qq",
        "sudo apt-get upgrade -qq -y",
        "sudo apt-get autoremove -qq -y",
    ]


@pytest.mark.parametrize("pm", [PackageManager.DNF, PackageManager.YUM])
def test_rpm_update_uses_two_subcommands(make_ctx: MakeCtx, pm: PackageManager) -> None:
    ctx = make_ctx(pm=pm)
    update_system(ctx)
    assert ctx.runner.executor.commands == [
        f"sudo {pm.binary} upgrade -y",
        f"sudo {pm.binary} autoremove -y",
    ]


def test_autoremove_failure_is_ignored(make_ctx: MakeCtx) -> None:
    ctx = make_ctx(failures={"autoremove": 100})
    update_system(ctx)
    assert ctx.runner.history[-1].ok is False


def test_upgrade_failure_is_fatal(make_ctx: MakeCtx) -> None:
    ctx = make_ctx(failures={"upgrade": 100})
    with pytest.raises(CommandFailed):
        update_system(ctx)
    assert not any("autoremove" in c for c in ctx.runner.executor.commands)


def test_install_apps_installs_only_missing(make_ctx: MakeCtx, capsys: pytest.CaptureFixture[str]) -> None:
    settings = Settings(common_packages=["curl", "git", "zsh"], settle_seconds=0)
    ctx = make_ctx(installed=["git"], settings=settings)

    issued = install_apps(ctx)

    assert issued == ["curl", "zsh"]
    assert ctx.runner.executor.commands == [
        "sudo apt-get install -y curl",
        "sudo apt-get install -y zsh",
    ]
    assert "git is already installed." in capsys.readouterr().out


def test_install_apps_is_idempotent(make_ctx: MakeCtx) -> None:
    present: set[str] = set()

    class InstallingExecutor:
        def __init__(self) -> None:
            self.commands: list[str] = []

        def execute(self, command: str) -> int:
            self.commands.append(command)
            present.add(command.rsplit(" ", 1)[-1])
            return 0

    ctx = make_ctx()
    ctx.runner.executor = InstallingExecutor()
    ctx.which = lambda name: f"/usr/bin/{name}" if name in present else None

    first = install_apps(ctx)
    second = install_apps(ctx)

    assert first == ctx.settings.common_packages
    assert second == []


def test_install_apps_uses_aliases(make_ctx: MakeCtx) -> None:
    settings = Settings(
        common_packages=["neovim"],
        aliases={"dnf": {"neovim": "neovim-qt"}},
        settle_seconds=0,
    )
    ctx = make_ctx(pm=PackageManager.DNF, settings=settings)
    install_apps(ctx)
    assert ctx.runner.executor.commands == ["sudo dnf install -y neovim-qt"]


def test_install_apps_failure_is_fatal(make_ctx: MakeCtx) -> None:
    settings = Settings(common_packages=["wine", "zsh"], settle_seconds=0)
    ctx = make_ctx(settings=settings, failures={"wine": 100})
    with pytest.raises(CommandFailed):
        install_apps(ctx)
    assert ctx.runner.executor.commands == ["sudo apt-get install -y wine"]


@pytest.mark.parametrize("pm", [PackageManager.DNF, PackageManager.YUM])
def test_dev_tools_groupinstall_with_fallback(pm: PackageManager) -> None:
    action, cmd = get_dev_tools_cmd(pm)
    assert action == "groupinstall"
    assert cmd == (
        f"sudo {pm.binary} groupinstall -y 'Development Tools'"
        f" || sudo {pm.binary} install -y @development-tools"
    )


def test_dev_tools_build_essential() -> None:
    assert get_dev_tools_cmd(PackageManager.APT_GET) == (
        "build_essential",
        "sudo apt-get install -y build-essential",
    )


def test_dev_tools_groupinstall_failure_is_ignored(make_ctx: MakeCtx) -> None:
    ctx = make_ctx(pm=PackageManager.DNF, failures={"groupinstall": 1})
    install_dev_tools(ctx)
    assert ctx.runner.history[-1].ok is False


def test_dev_tools_build_essential_failure_is_fatal(make_ctx: MakeCtx) -> None:
    ctx = make_ctx(failures={"build-essential": 100})
    with pytest.raises(CommandFailed):
        install_dev_tools(ctx)


def test_dev_tools_unsupported_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(packages, "_DEV_TOOLS", {})
    with pytest.raises(UnsupportedPackageManager):
        get_dev_tools_cmd(PackageManager.APT_GET)
