from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

import pytest

from provision.context import ProvisionContext
from provision.distro import PackageManager
from provision.paths import UserPaths
from provision.runner import CommandRunner, RecordingExecutor
from provision.settings import Settings


@pytest.fixture(autouse=True)
def quick_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config = tmp_path / "hostprep.toml"
    config.write_text("settle_seconds = 0\n")
    monkeypatch.setenv("HOSTPREP_CONFIG", str(config))
    monkeypatch.delenv("SUDO_USER", raising=False)
    return config


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_ctx(home: Path) -> Callable[..., ProvisionContext]:
    def _make(
        pm: PackageManager = PackageManager.APT_GET,
        dry_run: bool = False,
        installed: Iterable[str] = (),
        failures: Optional[Dict[str, int]] = None,
        settings: Optional[Settings] = None,
    ) -> ProvisionContext:
        present = set(installed)
        runner = CommandRunner(dry_run=dry_run, executor=RecordingExecutor(failures))
        return ProvisionContext(
            pm=pm,
            runner=runner,
            settings=settings or Settings(settle_seconds=0),
            paths=UserPaths(home),
            which=lambda name: f"/usr/bin/{name}" if name in present else None,
        )

    return _make


@pytest.fixture
def os_release(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        path = tmp_path / "os-release"
        path.write_text(content)
        return path

    return _write
