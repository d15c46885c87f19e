"""Shared pytest configuration and fixtures for all tests."""

import json
import subprocess
from pathlib import Path

import pytest

from launchsvc.api.service.Service import Service

SERVICE_NAME = "com.acme.worker"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with launchctl faked")
    config.addinivalue_line("markers", "integration: tests that run the real launchctl")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fake launchctl
# =============================================================================


class FakeLaunchctl:
    """Stand-in for subprocess.run that records launchctl invocations.

    Every subcommand exits 0 unless listed in ``exit_codes``. Setting
    ``missing`` makes every spawn fail as if launchctl were not installed.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self.exit_codes: dict[str, int] = {}
        self.missing = False

    def run(self, argv, **kwargs):
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        return subprocess.CompletedProcess(argv, self.exit_codes.get(argv[1], 0))

    @property
    def subcommands(self) -> list[str]:
        return [call[1] for call in self.calls]

    def not_bootstrapped(self) -> None:
        self.exit_codes["print"] = 113


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def launchsvc_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LAUNCHSVC_HOME at an empty directory for every test."""
    home = tmp_path / ".launchsvc"
    monkeypatch.setenv("LAUNCHSVC_HOME", str(home))
    return home


@pytest.fixture
def fake_launchctl(monkeypatch) -> FakeLaunchctl:
    """Replace subprocess.run in the launchctl runner with a FakeLaunchctl."""
    fake = FakeLaunchctl()
    monkeypatch.setattr("launchsvc.api.service._run_launchctl.subprocess.run", fake.run)
    return fake


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def service(log_dir: Path) -> Service:
    """Service with default targets and log files under a temporary directory."""
    return Service.from_name(
        SERVICE_NAME,
        error_log_path=str(log_dir / f"{SERVICE_NAME}_501.err.log"),
        out_log_path=str(log_dir / f"{SERVICE_NAME}_501.out.log"),
    )


@pytest.fixture
def config_file(launchsvc_home: Path, log_dir: Path) -> Path:
    """Write a config.json that keeps the test service's log files under log_dir."""
    launchsvc_home.mkdir(parents=True, exist_ok=True)
    path = launchsvc_home / "config.json"
    path.write_text(
        json.dumps(
            {
                "services": {
                    SERVICE_NAME: {
                        "error_log_path": str(log_dir / "worker.err.log"),
                        "out_log_path": str(log_dir / "worker.out.log"),
                    }
                }
            }
        ),
        encoding="utf-8",
    )
    return path
