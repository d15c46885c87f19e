"""Unit tests for launchsvc.api.service.cmd_start module."""

from pathlib import Path

from launchsvc.api.service.cmd_start import cmd_start
from tests.unit.conftest import SERVICE_NAME, run_cmd


def test_cmd_start_bootstraps(config_file, log_dir, fake_launchctl):
    fake_launchctl.not_bootstrapped()

    result = run_cmd(cmd_start, SERVICE_NAME)

    assert result.success is True
    assert result.output["action"] == "bootstrapped"
    assert result.output["running"] is True
    assert result.output["service_target"] == "gui/501/com.acme.worker"
    assert result.output["errors"] == []
    assert fake_launchctl.subcommands == ["print", "enable", "bootstrap"]
    assert (log_dir / "worker.err.log").exists()
    assert (log_dir / "worker.out.log").exists()


def test_cmd_start_kickstarts(config_file, fake_launchctl):
    result = run_cmd(cmd_start, SERVICE_NAME)

    assert result.success is True
    assert result.output["action"] == "kickstarted"
    assert "kickstarted" in result.result


def test_cmd_start_uid(config_file, fake_launchctl):
    result = run_cmd(cmd_start, SERVICE_NAME, uid="401")

    assert result.output["service_target"] == "gui/401/com.acme.worker"
    assert fake_launchctl.calls[0][2] == "gui/401/com.acme.worker"


def test_cmd_start_launchctl_failure(config_file, fake_launchctl):
    fake_launchctl.not_bootstrapped()
    fake_launchctl.exit_codes["bootstrap"] = 5

    result = run_cmd(cmd_start, SERVICE_NAME)

    assert result.success is False
    assert result.output["running"] is False
    assert result.output["action"] == ""
    assert "exit status 5" in result.output["errors"][0]
    assert result.result.startswith("Error starting service")


def test_cmd_start_launchctl_missing(config_file, fake_launchctl):
    fake_launchctl.missing = True

    result = run_cmd(cmd_start, SERVICE_NAME)

    assert result.success is False
    assert "Failed to check bootstrap for: com.acme.worker" in result.output["errors"][0]


def test_cmd_start_invalid_config(launchsvc_home, fake_launchctl):
    launchsvc_home.mkdir(parents=True)
    Path(launchsvc_home / "config.json").write_text("{")

    result = run_cmd(cmd_start, SERVICE_NAME)

    assert result.success is False
    assert result.output["service_target"] == ""
    assert "Invalid JSON" in result.output["errors"][0]
    assert fake_launchctl.calls == []
