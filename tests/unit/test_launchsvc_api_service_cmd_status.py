"""Unit tests for launchsvc.api.service.cmd_status module."""

from launchsvc.api.service.cmd_status import cmd_status
from tests.unit.conftest import SERVICE_NAME, run_cmd


def test_cmd_status_active(config_file, log_dir, fake_launchctl):
    result = run_cmd(cmd_status, SERVICE_NAME)

    assert result.success is True
    assert result.output["active"] is True
    assert result.output["domain_target"] == "gui/501"
    assert result.output["service_target"] == "gui/501/com.acme.worker"
    assert result.output["plist_path"] == "~/Library/LaunchAgents/com.acme.worker.plist"
    assert result.output["error_log_path"] == str(log_dir / "worker.err.log")
    assert fake_launchctl.subcommands == ["print"]


def test_cmd_status_inactive(config_file, fake_launchctl):
    fake_launchctl.not_bootstrapped()

    result = run_cmd(cmd_status, SERVICE_NAME)

    assert result.success is True
    assert result.output["active"] is False
    assert "not bootstrapped" in result.result


def test_cmd_status_probe_failure(config_file, fake_launchctl):
    fake_launchctl.missing = True

    result = run_cmd(cmd_status, SERVICE_NAME)

    assert result.success is False
    assert result.output["active"] is False
    assert "com.acme.worker" in result.output["errors"][0]


def test_cmd_status_unreadable_config(launchsvc_home, fake_launchctl):
    (launchsvc_home / "config.json").mkdir(parents=True)

    result = run_cmd(cmd_status, SERVICE_NAME)

    assert result.success is False
    assert "Cannot read config file" in result.output["errors"][0]
    assert fake_launchctl.calls == []
