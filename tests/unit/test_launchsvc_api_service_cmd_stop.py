"""Unit tests for launchsvc.api.service.cmd_stop module."""

from launchsvc.api.service.cmd_stop import cmd_stop
from tests.unit.conftest import SERVICE_NAME, run_cmd


def test_cmd_stop_boots_out(config_file, fake_launchctl):
    result = run_cmd(cmd_stop, SERVICE_NAME)

    assert result.success is True
    assert result.output["action"] == "booted_out"
    assert result.output["stopped"] is True
    assert result.result == "Service com.acme.worker stopped"
    assert fake_launchctl.subcommands == ["print", "bootout"]


def test_cmd_stop_not_bootstrapped_succeeds(config_file, fake_launchctl):
    fake_launchctl.not_bootstrapped()
    fake_launchctl.exit_codes["kill"] = 3

    result = run_cmd(cmd_stop, SERVICE_NAME)

    assert result.success is True
    assert result.output["action"] == "killed"
    assert "not bootstrapped" in result.result


def test_cmd_stop_bootout_failure(config_file, fake_launchctl):
    fake_launchctl.exit_codes["bootout"] = 5

    result = run_cmd(cmd_stop, SERVICE_NAME)

    assert result.success is False
    assert result.output["stopped"] is False
    assert "bootout" in result.output["errors"][0]
