"""Unit tests for launchsvc.api.validate_output."""

import pytest

from launchsvc.api.service.cmd_start import cmd_start
from launchsvc.api.validate_output import validate_output


def _valid_start_output() -> dict:
    return {
        "errors": [],
        "warnings": [],
        "name": "com.acme.worker",
        "service_target": "gui/501/com.acme.worker",
        "action": "kickstarted",
        "running": True,
    }


def test_validate_output_accepts_matching_output():
    assert validate_output(cmd_start, _valid_start_output()) == _valid_start_output()


def test_validate_output_rejects_missing_field():
    output = _valid_start_output()
    del output["action"]

    with pytest.raises(ValueError, match="Output validation failed for service.start"):
        validate_output(cmd_start, output)


def test_validate_output_skips_non_api_functions():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}
