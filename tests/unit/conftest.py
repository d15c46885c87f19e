"""Unit test fixtures.

Fixtures and the fake launchctl live in tests/conftest.py; this file
re-exports the plain helpers unit tests import directly.
"""

from tests.conftest import SERVICE_NAME, FakeLaunchctl, run_cmd

__all__ = [
    "FakeLaunchctl",
    "SERVICE_NAME",
    "run_cmd",
]
