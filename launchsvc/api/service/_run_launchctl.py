"""Run a single launchctl subcommand."""

import subprocess

from ...logging_config import get_logger

logger = get_logger("service")


def _run_launchctl(launchctl_path: str, subcommand: str, *args: str) -> int:
    """Run ``launchctl <subcommand> <args...>`` and return its exit status.

    Both output streams are discarded and no timeout is applied.

    Raises:
        OSError: If launchctl cannot be spawned
    """
    argv = [launchctl_path, subcommand, *args]
    logger.debug("Running %s", " ".join(argv))
    completed = subprocess.run(
        argv,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    logger.debug("launchctl %s exited with status %d", subcommand, completed.returncode)
    return completed.returncode
