"""Service public API - start, stop and restart a launchd service.

See https://ss64.com/mac/launchctl.html for the launchctl subcommands used here.
"""

from pathlib import Path
from typing import Any

from ...logging_config import get_logger
from ._run_launchctl import _run_launchctl
from .ServiceConfig import ServiceConfig
from .ServiceError import LaunchctlCommandError, ServiceProbeError

logger = get_logger("service")


class Service:
    """Handle for one launchd service in a user's GUI domain.

    The handle is stateless beyond its config; every operation asks launchctl
    whether the service is bootstrapped and branches on the answer. Calls on
    the same service from several threads or processes are not coordinated.
    """

    def __init__(self, service_config: ServiceConfig):
        self.service_config = service_config

    @classmethod
    def from_name(cls, name: str, **overrides: Any) -> "Service":
        """Create a handle deriving every unset field from ``name`` and ``uid``."""
        return cls(ServiceConfig(name=name, **overrides))

    @property
    def name(self) -> str:
        return self.service_config.name

    def is_active(self) -> bool:
        """Check whether the service is bootstrapped in its domain.

        Returns:
            True if ``launchctl print <service_target>`` exits 0, False otherwise

        Raises:
            ServiceProbeError: If launchctl cannot be run at all
        """
        try:
            status = self._launchctl("print", self.service_config.service_target)
        except OSError as e:
            raise ServiceProbeError(self.name, e) from e
        return status == 0

    def start(self) -> str:
        """Start the service, bootstrapping it first if launchd does not know it.

        Returns:
            "bootstrapped" or "kickstarted"

        Raises:
            LaunchctlCommandError: If a subcommand exits nonzero
            OSError: If a log file cannot be created or launchctl cannot be spawned
        """
        config = self.service_config
        self._create_log_files()

        if not self.is_active():
            # the service must be enabled before it can be bootstrapped
            logger.info("Bootstrapping %s into %s", config.name, config.domain_target)
            self._run_all(
                ("enable", config.service_target),
                ("bootstrap", config.domain_target, config.plist_path),
            )
            return "bootstrapped"

        logger.info("Kickstarting %s", config.name)
        self._run_all(("kickstart", config.plist_path))
        return "kickstarted"

    def stop(self) -> str:
        """Stop the service.

        A bootstrapped service is booted out of its domain. Otherwise SIGTERM
        is sent in case it runs without being bootstrapped; that kill never
        fails on a nonzero exit status.

        Returns:
            "booted_out" or "killed"

        Raises:
            LaunchctlCommandError: If bootout exits nonzero
            OSError: If launchctl cannot be spawned
        """
        config = self.service_config

        if not self.is_active():
            logger.info("Sending SIGTERM to %s", config.service_target)
            status = self._launchctl("kill", "SIGTERM", config.service_target)
            if status != 0:
                logger.debug("%s was not running", config.service_target)
            return "killed"

        logger.info("Booting out %s from %s", config.name, config.domain_target)
        self._run_all(("bootout", config.domain_target, config.plist_path))
        return "booted_out"

    def restart(self) -> str:
        """Stop then start the service; start is skipped if stop raises.

        Returns:
            The action taken by start()
        """
        self.stop()
        return self.start()

    def _launchctl(self, subcommand: str, *args: str) -> int:
        return _run_launchctl(self.service_config.launchctl_path, subcommand, *args)

    def _run_all(self, *commands: tuple[str, ...]) -> None:
        """Run every command, then raise for the first nonzero exit status."""
        failures: list[LaunchctlCommandError] = []
        for subcommand, *args in commands:
            status = self._launchctl(subcommand, *args)
            if status != 0:
                logger.warning("launchctl %s for %s exited with status %d", subcommand, self.name, status)
                failures.append(LaunchctlCommandError(self.name, subcommand, args, status))
        if failures:
            raise failures[0]

    def _create_log_files(self) -> None:
        """Create empty log files where missing; existing files are left untouched."""
        for log_path in (self.service_config.error_log_path, self.service_config.out_log_path):
            path = Path(log_path)
            if not path.exists():
                logger.debug("Creating log file %s", path)
                path.write_text("", encoding="utf-8")
