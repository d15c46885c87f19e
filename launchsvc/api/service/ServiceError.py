"""Exceptions raised by service lifecycle operations."""

from collections.abc import Sequence


class ServiceError(Exception):
    """Base class for launchsvc service failures."""

    def __init__(self, service_name: str, message: str):
        super().__init__(message)
        self.service_name = service_name


class LaunchctlCommandError(ServiceError):
    """A launchctl subcommand exited with a nonzero status."""

    def __init__(self, service_name: str, subcommand: str, arguments: Sequence[str], returncode: int):
        self.subcommand = subcommand
        self.arguments = tuple(arguments)
        self.returncode = returncode
        command = " ".join(["launchctl", subcommand, *self.arguments])
        super().__init__(service_name, f"'{command}' failed with exit status {returncode}")


class ServiceProbeError(ServiceError):
    """launchctl could not be run to check whether a service is bootstrapped."""

    def __init__(self, service_name: str, cause: OSError):
        self.cause = cause
        super().__init__(service_name, f"Failed to check bootstrap for: {service_name} ({cause})")
