"""launchsvc - start, stop and restart macOS launchd services via launchctl."""

from .api.service.Service import Service
from .api.service.ServiceConfig import ServiceConfig
from .api.service.ServiceError import LaunchctlCommandError, ServiceError, ServiceProbeError

__all__ = [
    "LaunchctlCommandError",
    "Service",
    "ServiceConfig",
    "ServiceError",
    "ServiceProbeError",
]
