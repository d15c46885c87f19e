"""Service module - launchd service lifecycle via launchctl."""

from .._output_schemas.service import (
    ServiceRestartOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
)
from .ServiceConfig import ServiceConfig

__all__ = [
    "ServiceConfig",
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
]
