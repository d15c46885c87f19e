"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """
    name: str = Field(..., description="Service label")
    active: bool = Field(..., description="Whether the service is bootstrapped in its domain")
    domain_target: str = Field(..., description="Domain target (gui/<uid>)")
    service_target: str = Field(..., description="Service target (gui/<uid>/<name>)")
    plist_path: str = Field(..., description="Path to the plist file")
    error_log_path: str = Field(..., description="Error log path")
    out_log_path: str = Field(..., description="Output log path")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    name: str = Field(..., description="Service label")
    service_target: str = Field(..., description="Service target, empty string if config failed")
    action: str = Field(..., description="Action taken ('bootstrapped' or 'kickstarted'), empty string on error")
    running: bool = Field(..., description="Whether start succeeded")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    name: str = Field(..., description="Service label")
    service_target: str = Field(..., description="Service target, empty string if config failed")
    action: str = Field(..., description="Action taken ('booted_out' or 'killed'), empty string on error")
    stopped: bool = Field(..., description="Whether stop succeeded")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for service restart command."""
    name: str = Field(..., description="Service label")
    service_target: str = Field(..., description="Service target, empty string if config failed")
    restarted: bool = Field(..., description="Whether both stop and start succeeded")


register_output_schema("service", "status", ServiceStatusOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "restart", ServiceRestartOutput)
