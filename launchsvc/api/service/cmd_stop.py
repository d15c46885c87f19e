"""Service stop command - boots out or kills a service."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServiceStopOutput
from ._load_service import _load_service
from .ServiceError import ServiceError


def cmd_stop(name: str, uid: str | None = None) -> StageResult:
    """Stop a service via launchctl.

    A bootstrapped service is booted out of its domain. A service that is not
    bootstrapped is sent SIGTERM, which succeeds even when nothing is running.
    """
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            service = _load_service(name, uid)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                service_target="",
                action="",
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Stopping service...")
        try:
            action = service.stop()
        except (ServiceError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping service: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                service_target=service.service_config.service_target,
                action="",
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if action == "killed":
            result_obj.result = f"Service {name} was not bootstrapped; sent SIGTERM"
        else:
            result_obj.result = f"Service {name} stopped"
        result_obj.output = ServiceStopOutput(
            errors=[],
            warnings=[],
            name=name,
            service_target=service.service_config.service_target,
            action=action,
            stopped=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Stopping service {name}...",
        progress_callback=do_work,
    )
