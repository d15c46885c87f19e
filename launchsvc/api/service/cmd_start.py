"""Service start command - bootstraps or kickstarts a service."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServiceStartOutput
from ._load_service import _load_service
from .ServiceError import ServiceError


def cmd_start(name: str, uid: str | None = None) -> StageResult:
    """Start a service via launchctl.

    Behavior:
    - **If the service is not bootstrapped**: runs `launchctl enable` on the
      service target, then `launchctl bootstrap` with the plist
    - **If the service is bootstrapped**: runs `launchctl kickstart` with the plist

    Both log files are created first if missing.
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
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                service_target="",
                action="",
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Starting service...")
        try:
            action = service.start()
        except (ServiceError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error starting service: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                service_target=service.service_config.service_target,
                action="",
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service {name} started ({action})"
        result_obj.output = ServiceStartOutput(
            errors=[],
            warnings=[],
            name=name,
            service_target=service.service_config.service_target,
            action=action,
            running=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Starting service {name}...",
        progress_callback=do_work,
    )
