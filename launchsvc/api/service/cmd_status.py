"""Service status command - reports whether a service is bootstrapped."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServiceStatusOutput
from ._load_service import _load_service
from .ServiceError import ServiceProbeError


def cmd_status(name: str, uid: str | None = None) -> StageResult:
    """Report the derived targets and paths of a service and whether launchd knows it."""
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
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                active=False,
                domain_target="",
                service_target="",
                plist_path="",
                error_log_path="",
                out_log_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        config = service.service_config
        errors: list[str] = []
        yield (0.5, "Checking bootstrap state...")
        try:
            active = service.is_active()
        except ServiceProbeError as e:
            active = False
            errors.append(str(e))

        yield (1.0, "Complete")
        if errors:
            result_obj.result = f"Error checking service: {errors[0]}"
        elif active:
            result_obj.result = f"Service {name} is bootstrapped in {config.domain_target}"
        else:
            result_obj.result = f"Service {name} is not bootstrapped"
        result_obj.output = ServiceStatusOutput(
            errors=errors,
            warnings=[],
            name=name,
            active=active,
            domain_target=config.domain_target,
            service_target=config.service_target,
            plist_path=config.plist_path,
            error_log_path=config.error_log_path,
            out_log_path=config.out_log_path,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce=f"Checking service {name}...",
        progress_callback=do_work,
    )
