"""Service restart command - stops then starts a service."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServiceRestartOutput
from .cmd_start import cmd_start
from .cmd_stop import cmd_stop


def cmd_restart(name: str, uid: str | None = None) -> StageResult:
    """Restart a service: stop, then start.

    If stop fails, start is not attempted and the stop error is reported.
    """
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.2, "Stopping service...")
        stop_result = cmd_stop(name, uid)
        list(stop_result.progress_callback(stop_result))  # Consume generator

        if not stop_result.success:
            yield (1.0, "Complete")
            result_obj.result = stop_result.result
            result_obj.output = ServiceRestartOutput(
                errors=stop_result.output.get("errors", []),
                warnings=stop_result.output.get("warnings", []),
                name=name,
                service_target=stop_result.output.get("service_target", ""),
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Starting service...")
        start_result = cmd_start(name, uid)
        list(start_result.progress_callback(start_result))  # Consume generator

        yield (1.0, "Complete")
        if start_result.success:
            result_obj.result = f"Service {name} restarted"
        else:
            result_obj.result = start_result.result
        result_obj.output = ServiceRestartOutput(
            errors=start_result.output.get("errors", []),
            warnings=stop_result.output.get("warnings", []) + start_result.output.get("warnings", []),
            name=name,
            service_target=start_result.output.get("service_target", ""),
            restarted=start_result.success,
        ).model_dump(mode="python")
        result_obj.success = start_result.success

    return StageResult(
        announce=f"Restarting service {name}...",
        progress_callback=do_work,
    )
