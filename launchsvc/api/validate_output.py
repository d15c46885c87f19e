"""Output schemas for API commands - enforces consistent output structure.

Each command must have a Pydantic model that defines its output structure.
All fields must always be present (even if empty) to ensure consistency.
"""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against registered schema.

    Args:
        func: The command function (used to infer domain and command name)
        output: The output dict to validate

    Returns:
        Validated output dict

    Raises:
        ValueError: If validation fails
    """
    # Infer domain and command from function
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[0] != "launchsvc" or module_parts[1] != "api":
        # Not an API function, skip validation
        return output

    domain = module_parts[2]
    func_name = func.__name__
    if not func_name.startswith("cmd_"):
        return output

    command_name = func_name[4:]  # Remove "cmd_" prefix

    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        validated = schema_class(**output)
        return validated.model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(
            f"Output validation failed for {domain}.{command_name}: {e}\n"
            f"Got output: {output}"
        ) from e
