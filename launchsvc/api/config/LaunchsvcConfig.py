"""Top-level launchsvc configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_LAUNCHCTL_PATH
from ..service.ServiceConfig import _ALIASES, ServiceConfig
from .get_home_dir import get_home_dir


class LaunchsvcConfig(BaseModel):
    """User configuration: launchctl location and per-service overrides."""

    model_config = ConfigDict(extra="forbid")

    launchctl_path: str = Field(DEFAULT_LAUNCHCTL_PATH, description="Absolute path to the launchctl executable")
    uid: str | None = Field(None, description="User id applied to every service unless overridden")
    services: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-service field overrides keyed by service name",
    )

    @field_validator("uid", mode="before")
    @classmethod
    def uid_to_str(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on LAUNCHSVC_HOME or default to ~/.launchsvc."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "LaunchsvcConfig":
        """Load and validate config from file.

        A missing config file is not an error; built-in defaults apply.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def service_config(self, name: str, **overrides: Any) -> ServiceConfig:
        """Build the ServiceConfig for ``name``.

        Precedence: ``overrides`` (None values ignored), then the per-service
        entry in ``services``, then the global ``uid`` and ``launchctl_path``.
        """
        values: dict[str, Any] = {"launchctl_path": self.launchctl_path}
        if self.uid is not None:
            values["uid"] = self.uid
        for layer in (self.services.get(name, {}), overrides):
            for key, value in layer.items():
                if value is not None:
                    values[_ALIASES.get(key, key)] = value
        values["name"] = name
        return ServiceConfig(**values)
