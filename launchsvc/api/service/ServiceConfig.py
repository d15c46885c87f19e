"""Service configuration with Pydantic validation.

Every identifier launchctl needs is derived from the service name and the
owning user id. Derivation happens once, in dependency order, so an override
of an early field (``uid``) flows into the defaults of later ones
(``domain_target``, ``service_target``, log paths) while an explicitly given
later field is kept as given.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...constants import DEFAULT_LAUNCHCTL_PATH, DEFAULT_UID

# Alternate input names accepted for the derived fields
_ALIASES: dict[str, str] = {
    "user_id": "uid",
    "descriptor_path": "plist_path",
    "stderr_log_path": "error_log_path",
    "stdout_log_path": "out_log_path",
}


def _given(values: dict[str, Any], key: str) -> bool:
    return values.get(key) is not None


class ServiceConfig(BaseModel):
    """Identifiers and paths for one launchd service in a user's GUI domain."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Service label, typically com.<owner>.<binary name>")
    uid: str = Field(..., description="Id of the logged in user, typically 501")
    domain_target: str = Field(..., description="Domain target (gui/<uid>)")
    service_target: str = Field(..., description="Service target (gui/<uid>/<name>)")
    plist_path: str = Field(..., description="Path to the plist, typically ~/Library/LaunchAgents/<name>.plist")
    error_log_path: str = Field(..., description="Error log path, default /tmp/<name>_<uid>.err.log")
    out_log_path: str = Field(..., description="Output log path, default /tmp/<name>_<uid>.out.log")
    program_path: str | None = Field(None, description="Binary the plist launches, set by the explicit form only")
    launchctl_path: str = Field(DEFAULT_LAUNCHCTL_PATH, description="Absolute path to the launchctl executable")

    @model_validator(mode="before")
    @classmethod
    def resolve_defaults(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"service config must be a dict, got {type(values).__name__}")
        values = dict(values)

        for alias, field_name in _ALIASES.items():
            if alias not in values:
                continue
            if _given(values, field_name):
                raise ValueError(f"{alias!r} and {field_name!r} are the same setting; pass only one")
            values[field_name] = values.pop(alias)

        if not _given(values, "name"):
            raise ValueError("service name is required")
        name = values["name"]

        uid = str(values["uid"]) if _given(values, "uid") else DEFAULT_UID
        values["uid"] = uid
        if not _given(values, "domain_target"):
            values["domain_target"] = f"gui/{uid}"
        if not _given(values, "service_target"):
            values["service_target"] = f"{values['domain_target']}/{name}"
        if not _given(values, "plist_path"):
            values["plist_path"] = f"~/Library/LaunchAgents/{name}.plist"
        if not _given(values, "error_log_path"):
            values["error_log_path"] = f"/tmp/{name}_{uid}.err.log"
        if not _given(values, "out_log_path"):
            values["out_log_path"] = f"/tmp/{name}_{uid}.out.log"
        if not _given(values, "launchctl_path"):
            values.pop("launchctl_path", None)
        return values

    @classmethod
    def explicit(
        cls,
        *,
        name: str,
        uid: str | int,
        domain_target: str,
        service_target: str,
        plist_path: str,
        error_log_path: str,
        out_log_path: str,
        program_path: str,
        launchctl_path: str = DEFAULT_LAUNCHCTL_PATH,
    ) -> "ServiceConfig":
        """Build a config with every field supplied by the caller.

        Used when the caller owns the plist and the binary it launches, so
        nothing is derived.
        """
        return cls(
            name=name,
            uid=uid,
            domain_target=domain_target,
            service_target=service_target,
            plist_path=plist_path,
            error_log_path=error_log_path,
            out_log_path=out_log_path,
            program_path=program_path,
            launchctl_path=launchctl_path,
        )
