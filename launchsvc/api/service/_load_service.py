"""Build a Service handle from the user configuration."""

from ..config.LaunchsvcConfig import LaunchsvcConfig
from .Service import Service


def _load_service(name: str, uid: str | None = None) -> Service:
    """Load config and return the Service for ``name``.

    Raises:
        ValueError: If the config file or the resulting service config is invalid
    """
    config = LaunchsvcConfig.load()
    return Service(config.service_config(name, uid=uid))
