"""Configuration module - home directory, config file and package version."""

from .LaunchsvcConfig import LaunchsvcConfig
from .get_home_dir import get_home_dir

__all__ = ["LaunchsvcConfig", "get_home_dir"]
