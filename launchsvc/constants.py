"""Shared constants for launchsvc locations and launchd conventions."""

LAUNCHSVC_HOME_EXT = ".launchsvc"  # user-level state/config directory suffix

LAUNCHSVC_HOME_DISPLAY = f"~/{LAUNCHSVC_HOME_EXT}"  # user-readable path hint

# launchctl lives in /bin on every supported macOS release
DEFAULT_LAUNCHCTL_PATH = "/bin/launchctl"

# First interactive user on a fresh macOS install
DEFAULT_UID = "501"
