"""API module for launchsvc.

Functions defined here serve as the single source of truth for the CLI.
"""

__all__ = []
