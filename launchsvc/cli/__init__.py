"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from launchsvc.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from launchsvc.api.config.get_package_version import get_package_version

        print(f"launchsvc {get_package_version()}")
        return 0

    app = _create_app()
    try:
        # Typer reports usage errors itself (exit 2); commands exit 0 or 1
        app(argv, prog_name="launchsvc")
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return 0
