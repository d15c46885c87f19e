"""Service Typer app factory."""

import typer

from launchsvc.api.service.cmd_restart import cmd_restart
from launchsvc.api.service.cmd_start import cmd_start
from launchsvc.api.service.cmd_status import cmd_status
from launchsvc.api.service.cmd_stop import cmd_stop
from launchsvc.cli._handle_stage_result import _handle_stage_result

_UID_HELP = "User id owning the GUI domain (default: config value or 501)"


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Start, stop and restart launchd services",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Service label, e.g. com.acme.worker"),
        uid: str | None = typer.Option(None, "--uid", help=_UID_HELP),
    ) -> None:
        """Check whether a service is bootstrapped."""
        _handle_stage_result(cmd_status, ctx)(name, uid=uid)

    @app.command(name="start")
    def start_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Service label, e.g. com.acme.worker"),
        uid: str | None = typer.Option(None, "--uid", help=_UID_HELP),
    ) -> None:
        """Start service."""
        _handle_stage_result(cmd_start, ctx)(name, uid=uid)

    @app.command(name="stop")
    def stop_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Service label, e.g. com.acme.worker"),
        uid: str | None = typer.Option(None, "--uid", help=_UID_HELP),
    ) -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop, ctx)(name, uid=uid)

    @app.command(name="restart")
    def restart_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Service label, e.g. com.acme.worker"),
        uid: str | None = typer.Option(None, "--uid", help=_UID_HELP),
    ) -> None:
        """Stop then start service."""
        _handle_stage_result(cmd_restart, ctx)(name, uid=uid)

    return app
