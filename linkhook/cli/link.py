"""Link Typer app factory."""

import typer

from linkhook.api.link.cmd_resolve import cmd_resolve
from linkhook.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve link destinations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        destination: str = typer.Argument(..., help="Link destination as written, e.g. /docs/foo#install"),
        site: str = typer.Option(..., "--site", "-s", help="Path to the JSON site manifest"),
        page: str = typer.Option(..., "--page", "-p", help="Path of the page being rendered"),
        inner: str | None = typer.Option(None, "--inner", help="Path of the page whose content holds the link"),
        text: str = typer.Option("", "--text", help="Link text"),
        title: str = typer.Option("", "--title", help="Link title"),
        error_level: str | None = typer.Option(None, "--error-level", help="ignore, warning or error"),
        highlight_broken: bool | None = typer.Option(
            None, "--highlight-broken/--no-highlight-broken", help="Mark unresolved links with class=broken"
        ),
        development: bool | None = typer.Option(
            None, "--development/--production", help="Override LINKHOOK_ENVIRONMENT"
        ),
    ) -> None:
        """Resolve a link destination against a site manifest."""
        _handle_stage_result(cmd_resolve)(
            destination=destination,
            site=site,
            page=page,
            inner=inner,
            text=text,
            title=title,
            error_level=error_level,
            highlight_broken=highlight_broken,
            development=development,
        )

    return app
