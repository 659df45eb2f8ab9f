from __future__ import annotations

import typer

from .commands import articles_cmd, auth_cmd, comments_cmd, profiles_cmd, settings_cmd, tags_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="conduit",
        help="Command line client for RealWorld (Conduit) APIs.",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.command("whoami")(auth_cmd.whoami_impl)
    app.add_typer(articles_cmd.app, name="articles")
    app.add_typer(comments_cmd.app, name="comments")
    app.add_typer(profiles_cmd.app, name="profiles")
    app.command("tags")(tags_cmd.tags)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
