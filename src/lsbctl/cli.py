"""Entry points: the ``lsbctl`` CLI group and the ``lsbctl-init`` script.

``lsbctl-init`` is meant to be symlinked as ``/etc/init.d/<service>``::

    ln -s "$(command -v lsbctl-init)" /etc/init.d/nginx
    /etc/init.d/nginx status
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import click

from lsbctl import __version__
from lsbctl.commands import register_commands
from lsbctl.commands._context import AppContext
from lsbctl.config.settings import LsbSettings
from lsbctl.domain.bootstrap import derive_request, resolve_request


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="lsbctl")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--color",
    type=click.Choice(["auto", "always", "never"]),
    default=None,
    help="Colorize status lines.",
)
@click.option("--backend", default=None, help="Service manager backend plugin to use.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    color: str | None,
    backend: str | None,
) -> None:
    """lsbctl — LSB init-script commands over a service manager."""
    flags = {
        "verbose": verbose,
        "log_json": log_json,
        "color": color,
        "backend": backend,
    }
    settings = LsbSettings.from_cli(
        config_path=config_path,
        **{key: value for key, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def init_main(
    argv: Sequence[str] | None = None,
    *,
    prog_path: str | None = None,
) -> None:
    """Run as an init script named after the service it controls.

    Without arguments the request is the process-wide one derived from
    ``sys.argv``.  Passing *argv* and/or *prog_path* derives a fresh
    request instead.
    """
    try:
        settings = LsbSettings.from_cli()
        app = AppContext(settings)
        if argv is None and prog_path is None:
            request = resolve_request(init_dir=settings.init_dir)
        else:
            request = derive_request(
                sys.argv[0] if prog_path is None else prog_path,
                sys.argv[1:] if argv is None else argv,
                init_dir=settings.init_dir,
            )
        result = app.dispatcher.run(request)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    app.emit(result)
