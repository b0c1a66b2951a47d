"""CLI entry point for mb-navformat."""

import os
from importlib.metadata import version
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from mb_navformat.app_context import AppContext
from mb_navformat.commands.coords import coords
from mb_navformat.commands.date import date
from mb_navformat.commands.duration import duration
from mb_navformat.commands.formats import formats
from mb_navformat.commands.navname import navname
from mb_navformat.commands.number import number
from mb_navformat.commands.parse_date import parse_date
from mb_navformat.config import Config
from mb_navformat.date_parse import init_date_time_formats
from mb_navformat.i18n import install_translations
from mb_navformat.locale_service import get_display_locale, set_display_locale
from mb_navformat.log import setup_logging
from mb_navformat.output import Output

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(version("mb-navformat"))
        raise typer.Exit


@app.callback()
def main(
    ctx: typer.Context,
    *,
    version: Annotated[
        bool | None, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit.")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    config_path: Annotated[Path | None, typer.Option("--config", help="Configuration file (TOML).")] = None,
    display_locale: Annotated[str | None, typer.Option("--locale", help="Locale for rendering, e.g. de_DE.")] = None,
    system_locale: Annotated[
        str | None, typer.Option("--system-locale", help="Locale whose date styles parse-date reads. Default: environment.")
    ] = None,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Write a rotating log file.")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log debug messages to stderr.")] = False,
) -> None:
    """Localized formatting of durations, dates, numbers and coordinates for flight planning."""
    _ = version
    out = Output(json_mode=json_output)
    setup_logging(log_file, debug=debug)

    if config_path is None and (env_path := os.environ.get("MB_NAVFORMAT_CONFIG")):
        config_path = Path(env_path)
    try:
        cfg = Config.build(config_path, display_locale=display_locale)
    except ValidationError as e:
        out.print_error_and_exit("INVALID_CONFIG", f"Invalid configuration: {e.errors()[0]['msg']}")

    set_display_locale(cfg.display_locale)
    if cfg.translations_dir is not None:
        install_translations(cfg.translations_dir, str(get_display_locale()))
    try:
        init_date_time_formats(system_locale)
    except ValueError as e:
        out.print_error_and_exit("INVALID_LOCALE", str(e))

    ctx.obj = AppContext(out=out, cfg=cfg)


app.command()(duration)
app.command()(number)
app.command()(date)
app.command(name="parse-date")(parse_date)
app.command()(coords)
app.command()(navname)
app.command()(formats)
