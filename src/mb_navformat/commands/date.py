"""Render a POSIX timestamp as short and long date."""

from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.formatter import format_date, format_date_long
from mb_navformat.output import DateResult


def date(
    ctx: typer.Context,
    time_t: Annotated[int, typer.Argument(help="Seconds since the POSIX epoch (UTC).")],
) -> None:
    """Render a POSIX timestamp in the short and long date-time style of the display locale."""
    app = use_context(ctx)
    if time_t <= 0:
        app.out.print_error_and_exit("INVALID_DATE", format_date(time_t))
    app.out.print_date(DateResult(time_t=time_t, short=format_date(time_t), long=format_date_long(time_t)))
