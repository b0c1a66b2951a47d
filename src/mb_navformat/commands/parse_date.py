"""Recover a timestamp from date-time text."""

from datetime import UTC, datetime
from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.date_parse import read_date_time
from mb_navformat.output import ParseDateResult


def parse_date(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Date-time text, e.g. '1/15/2020 3:04 PM'.")],
) -> None:
    """Read date-time text written in the system or English locale style."""
    app = use_context(ctx)

    time_t = read_date_time(text)
    if time_t is None:
        app.out.print_error_and_exit("INVALID_DATE", f"Cannot read date and time: {text}")

    iso = datetime.fromtimestamp(time_t, tz=UTC).isoformat()
    app.out.print_parsed_date(ParseDateResult(text=text, time_t=time_t, iso=iso))
