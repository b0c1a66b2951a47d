"""Render fractional hours in all duration styles."""

from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.output import DurationResult
from mb_navformat.time_utils import (
    format_minutes_hours,
    format_minutes_hours_days,
    format_minutes_hours_days_long,
    format_minutes_hours_long,
)


def duration(
    ctx: typer.Context,
    hours: Annotated[float, typer.Argument(min=0, help="Duration in fractional hours, e.g. 1.5.")],
) -> None:
    """Render fractional hours as H:MM, H h MM m, D:HH:MM and D d HH h MM m."""
    app = use_context(ctx)
    app.out.print_duration(
        DurationResult(
            hours=hours,
            short=format_minutes_hours(hours),
            long=format_minutes_hours_long(hours),
            days=format_minutes_hours_days(hours),
            days_long=format_minutes_hours_days_long(hours),
        )
    )
