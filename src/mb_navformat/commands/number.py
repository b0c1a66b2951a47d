"""Render a number with unit and precision."""

from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.formatter import format_double_unit, format_float_unit
from mb_navformat.output import NumberResult


def number(
    ctx: typer.Context,
    value: Annotated[float, typer.Argument(help="Value to render.")],
    unit: Annotated[str, typer.Option("--unit", "-u", help="Unit label appended after a space.")] = "",
    precision: Annotated[int, typer.Option("--precision", "-p", min=0, help="Number of fractional digits.")] = 0,
    single: Annotated[bool, typer.Option("--single", help="Treat the value as a 32-bit float measurement.")] = False,
) -> None:
    """Render a number with locale grouping, fixed precision and an optional unit."""
    app = use_context(ctx)
    render = format_float_unit if single else format_double_unit
    app.out.print_number(NumberResult(value=value, unit=unit, precision=precision, text=render(value, unit, precision)))
