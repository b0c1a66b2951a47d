"""Check user-entered coordinates."""

from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.coords import CoordinateStyle
from mb_navformat.formatter import check_coordinates
from mb_navformat.output import CoordinatesResult


def coords(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Coordinates, e.g. 'N48 07.2 E11 34.4'.")],
    style: Annotated[CoordinateStyle | None, typer.Option("--style", help="Canonical rendering. Default from config.")] = None,
) -> None:
    """Check coordinates and show them in canonical form."""
    app = use_context(ctx)
    check = check_coordinates(text, style or app.cfg.coordinate_style)
    if not check.valid:
        app.out.print_error_and_exit("INVALID_COORDINATES", check.plain_message)
    app.out.print_coordinates(CoordinatesResult(text=text, valid=check.valid, message=check.message))
