"""Capitalize a navigation name."""

from typing import Annotated

import typer

from mb_navformat.app_context import use_context
from mb_navformat.formatter import cap_nav_string
from mb_navformat.output import NavNameResult


def navname(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Navaid, airport or airspace name.")],
) -> None:
    """Capitalize a navaid, airport or airspace name, keeping abbreviations like VOR and NDB."""
    app = use_context(ctx)
    app.out.print_nav_name(NavNameResult(text=text, capitalized=cap_nav_string(text)))
