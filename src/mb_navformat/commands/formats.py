"""Show the date-time pattern catalogue."""

import typer

from mb_navformat.app_context import use_context
from mb_navformat.date_parse import current_catalogue
from mb_navformat.output import FormatsResult


def formats(ctx: typer.Context) -> None:
    """List the date-time patterns tried by parse-date, in order."""
    app = use_context(ctx)
    catalogue = current_catalogue()
    if catalogue is None:
        app.out.print_formats(FormatsResult(locale="", patterns=[]))
        return
    app.out.print_formats(FormatsResult(locale=str(catalogue.locale), patterns=list(catalogue.patterns)))
