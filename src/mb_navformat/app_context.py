"""Shared state handed from the CLI callback to commands."""

from dataclasses import dataclass

import typer

from mb_navformat.config import Config
from mb_navformat.output import Output


@dataclass(frozen=True, slots=True)
class AppContext:
    """Per-invocation CLI state."""

    out: Output
    cfg: Config


def use_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored by the CLI callback."""
    obj = ctx.find_root().obj
    if not isinstance(obj, AppContext):
        raise TypeError("CLI context is not initialized")
    return obj
