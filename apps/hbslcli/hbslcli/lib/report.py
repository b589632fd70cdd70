"""Rendering diagnostics on stderr."""

from __future__ import annotations

from typing import Sequence

import typer

from hbsl import Diagnostic, Level, encode_json

_COLORS = {
    Level.WARNING: typer.colors.YELLOW,
    Level.ERROR: typer.colors.RED,
}


def report_diagnostics(diagnostics: Sequence[Diagnostic], fmt: str = "text") -> None:
    """Print diagnostics in emission order.

    ``text`` prints one ``warning: ...`` / ``error: ...`` line each, ``json``
    prints a single JSON array.
    """
    if fmt == "json":
        typer.echo(encode_json(diagnostics).decode("utf-8"), err=True)
        return

    for diagnostic in diagnostics:
        typer.secho(diagnostic.render(), err=True, fg=_COLORS[diagnostic.level])
