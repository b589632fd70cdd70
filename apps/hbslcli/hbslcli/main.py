"""sline-transpiler CLI Main Entry Point

Converts a Handlebars template to Sline.

Usage:
    sline-transpiler [OPTIONS] <input>
    sline-transpiler [OPTIONS] --stdin
    sline-transpiler -o out.sline page.hbs      # Write to file
    sline-transpiler --check page.hbs           # Exit 1 on errors
    sline-transpiler -V                         # Show version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from hbsl import transpile

from ._version import __version__
from .lib.config import resolve_config
from .lib.errors import HbslError, handle_error
from .lib.files import read_input, validate_input, write_output
from .lib.log import setup_logging
from .lib.report import report_diagnostics

log = logging.getLogger(__name__)

typer_app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@typer_app.command()
def cli(
    input_path: Optional[Path] = typer.Argument(
        None, metavar="INPUT", help="Handlebars template to convert."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write output to file (default: stdout)."
    ),
    stdin: bool = typer.Option(False, "--stdin", help="Read input from stdin."),
    allow_parent: bool = typer.Option(
        False, "--allow-parent", help="Strip ../ scope and emit warnings."
    ),
    check: bool = typer.Option(
        False, "--check", help="Exit with code 1 if errors are found."
    ),
    report_format: Optional[str] = typer.Option(
        None, "--format", help="Diagnostic format: text or json."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to hbsl.yaml config file."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress logs."),
    version: bool = typer.Option(
        False, "-V", "--version", help="Show version and exit."
    ),
) -> None:
    """Handlebars to Sline converter.

    \b
    Examples:
        sline-transpiler page.hbs                 Print converted page
        cat page.hbs | sline-transpiler --stdin   Convert stdin
        sline-transpiler -o page.sline page.hbs   Write to file
        sline-transpiler --check page.hbs         Fail on errors
    """
    if version:
        typer.echo(f"sline-transpiler {__version__}")
        raise typer.Exit()

    setup_logging(verbose)

    try:
        validate_input(input_path, stdin)
        config = resolve_config(
            config_path,
            allow_parent=allow_parent,
            check=check,
            report_format=report_format,
        )
        source = read_input(input_path, stdin)
        result = transpile(source, config.transpile_options())
        write_output(output, result.output)
    except HbslError as exc:
        handle_error(exc)

    report_diagnostics(result.diagnostics, config.format)

    if result.has_errors and config.check:
        log.info("Errors found and --check requested")
        raise typer.Exit(code=1)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    ``argv`` defaults to ``sys.argv[1:]``.
    """
    typer_app(args=argv, prog_name="sline-transpiler")


if __name__ == "__main__":
    app()
