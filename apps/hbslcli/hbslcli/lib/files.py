"""Reading templates and writing results."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from hbslcli.lib.errors import InputError, OutputError, UsageError

log = logging.getLogger(__name__)


def validate_input(input_path: Optional[Path], stdin: bool) -> None:
    """Check that exactly one input source was given."""
    if stdin and input_path is not None:
        raise UsageError("Use either --stdin or an input path, not both")
    if not stdin and input_path is None:
        raise UsageError("Provide an input path or use --stdin")
    if input_path is not None and input_path.is_dir():
        raise UsageError("Directory inputs are not supported yet")


def read_input(input_path: Optional[Path], stdin: bool) -> str:
    """Read the template without newline translation."""
    if stdin:
        log.info("Reading template from stdin")
        try:
            return sys.stdin.buffer.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(str(exc)) from exc

    assert input_path is not None
    log.info("Reading template from %s", input_path)
    try:
        return input_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(str(exc)) from exc


def write_output(output_path: Optional[Path], text: str) -> None:
    """Write ``text`` verbatim to ``output_path`` or stdout."""
    try:
        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            log.info("Wrote output to %s", output_path)
        else:
            sys.stdout.flush()
            sys.stdout.buffer.write(text.encode("utf-8"))
            sys.stdout.buffer.flush()
    except OSError as exc:
        raise OutputError(str(exc)) from exc
