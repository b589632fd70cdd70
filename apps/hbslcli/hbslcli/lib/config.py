"""Configuration for the CLI.

An optional ``hbsl.yaml`` (or ``.hbsl.yaml``) sets project defaults:

    allow_parent: true
    check: true
    format: json

Flags given on the command line take precedence over the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from hbsl import Options
from hbslcli.lib.errors import UsageError

log = logging.getLogger(__name__)

CONFIG_FILENAMES = ("hbsl.yaml", ".hbsl.yaml")


class CliConfig(BaseModel):
    """Resolved CLI settings."""

    model_config = {"extra": "forbid"}

    allow_parent: bool = Field(
        default=False, description="Strip ../ scope and emit warnings"
    )
    check: bool = Field(
        default=False, description="Exit with code 1 if errors are found"
    )
    format: Literal["text", "json"] = Field(
        default="text", description="Diagnostic report format"
    )

    def transpile_options(self) -> Options:
        return Options(allow_parent=self.allow_parent)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find a config file in ``start`` (default: cwd) or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        for filename in CONFIG_FILENAMES:
            candidate = parent / filename
            if candidate.is_file():
                return candidate
    return None


def _validate(data: dict[str, Any], source: str) -> CliConfig:
    try:
        return CliConfig.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise UsageError(f"Invalid configuration in {source}: {errors}") from exc


def load_config(path: Path) -> CliConfig:
    """Load a config file."""
    if not path.is_file():
        raise UsageError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise UsageError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise UsageError(f"Config file {path} must contain a mapping")

    return _validate(data, str(path))


def resolve_config(
    config_path: Optional[Path] = None,
    *,
    allow_parent: bool = False,
    check: bool = False,
    report_format: Optional[str] = None,
    search_from: Optional[Path] = None,
) -> CliConfig:
    """Merge the config file (explicit or discovered) with command-line flags."""
    path = config_path or find_config_file(search_from)
    if path is not None:
        log.info("Using config file %s", path)
        base = load_config(path)
    else:
        base = CliConfig()

    data = base.model_dump()
    if allow_parent:
        data["allow_parent"] = True
    if check:
        data["check"] = True
    if report_format is not None:
        data["format"] = report_format

    return _validate(data, "command-line options")
