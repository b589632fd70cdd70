"""Transpile options."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Options(BaseModel):
    """Options for a single transpile run."""

    model_config = {"frozen": True, "extra": "forbid"}

    allow_parent: bool = Field(
        default=False,
        description="Strip leading ../ segments with a warning instead of rejecting them",
    )
