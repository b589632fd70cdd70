"""Diagnostics collected while transpiling a template.

Diagnostics never abort a run. They are appended in the order they are
encountered and handed back to the caller together with the output text.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator, List

import msgspec

log = logging.getLogger(__name__)


class Level(str, enum.Enum):
    """Severity of a diagnostic."""

    WARNING = "warning"
    ERROR = "error"


class Diagnostic(msgspec.Struct, frozen=True):
    """A single leveled message."""

    level: Level
    message: str

    def render(self) -> str:
        return f"{self.level.value}: {self.message}"


class DiagnosticSink:
    """Ordered, append-only collection of diagnostics."""

    def __init__(self) -> None:
        self._items: List[Diagnostic] = []

    def add(self, level: Level, message: str) -> Diagnostic:
        diagnostic = Diagnostic(level=level, message=message)
        self._items.append(diagnostic)
        log.debug("diagnostic recorded: %s", diagnostic.render())
        return diagnostic

    def warning(self, message: str) -> Diagnostic:
        return self.add(Level.WARNING, message)

    def error(self, message: str) -> Diagnostic:
        return self.add(Level.ERROR, message)

    def to_list(self) -> List[Diagnostic]:
        return list(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def encode_json(diagnostics: Iterable[Diagnostic]) -> bytes:
    """Serialize diagnostics to a JSON array of ``{level, message}`` objects."""
    return msgspec.json.encode(list(diagnostics))
