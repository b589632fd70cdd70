"""Delimiter scanning.

Tags are ``{{ ... }}`` or ``{{{ ... }}}``. A third opening brace selects
the triple form, which is then closed only by ``}}}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

OPEN = "{{"
TRIPLE_OPEN = "{{{"
CLOSE = "}}"
TRIPLE_CLOSE = "}}}"


@dataclass(frozen=True)
class TagSpan:
    """Location of one tag in the source.

    ``start`` is the offset of the opening delimiter and ``end`` the offset
    just past the closing one. An unterminated tag has ``closed=False`` and
    runs to the end of the source.
    """

    start: int
    end: int
    triple: bool
    raw: str
    closed: bool = True

    @property
    def token(self) -> str:
        return self.raw.strip()

    def source_text(self, source: str) -> str:
        """The tag exactly as written, delimiters included."""
        return source[self.start : self.end]


def scan_tag(source: str, index: int = 0) -> Optional[TagSpan]:
    """Find the next tag starting at or after ``index``.

    Returns None when no opening delimiter remains.
    """
    start = source.find(OPEN, index)
    if start == -1:
        return None

    triple = source.startswith(TRIPLE_OPEN, start)
    open_len = len(TRIPLE_OPEN) if triple else len(OPEN)
    close_seq = TRIPLE_CLOSE if triple else CLOSE

    search_start = start + open_len
    close = source.find(close_seq, search_start)
    if close == -1:
        return TagSpan(
            start=start,
            end=len(source),
            triple=triple,
            raw=source[search_start:],
            closed=False,
        )

    return TagSpan(
        start=start,
        end=close + len(close_seq),
        triple=triple,
        raw=source[search_start:close],
    )


def find_block_close(source: str, start: int, name: str) -> Optional[TagSpan]:
    """Find the closing tag ``/name`` at or after ``start``.

    Nesting depth is not tracked: the first ``{{/name}}`` wins even if
    another ``{{#name}}`` was opened in between.
    """
    close_tag = f"/{name}"
    index = start
    while True:
        span = scan_tag(source, index)
        if span is None or not span.closed:
            return None
        if span.token == close_tag:
            return span
        index = span.end
