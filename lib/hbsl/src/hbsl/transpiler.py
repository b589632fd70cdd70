"""Transpiler - single pass over the template.

Literal text is copied verbatim. Every tag is either passed through
(``{{!-- --}}`` comments), expanded (``{{#comment}}`` blocks) or classified
and rewritten, then re-wrapped as ``{{ body }}`` / ``{{{ body }}}``.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from hbsl.diagnostics import Diagnostic, Level
from hbsl.options import Options
from hbsl.rewriter import TranspileState, rewrite_tag
from hbsl.scanner import TagSpan, find_block_close, scan_tag
from hbsl.tags import classify

log = logging.getLogger(__name__)

LITERAL_COMMENT_PREFIX = "!--"
COMMENT_BLOCK = "comment"


class TranspileResult(NamedTuple):
    """Output text and diagnostics of one run; unpacks as a pair."""

    output: str
    diagnostics: List[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return any(d.level is Level.ERROR for d in self.diagnostics)


class Transpiler:
    """Converts one Handlebars template to Sline."""

    def __init__(self, source: str, options: Optional[Options] = None):
        self.source = source
        self.state = TranspileState(
            options=options if options is not None else Options()
        )
        self._out: List[str] = []
        self._index = 0

    def run(self) -> TranspileResult:
        source = self.source

        while True:
            span = scan_tag(source, self._index)
            if span is None:
                break

            self._out.append(source[self._index : span.start])

            if not span.closed:
                # Unterminated trailing tag is kept as plain text.
                log.debug("unterminated tag at offset %d, copying rest", span.start)
                self._out.append(source[span.start :])
                self._index = len(source)
                return self._result()

            token = span.token
            if token.startswith(LITERAL_COMMENT_PREFIX):
                self._out.append(span.source_text(source))
                self._index = span.end
            elif token.startswith(f"#{COMMENT_BLOCK}"):
                self._index = self._comment_block(span)
            else:
                body = rewrite_tag(classify(token), self.state)
                self._out.append(self._wrap(span, body))
                self._index = span.end

        self._out.append(source[self._index :])
        self._index = len(source)

        for context in self.state.stack.drain():
            log.debug("unclosed %s block at end of input", context.name)
            self.state.sink.error(f"Unclosed block: {context.name}")

        return self._result()

    def _comment_block(self, span: TagSpan) -> int:
        """Emit a ``{{#comment}}`` block as a literal comment; return the new index."""
        close = find_block_close(self.source, span.end, COMMENT_BLOCK)
        if close is None:
            self.state.sink.error("Unclosed {{#comment}} block")
            self._out.append(span.source_text(self.source))
            return span.end

        inner = self.source[span.end : close.start]
        log.debug("comment block %d..%d", span.start, close.end)
        self._out.append(f"{{{{!--{inner}--}}}}")
        return close.end

    @staticmethod
    def _wrap(span: TagSpan, body: str) -> str:
        if span.triple:
            return f"{{{{{{ {body} }}}}}}"
        return f"{{{{ {body} }}}}"

    def _result(self) -> TranspileResult:
        return TranspileResult("".join(self._out), self.state.sink.to_list())


def transpile(source: str, options: Optional[Options] = None) -> TranspileResult:
    """Transpile a Handlebars template to Sline.

    Args:
        source: Template text.
        options: Transpile options; defaults reject ``../`` access.

    Returns:
        ``(output, diagnostics)``. Diagnostics never stop the run.
    """
    return Transpiler(source, options).run()
