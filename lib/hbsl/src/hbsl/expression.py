"""Expression rewriting for bare ``{{expr}}`` tags."""

from __future__ import annotations

from typing import Optional, Tuple

from hbsl.diagnostics import DiagnosticSink
from hbsl.options import Options

PARENT_SEGMENT = "../"
THIS = "this"
THIS_PREFIX = "this."
CURRENT_PREFIX = "./"

PARENT_NOT_SUPPORTED = "Parent scope access (../) is not supported in Sline"
THIS_WITHOUT_EACH = "Found {{this}} without an each context"


def strip_parent_segments(token: str) -> Tuple[str, int]:
    """Remove every leading ``../`` segment and return ``(rest, count)``."""
    count = 0
    while token.startswith(PARENT_SEGMENT):
        token = token[len(PARENT_SEGMENT) :]
        count += 1
    return token, count


def rewrite_expression(
    token: str,
    alias: Optional[str],
    options: Options,
    sink: DiagnosticSink,
) -> str:
    """Rewrite an expression token for the target syntax.

    Args:
        token: Trimmed expression text, e.g. ``this.name`` or ``../title``.
        alias: Alias of the innermost ``#each`` scope, or None at top level.
        options: Controls whether ``../`` is stripped or rejected.
        sink: Receives warnings and errors.

    Returns:
        The rewritten expression. A rejected parent-scope access is
        returned as the original token.
    """
    content = token.strip()

    if content.startswith(PARENT_SEGMENT):
        if not options.allow_parent:
            sink.error(PARENT_NOT_SUPPORTED)
            return token
        content, count = strip_parent_segments(content)
        sink.warning(f"Stripped {count} parent scope segments (../)")

    if alias is not None:
        if content == THIS:
            return alias
        if content.startswith(THIS_PREFIX):
            return f"{alias}.{content[len(THIS_PREFIX):]}"
        if content.startswith(CURRENT_PREFIX):
            return f"{alias}.{content[len(CURRENT_PREFIX):]}"
        return content

    if content == THIS:
        sink.warning(THIS_WITHOUT_EACH)
        return content
    if content.startswith(THIS_PREFIX):
        return content[len(THIS_PREFIX) :]
    if content.startswith(CURRENT_PREFIX):
        return content[len(CURRENT_PREFIX) :]
    return content
