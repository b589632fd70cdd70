"""Tag rewriter - maps each classified tag to its Sline form.

Handlers are registered per tag variant. Every handler receives the same
``TranspileState`` and returns the tag body without delimiters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict

from hbsl.context import BlockStack, EachContext
from hbsl.diagnostics import DiagnosticSink
from hbsl.expression import rewrite_expression
from hbsl.options import Options
from hbsl.tags import (
    EachClose,
    EachOpen,
    Else,
    Expression,
    IfClose,
    IfOpen,
    Tag,
    UnlessClose,
    UnlessOpen,
    WithTag,
)

log = logging.getLogger(__name__)

WITH_NOT_CONVERTED = "Handlebars #with blocks are not converted"


@dataclass
class TranspileState:
    """Mutable state of one transpile run."""

    options: Options = field(default_factory=Options)
    stack: BlockStack = field(default_factory=BlockStack)
    sink: DiagnosticSink = field(default_factory=DiagnosticSink)


def _each_open(tag: EachOpen, state: TranspileState) -> str:
    state.stack.push(EachContext(alias=tag.alias))
    log.debug("opened each block alias=%s depth=%d", tag.alias, len(state.stack))
    return f"#for {tag.alias} in {tag.expr}"


def _each_close(tag: EachClose, state: TranspileState) -> str:
    context = state.stack.pop()
    if not isinstance(context, EachContext):
        state.sink.error("Unexpected closing tag /each")
    else:
        log.debug("closed each block alias=%s", context.alias)
    return "/for"


def _unless_open(tag: UnlessOpen, state: TranspileState) -> str:
    return f"#if !({tag.condition})"


def _if_open(tag: IfOpen, state: TranspileState) -> str:
    return f"#if {tag.condition}"


def _if_close(tag: Tag, state: TranspileState) -> str:
    return "/if"


def _else(tag: Else, state: TranspileState) -> str:
    return "else"


def _with(tag: WithTag, state: TranspileState) -> str:
    state.sink.warning(WITH_NOT_CONVERTED)
    return tag.raw


def _expression(tag: Expression, state: TranspileState) -> str:
    return rewrite_expression(
        tag.text, state.stack.innermost_alias(), state.options, state.sink
    )


_HANDLERS: Dict[type, Callable[..., str]] = {
    EachOpen: _each_open,
    EachClose: _each_close,
    UnlessOpen: _unless_open,
    UnlessClose: _if_close,
    IfOpen: _if_open,
    IfClose: _if_close,
    Else: _else,
    WithTag: _with,
    Expression: _expression,
}


def rewrite_tag(tag: Tag, state: TranspileState) -> str:
    """Rewrite a classified tag, updating the block stack and diagnostics."""
    handler = _HANDLERS.get(type(tag))
    if handler is None:
        raise TypeError(f"No rewrite handler for tag type {type(tag).__name__}")
    return handler(tag, state)
