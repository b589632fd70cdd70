"""Tag grammar - one variant per recognized Handlebars tag shape.

``classify`` turns a trimmed tag token into exactly one of the variants
below. Checks run in priority order; block openers match on prefix, block
closers and ``else`` match exactly. Anything unrecognized is an
``Expression``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

DEFAULT_EACH_ALIAS = "item"
EACH_ALIAS_MARKER = " as |"


@dataclass(frozen=True)
class EachOpen:
    expr: str
    alias: str


@dataclass(frozen=True)
class EachClose:
    pass


@dataclass(frozen=True)
class UnlessOpen:
    condition: str


@dataclass(frozen=True)
class UnlessClose:
    pass


@dataclass(frozen=True)
class IfOpen:
    condition: str


@dataclass(frozen=True)
class IfClose:
    pass


@dataclass(frozen=True)
class Else:
    pass


@dataclass(frozen=True)
class WithTag:
    """``#with`` opener or ``/with`` closer, kept verbatim."""

    raw: str


@dataclass(frozen=True)
class Expression:
    text: str


Tag = Union[
    EachOpen,
    EachClose,
    UnlessOpen,
    UnlessClose,
    IfOpen,
    IfClose,
    Else,
    WithTag,
    Expression,
]


def parse_each(rest: str) -> Tuple[str, str]:
    """Split the text after ``#each`` into ``(expr, alias)``.

    ``items as |x|`` gives ``("items", "x")``. Without a usable block
    parameter the whole text is the expression and the alias is ``item``.
    """
    pos = rest.find(EACH_ALIAS_MARKER)
    if pos != -1:
        expr = rest[:pos].strip()
        after = rest[pos + len(EACH_ALIAS_MARKER) :]
        end = after.find("|")
        if end != -1:
            alias = after[:end].strip()
            if alias:
                return expr, alias

    return rest.strip(), DEFAULT_EACH_ALIAS


def classify(token: str) -> Tag:
    """Classify a trimmed tag token."""
    if token.startswith("#each"):
        expr, alias = parse_each(token[len("#each") :].strip())
        return EachOpen(expr=expr, alias=alias)

    if token == "/each":
        return EachClose()

    if token.startswith("#unless"):
        return UnlessOpen(condition=token[len("#unless") :].strip())

    if token == "/unless":
        return UnlessClose()

    if token.startswith("#if"):
        return IfOpen(condition=token[len("#if") :].strip())

    if token == "/if":
        return IfClose()

    if token == "else":
        return Else()

    if token.startswith("#with") or token == "/with":
        return WithTag(raw=token)

    return Expression(text=token)
