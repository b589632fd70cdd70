import typing

import pytest

from hbsl.diagnostics import Level
from hbsl.rewriter import _HANDLERS, TranspileState, rewrite_tag
from hbsl.tags import Tag, classify


def test_every_tag_variant_has_a_handler():
    assert set(typing.get_args(Tag)) == set(_HANDLERS)


def test_unknown_tag_type_raises():
    with pytest.raises(TypeError):
        rewrite_tag(object(), TranspileState())


def test_each_pushes_and_pops_context():
    state = TranspileState()
    assert rewrite_tag(classify("#each rows as |row|"), state) == "#for row in rows"
    assert state.stack.innermost_alias() == "row"
    assert rewrite_tag(classify("this.id"), state) == "row.id"
    assert rewrite_tag(classify("/each"), state) == "/for"
    assert len(state.stack) == 0
    assert len(state.sink) == 0


def test_unexpected_each_close():
    state = TranspileState()
    assert rewrite_tag(classify("/each"), state) == "/for"
    assert [(d.level, d.message) for d in state.sink] == [
        (Level.ERROR, "Unexpected closing tag /each")
    ]


def test_conditionals_pass_condition_through():
    state = TranspileState()
    assert rewrite_tag(classify("#unless this.done"), state) == "#if !(this.done)"
    assert rewrite_tag(classify("/unless"), state) == "/if"
    assert rewrite_tag(classify("#if ../flag"), state) == "#if ../flag"
    assert rewrite_tag(classify("/if"), state) == "/if"
    assert rewrite_tag(classify("else"), state) == "else"
    assert len(state.sink) == 0


def test_with_is_left_unchanged_with_warning():
    state = TranspileState()
    assert rewrite_tag(classify("#with author"), state) == "#with author"
    assert rewrite_tag(classify("/with"), state) == "/with"
    assert [d.message for d in state.sink] == [
        "Handlebars #with blocks are not converted",
        "Handlebars #with blocks are not converted",
    ]
