import json

import msgspec
import pytest

from hbsl.diagnostics import Diagnostic, DiagnosticSink, Level, encode_json


def test_sink_keeps_encounter_order_and_duplicates():
    sink = DiagnosticSink()
    sink.warning("a")
    sink.error("b")
    sink.warning("a")
    assert [(d.level, d.message) for d in sink] == [
        (Level.WARNING, "a"),
        (Level.ERROR, "b"),
        (Level.WARNING, "a"),
    ]
    assert len(sink) == 3


def test_diagnostic_is_immutable():
    diag = Diagnostic(level=Level.ERROR, message="x")
    with pytest.raises(AttributeError):
        diag.message = "y"


def test_render():
    assert Diagnostic(Level.WARNING, "careful").render() == "warning: careful"
    assert Diagnostic(Level.ERROR, "broken").render() == "error: broken"


def test_encode_json():
    data = json.loads(encode_json([Diagnostic(Level.ERROR, "Unclosed block: each")]))
    assert data == [{"level": "error", "message": "Unclosed block: each"}]


def test_json_decodes_back_to_diagnostics():
    raw = encode_json([Diagnostic(Level.WARNING, "w")])
    decoded = msgspec.json.decode(raw, type=list[Diagnostic])
    assert decoded == [Diagnostic(Level.WARNING, "w")]
