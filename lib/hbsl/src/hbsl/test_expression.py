from hbsl.diagnostics import DiagnosticSink, Level
from hbsl.expression import rewrite_expression, strip_parent_segments
from hbsl.options import Options


def _rewrite(token, alias=None, allow_parent=False):
    sink = DiagnosticSink()
    result = rewrite_expression(token, alias, Options(allow_parent=allow_parent), sink)
    return result, sink.to_list()


def test_strip_parent_segments_counts():
    assert strip_parent_segments("../../a.b") == ("a.b", 2)
    assert strip_parent_segments("a/../b") == ("a/../b", 0)


def test_plain_field_unchanged():
    assert _rewrite("user.name") == ("user.name", [])
    assert _rewrite("user.name", alias="x") == ("user.name", [])


def test_this_inside_each_becomes_alias():
    assert _rewrite("this", alias="post") == ("post", [])
    assert _rewrite("this.title", alias="post") == ("post.title", [])
    assert _rewrite("./title", alias="post") == ("post.title", [])


def test_this_outside_each_warns():
    result, diags = _rewrite("this")
    assert result == "this"
    assert len(diags) == 1
    assert diags[0].level is Level.WARNING
    assert diags[0].message == "Found {{this}} without an each context"


def test_this_prefix_outside_each_is_stripped():
    assert _rewrite("this.title") == ("title", [])
    assert _rewrite("./title") == ("title", [])


def test_parent_rejected_by_default():
    result, diags = _rewrite("../title")
    assert result == "../title"
    assert [(d.level, d.message) for d in diags] == [
        (Level.ERROR, "Parent scope access (../) is not supported in Sline")
    ]


def test_parent_rejected_does_not_resolve_alias():
    result, _ = _rewrite("../this", alias="x")
    assert result == "../this"


def test_parent_stripped_when_allowed():
    result, diags = _rewrite("../../title", allow_parent=True)
    assert result == "title"
    assert [(d.level, d.message) for d in diags] == [
        (Level.WARNING, "Stripped 2 parent scope segments (../)")
    ]


def test_single_parent_segment_message_keeps_plural_wording():
    _, diags = _rewrite("../title", allow_parent=True)
    assert diags[0].message == "Stripped 1 parent scope segments (../)"


def test_stripped_parent_continues_with_alias_rules():
    result, diags = _rewrite("../this", alias="row", allow_parent=True)
    assert result == "row"
    assert len(diags) == 1

    result, diags = _rewrite("../this", allow_parent=True)
    assert result == "this"
    assert [d.level for d in diags] == [Level.WARNING, Level.WARNING]
