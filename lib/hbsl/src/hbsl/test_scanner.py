from hbsl.scanner import find_block_close, scan_tag


def test_scan_tag_none_without_delimiters():
    assert scan_tag("plain text") is None
    assert scan_tag("a { b } c") is None


def test_scan_double_tag():
    span = scan_tag("Hi {{ name }}!")
    assert span is not None
    assert (span.start, span.end) == (3, 13)
    assert not span.triple
    assert span.raw == " name "
    assert span.token == "name"
    assert span.source_text("Hi {{ name }}!") == "{{ name }}"


def test_scan_triple_tag_needs_triple_close():
    source = "{{{ body }} still }}}"
    span = scan_tag(source)
    assert span.triple
    assert span.token == "body }} still"
    assert span.end == len(source)


def test_scan_tag_respects_start_index():
    source = "{{a}} {{b}}"
    first = scan_tag(source)
    second = scan_tag(source, first.end)
    assert first.token == "a"
    assert second.token == "b"
    assert scan_tag(source, second.end) is None


def test_scan_unterminated_tag():
    source = "x {{oops"
    span = scan_tag(source)
    assert not span.closed
    assert span.start == 2
    assert span.end == len(source)


def test_find_block_close():
    source = "{{#comment}} note {{x}} {{ /comment }} after"
    close = find_block_close(source, len("{{#comment}}"), "comment")
    assert close is not None
    assert source[close.start : close.end] == "{{ /comment }}"


def test_find_block_close_not_found():
    assert find_block_close("{{#comment}} never closed", 12, "comment") is None


def test_find_block_close_swallowed_by_enclosing_tag():
    source = "{{#comment}} {{broken {{/comment}}"
    # "{{broken {{/comment}}" is one tag whose token is "broken {{/comment"
    assert find_block_close(source, 12, "comment") is None


def test_find_block_close_stops_at_unterminated_tag():
    assert find_block_close("{{#comment}} {{oops", 12, "comment") is None


def test_find_block_close_ignores_nesting():
    source = "{{#comment}}a{{#comment}}b{{/comment}}c{{/comment}}"
    close = find_block_close(source, 12, "comment")
    assert close.start == source.index("{{/comment}}")
