from assets.annotator import LineAnnotator, add_line_numbers


def test_lines_are_numbered():
    assert add_line_numbers("a\nb") == "/* 1 */   a\n/* 2 */   b"


def test_numbers_are_padded_to_line_count_width():
    code = "\n".join(f"line{i}" for i in range(12))
    out = add_line_numbers(code).split("\n")
    assert out[0] == "/* 01 */   line0"
    assert out[11] == "/* 12 */   line11"


def test_lines_inside_comment_use_plus_prefix():
    code = "a\n/* start\nmid\nend */\nb"
    assert add_line_numbers(code).split("\n") == [
        "/* 1 */   a",
        "/* 2 */   /* start",
        "/+ 3 +/   mid",
        "/+ 4 +/   end */",
        "/* 5 */   b",
    ]


def test_conditional_compilation_gets_whitespace_only():
    code = "\n".join([
        "var x;",
        "/*@cc_on",
        "@if (@_win32)",
        "alert(1);",
        "@end",
        "@*/",
        "var y;",
    ])
    out = add_line_numbers(code).split("\n")

    assert out[0] == "/* 1 */   var x;"
    assert out[1] == "/* 2 */   /*@cc_on"
    for line, source in zip(out[2:6], ["@if (@_win32)", "alert(1);", "@end", "@*/"]):
        assert line == " " * 7 + "   " + source
        assert "/*" not in line[:10] and "/+" not in line[:10]
    assert out[6] == "/* 7 */   var y;"


def test_state_carries_across_calls_on_same_annotator():
    annotator = LineAnnotator()
    annotator.annotate("/* open")
    assert annotator.in_comment
    assert annotator.annotate("x") == "/+ 1 +/   x"


def test_trailing_newline_produces_numbered_empty_line():
    assert add_line_numbers("a\n") == "/* 1 */   a\n/* 2 */   "
