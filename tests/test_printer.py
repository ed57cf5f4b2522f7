import pytest

from okrapy.lexer import scan
from okrapy.parser import parse_ast
from okrapy.printer import (
    AnsiRenderer,
    HtmlRenderer,
    PlainRenderer,
    Printer,
    format_error_excerpt,
    highlight_html,
)

from tests._shared_cases import ERROR_CASES, VALID_CASES


@pytest.mark.parametrize("case", VALID_CASES + ERROR_CASES, ids=lambda case: case.name)
def test_plain_renderer_reproduces_source(case) -> None:
    assert Printer(case.source).print() == case.source
    assert Printer(case.source, scan(case.source)).with_renderer(PlainRenderer()).print() == case.source


def test_html_renderer_classifies_text_by_delimiter() -> None:
    html = Printer("s: <b>\nn= 3\nb? yes\n").with_renderer(HtmlRenderer()).print()

    assert '<span class="okra-key">s</span>' in html
    assert '<span class="okra-delimiter">:</span>' in html
    assert '<span class="okra-string">&lt;b&gt;</span>' in html
    assert '<span class="okra-number">3</span>' in html
    assert '<span class="okra-boolean">yes</span>' in html


def test_html_renderer_marks_comments() -> None:
    html = Printer("# note\na: 1\n").with_renderer(HtmlRenderer()).print()

    assert '<span class="okra-comment"># note</span>' in html


def test_highlight_html_wraps_in_pre() -> None:
    html = highlight_html("a: 1\n")

    assert html.startswith('<pre class="okra"><code>')
    assert html.endswith("</code></pre>")


def test_ansi_renderer_colours_keys() -> None:
    output = Printer("a: x\n").with_renderer(AnsiRenderer()).print()

    assert "\x1b[1;34ma\x1b[0m" in output
    assert "\x1b[32mx\x1b[0m" in output


def test_error_tokens_render_with_error_hook() -> None:
    source = "b? nope\n"
    document = parse_ast(source)

    html = Printer(source).with_renderer(HtmlRenderer()).with_errors(*document.errors).print()

    assert '<span class="okra-error">nope</span>' in html


def test_line_hooks_run_once_per_line() -> None:
    class LineRenderer(PlainRenderer):
        def before_line(self, line: int) -> str:
            return f"[{line}]"

    output = Printer("a: 1\nb: 2\n").with_renderer(LineRenderer()).print()

    assert output == "[1]a: 1\n[2]b: 2\n"


def test_error_excerpt_shows_surrounding_lines() -> None:
    source = "a: 1\nbad\nc: 3\n"
    error = parse_ast(source).errors[0]

    assert format_error_excerpt(error, source) == "\n".join(
        [
            '2:4 - error - unexpected line break; expected delimiter after key (":", "=", "?", or "/")',
            "1 | a: 1",
            "2 | bad",
            "  | " + " " * 3 + "^",
            "3 | c: 3",
        ]
    )


def test_error_excerpt_underlines_whole_token_and_expands_tabs() -> None:
    source = "a/\n\tn= 12abc\n"
    error = parse_ast(source).errors[0]

    excerpt = format_error_excerpt(error, source)

    assert excerpt.splitlines()[2:4] == [
        "2 | " + " " * 4 + "n= 12abc",
        "  | " + " " * 7 + "^~~~~",
    ]


def test_error_excerpt_includes_hint() -> None:
    source = "a: 1\n\t\tb: 2\n"
    error = parse_ast(source).errors[0]

    excerpt = format_error_excerpt(error, source)

    assert "  | ^" + "~" * 7 in excerpt
    assert excerpt.splitlines()[-1].startswith("hint: ")


def test_error_excerpt_at_end_of_input() -> None:
    source = "a: 1\nkey"
    error = parse_ast(source).errors[0]

    excerpt = format_error_excerpt(error, source)

    assert excerpt.splitlines()[0].startswith("2:4 - error - unexpected end of input")
    assert excerpt.splitlines()[-1] == "  | " + " " * 3 + "^"


def test_error_excerpt_can_colour_output() -> None:
    source = "b? nope\n"
    error = parse_ast(source).errors[0]

    excerpt = format_error_excerpt(error, source, color=True)

    assert excerpt.startswith("\x1b[3;31m1:4 - error - ")
