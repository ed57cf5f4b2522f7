import pytest

from okrapy.format import run_format
from okrapy.parser import ParserOptions
from okrapy.pipeline import parse_result


def test_run_format_canonicalizes_text() -> None:
    source = "b=   3.0\na:x\nlist/\n\t? Yes\n"

    result = run_format(source)

    assert result.formatted_text == "b= 3\na: x\nlist/\n\t? true\n"
    assert result.changed is True
    assert result.errors == []


def test_run_format_is_idempotent() -> None:
    first = run_format("a:x\nb=2.50\n")
    second = run_format(first.formatted_text)

    assert second.formatted_text == first.formatted_text
    assert second.changed is False


def test_run_format_keeps_text_with_errors() -> None:
    source = "a: 1\nbad\n"

    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False
    assert len(result.errors) == 1


def test_run_format_reuses_provided_parse_result() -> None:
    source = "a: 1\n"
    parsed = parse_result(source)

    result = run_format(source, parse=parsed)

    assert result.parse is parsed


def test_run_format_rejects_parse_with_options() -> None:
    source = "a: 1\n"

    with pytest.raises(ValueError, match="Pass either parse or options, not both"):
        run_format(source, ParserOptions(), parse=parse_result(source))


def test_run_format_rejects_parse_of_other_text() -> None:
    with pytest.raises(ValueError):
        run_format("a: 2\n", parse=parse_result("a: 1\n"))
