import json
from pathlib import Path

import pytest

from okrapy.cli import main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "ok.okra", "name: demo\nports/\n\t= 80\n")

    assert main(["parse", str(path)]) == 0

    assert json.loads(capsys.readouterr().out) == {"name": "demo", "ports": [80]}


def test_parse_reports_every_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "bad.okra", "a: 1\nbad\nc? maybe\n")

    assert main(["parse", "--no-color", str(path)]) == 1

    err = capsys.readouterr().err
    assert f"{path}:2:4 - error - unexpected line break" in err
    assert f"{path}:3:4 - error - " in err
    assert "2 | bad" in err


def test_parse_fails_on_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    good = _write(tmp_path, "ok.okra", "a: 1\n")

    assert main(["parse", str(tmp_path / "missing.okra"), str(good)]) == 1

    captured = capsys.readouterr()
    assert "cannot read file" in captured.err
    assert json.loads(captured.out) == {"a": "1"}


def test_parse_with_progress_bar(tmp_path: Path) -> None:
    first = _write(tmp_path, "a.okra", "a: 1\n")
    second = _write(tmp_path, "b.okra", "b: 2\n")

    assert main(["parse", "--progress", str(first), str(second)]) == 0


def test_fmt_prints_canonical_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "a.okra", "a:x\nn=  2.0\n")

    assert main(["fmt", str(path)]) == 0

    assert capsys.readouterr().out == "a: x\nn= 2\n"


def test_fmt_check_flags_unformatted_files(tmp_path: Path) -> None:
    messy = _write(tmp_path, "messy.okra", "a:x\n")
    clean = _write(tmp_path, "clean.okra", "a: x\n")

    assert main(["fmt", "--check", str(messy)]) == 1
    assert main(["fmt", "--check", str(clean)]) == 0


def test_fmt_write_rewrites_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "a.okra", "a:x\n")

    assert main(["fmt", "--write", str(path)]) == 0

    assert path.read_text(encoding="utf-8") == "a: x\n"


def test_tokens_dumps_each_token(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "a.okra", "a: 1\n")

    assert main(["tokens", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0].startswith("000 INDENT")
    assert lines[-1].startswith("005 EOF")


def test_highlight_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "a.okra", "a: 1\n")

    assert main(["highlight", "--html", str(path)]) == 0

    assert '<span class="okra-key">a</span>' in capsys.readouterr().out


def test_highlight_missing_file(tmp_path: Path) -> None:
    assert main(["highlight", str(tmp_path / "missing.okra")]) == 1


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])
