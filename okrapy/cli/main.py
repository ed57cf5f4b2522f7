"""`okra` command-line interface."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
import json
from pathlib import Path
import sys

from tqdm import tqdm

from okrapy.format import run_format
from okrapy.lexer import LexerOptions, scan, token_text
from okrapy.pipeline import OkraParseResult, parse_result
from okrapy.printer import AnsiRenderer, Printer, format_error_excerpt, highlight_html


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return args.handler(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="okra", description="Parse, format and inspect Okra files.")
    subcommands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subcommands.add_parser("parse", help="Print each file's value as JSON.")
    parse_cmd.add_argument("files", nargs="+", type=Path)
    _add_common_flags(parse_cmd)
    parse_cmd.set_defaults(handler=_run_parse)

    fmt_cmd = subcommands.add_parser("fmt", help="Rewrite files in canonical form.")
    fmt_cmd.add_argument("files", nargs="+", type=Path)
    fmt_cmd.add_argument("--write", action="store_true", help="Write the formatted text back to each file.")
    fmt_cmd.add_argument("--check", action="store_true", help="Exit with 1 if any file is not formatted.")
    _add_common_flags(fmt_cmd)
    fmt_cmd.set_defaults(handler=_run_fmt)

    tokens_cmd = subcommands.add_parser("tokens", help="Dump the token stream of a file.")
    tokens_cmd.add_argument("file", type=Path)
    tokens_cmd.set_defaults(handler=_run_tokens)

    highlight_cmd = subcommands.add_parser("highlight", help="Print a syntax-highlighted file.")
    highlight_cmd.add_argument("file", type=Path)
    highlight_cmd.add_argument("--html", action="store_true", help="Emit HTML instead of ANSI colours.")
    highlight_cmd.set_defaults(handler=_run_highlight)

    return parser


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--progress", action="store_true", help="Show a progress bar over the files.")
    parser.add_argument("--no-color", action="store_true", help="Print errors without ANSI colours.")


def _run_parse(args: argparse.Namespace) -> int:
    exit_code = 0
    for path in _iter_files(args.files, args.progress, "parse"):
        result = _load(path, color=not args.no_color)
        if result is None:
            exit_code = 1
            continue
        print(json.dumps(result.value(), indent=2, ensure_ascii=False))
    return exit_code


def _run_fmt(args: argparse.Namespace) -> int:
    exit_code = 0
    for path in _iter_files(args.files, args.progress, "fmt"):
        result = _load(path, color=not args.no_color)
        if result is None:
            exit_code = 1
            continue

        formatted = run_format(result.source_text, parse=result)
        if args.check:
            if formatted.changed:
                print(f"{path}: would reformat", file=sys.stderr)
                exit_code = 1
        elif args.write:
            if formatted.changed:
                path.write_text(formatted.formatted_text, encoding="utf-8")
        else:
            sys.stdout.write(formatted.formatted_text)
    return exit_code


def _run_tokens(args: argparse.Namespace) -> int:
    source = _read(args.file)
    if source is None:
        return 1
    for i, token in enumerate(scan(source, LexerOptions(keep_comments=True))):
        text = token_text(source, token)
        print(f"{i:03d} {token.kind.name:<9} {str(token.location):<7} value={token.value!r} text={text!r}")
    return 0


def _run_highlight(args: argparse.Namespace) -> int:
    source = _read(args.file)
    if source is None:
        return 1
    if args.html:
        print(highlight_html(source))
    else:
        sys.stdout.write(Printer(source).with_renderer(AnsiRenderer()).print())
    return 0


def _iter_files(files: list[Path], progress: bool, label: str) -> Iterable[Path]:
    if progress and len(files) > 1:
        return tqdm(files, desc=label, unit="file")
    return files


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"{path}: cannot read file: {exc}", file=sys.stderr)
        return None


def _load(path: Path, *, color: bool) -> OkraParseResult | None:
    source = _read(path)
    if source is None:
        return None

    result = parse_result(source)
    if not result.has_errors:
        return result

    for error in result.errors:
        print(f"{path}:{format_error_excerpt(error, source, color=color)}", file=sys.stderr)
        print(file=sys.stderr)
    return None
