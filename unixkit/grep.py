"""Filter the lines of a file by a pattern, in the spirit of ``grep(1)``."""

from __future__ import annotations

import argparse
import io
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

__all__ = ["GrepOptions", "grep_lines", "read_lines", "parse_args", "main"]


@dataclass
class GrepOptions:
    """How lines are matched and printed.

    ``context`` overrides both ``before`` and ``after`` when it is positive.
    ``fixed`` compares the whole line with the pattern instead of searching.
    """

    after: int = 0
    before: int = 0
    context: int = 0
    count: bool = False
    ignore_case: bool = False
    invert: bool = False
    fixed: bool = False
    line_num: bool = False


def read_lines(path: str | Path) -> list[str]:
    """Read a file and split it on newlines, keeping a trailing empty line."""
    return Path(path).read_text(encoding="utf-8").split("\n")


def _matcher(pattern: str, options: GrepOptions) -> Callable[[str], bool]:
    if options.ignore_case:
        pattern = pattern.lower()

    def prepare(line: str) -> str:
        return line.lower() if options.ignore_case else line

    if options.fixed:
        return lambda line: prepare(line) == pattern
    regex = re.compile(pattern)
    return lambda line: regex.search(prepare(line)) is not None


def _write_range(out: io.StringIO, lines: list[str], start: int, end: int) -> None:
    # Neighbouring lines are taken from the second line on.
    for line in lines[max(start, 1):max(end + 1, 0)]:
        out.write(line + "\n")


def _render(lines: list[str], pattern: str, options: GrepOptions) -> str:
    out = io.StringIO()
    if not lines:
        return options.count and "0\n" or ""
    matches = _matcher(pattern, options)
    if options.context > 0:
        before = after = options.context
    else:
        before, after = options.before, options.after
    separated = before > 0 or after > 0
    printed_any = False
    count = 0
    last = len(lines) - 1

    for index, line in enumerate(lines):
        if matches(line) == options.invert:
            continue
        if options.line_num:
            out.write(f"{index + 1}:")
        if not options.count:
            if separated and printed_any:
                out.write("--\n")
            printed_any = True
            if before > 0:
                _write_range(out, lines, index - before, index - 1)
            if not (index == last and line == ""):
                out.write(line + "\n")
            if after > 0:
                _write_range(out, lines, index + 1, index + after)
        count += 1

    if options.count:
        out.write(f"{count}\n")
    return out.getvalue()


def grep_lines(
    lines: list[str], pattern: str, options: GrepOptions | None = None
) -> list[str]:
    """Return the output lines produced by filtering ``lines`` with ``pattern``.

    Raises ``re.error`` for an invalid regular expression.
    """
    text = _render(lines, pattern, options or GrepOptions())
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_args(argv: list[str] | None = None) -> tuple[GrepOptions, str, str]:
    """Parse command-line arguments into options, the pattern and the input path."""
    parser = argparse.ArgumentParser(prog="grep", description="Filter lines of a file.")
    parser.add_argument("-A", type=int, default=0, help="Print +N lines after match")
    parser.add_argument("-B", type=int, default=0, help="Print +N lines before match")
    parser.add_argument("-C", type=int, default=0, help="Print ±N lines around match")
    parser.add_argument("-c", action="store_true", help="Count number of lines")
    parser.add_argument("-i", action="store_true", help="Ignore case")
    parser.add_argument("-v", action="store_true", help="Invert match")
    parser.add_argument("-F", action="store_true", help="Compare whole lines literally")
    parser.add_argument("-n", action="store_true", help="Print line number")
    parser.add_argument("pattern")
    parser.add_argument("file")
    args = parser.parse_args(argv)
    options = GrepOptions(
        after=args.A,
        before=args.B,
        context=args.C,
        count=args.c,
        ignore_case=args.i,
        invert=args.v,
        fixed=args.F,
        line_num=args.n,
    )
    return options, args.pattern, args.file


def main(argv: list[str] | None = None) -> int:
    options, pattern, path = parse_args(argv)
    try:
        lines = read_lines(path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        text = _render(lines, pattern, options)
    except re.error as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())