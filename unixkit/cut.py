"""Select fields from lines read on standard input, in the spirit of ``cut(1)``."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_BAD_DELIMITERS = ("\n", "", "::")


@dataclass
class CutOptions:
    """Which fields to select and how lines are split."""

    fields: str
    delimiter: str = "\t"
    separated: bool = False


def parse_fields(spec: str) -> list[int]:
    """Return the integers of a comma-separated field list, skipping anything else."""
    return [int(part) for part in spec.split(",") if _INTEGER.fullmatch(part)]


def _select(fields: list[int], parts: list[str]) -> list[str]:
    selected: list[str] = []
    for field in fields:
        field = abs(field)
        if field == 0:
            raise ValueError("fields are numbered from 1")
        if field <= len(parts):
            selected.append(parts[field - 1])
        elif len(selected) < len(parts):
            selected.append("")
    return selected


def cut_line(line: str, fields: list[int], options: CutOptions) -> str | None:
    """Return the selected fields of ``line``, or ``None`` if the line is suppressed."""
    delimiter = options.delimiter
    has_delimiter = delimiter in line
    if options.separated and not has_delimiter:
        return None
    parts = line.split(delimiter) if has_delimiter else []
    selected = _select(fields, parts) or [line]
    return delimiter.join(selected)


def cut_lines(lines: Iterable[str], options: CutOptions) -> list[str]:
    """Cut every line of ``lines``; trailing line endings are ignored."""
    fields = parse_fields(options.fields)
    result = []
    for line in lines:
        text = line.removesuffix("\n").removesuffix("\r")
        cut = cut_line(text, fields, options)
        if cut is not None:
            result.append(cut)
    return result


def parse_args(argv: list[str] | None = None) -> CutOptions:
    """Parse command-line arguments; raise ``ValueError`` for missing fields or a bad delimiter."""
    parser = argparse.ArgumentParser(prog="cut", description="Cut fields from stdin.")
    parser.add_argument("-f", default="", help="choose column for cut")
    parser.add_argument("-d", default="\t", help="use another delimiter")
    parser.add_argument("-s", action="store_true", help="only strings with delimiter")
    args = parser.parse_args(argv)
    if args.f == "":
        raise ValueError("cut: option requires an argument -- f")
    if args.d in _BAD_DELIMITERS:
        raise ValueError("cut: bad delimiter")
    return CutOptions(fields=args.f, delimiter=args.d, separated=args.s)


def main(argv: list[str] | None = None) -> int:
    try:
        options = parse_args(argv)
        result = cut_lines(sys.stdin, options)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for line in result:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())