"""Sort the lines of a file, in the spirit of ``sort(1)``."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal
from itertools import groupby

_DECIMAL_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


@dataclass
class SortOptions:
    """How lines are sorted.

    ``column`` is one-based; zero means whole lines are compared.
    """

    column: int = 0
    numeric: bool = False
    reverse: bool = False
    unique: bool = False


def _parse_number(text: str) -> float | None:
    """Return the value of ``text`` if it is a well-formed, in-range float."""
    if _DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
        if math.isinf(value) and "inf" not in text.lower():
            return None  # out of range
        return value
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            return None
    return None


def _format_number(value: float) -> str:
    """Format ``value`` in the shortest plain decimal form, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _number_key(value: float) -> tuple[bool, float]:
    # NaN goes before every other value.
    return (not math.isnan(value), 0.0 if math.isnan(value) else value)


def read_lines(path: str) -> list[str]:
    """Read a file and split it on newlines, keeping a trailing empty piece."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read().split("\n")


def remove_last_empty_line(lines: list[str]) -> list[str]:
    """Return ``lines`` without a final empty line, if there is one."""
    if lines and lines[-1] == "":
        return lines[:-1]
    return list(lines)


def extract_numeric_strings(lines: list[str]) -> tuple[list[str], list[float]]:
    """Split ``lines`` into the non-numeric lines and the values of the numeric ones."""
    texts: list[str] = []
    numbers: list[float] = []
    for line in lines:
        value = _parse_number(line)
        if value is None:
            texts.append(line)
        else:
            numbers.append(value)
    return texts, numbers


def delete_duplicates(lines: list[str]) -> list[str]:
    """Drop adjacent repeated lines from an already sorted list."""
    return [line for line, _ in groupby(lines)]


def _column_sort(lines: list[str], index: int) -> list[str]:
    def key(line: str) -> tuple[int, str, str]:
        columns = line.split(" ")
        if index < len(columns):
            return (1, columns[index], line)
        return (0, "", line)

    return sorted(lines, key=key)


def _numeric_sort(lines: list[str]) -> list[str]:
    texts, numbers = extract_numeric_strings(lines)
    numbers.sort(key=_number_key)
    return sorted(texts) + [_format_number(number) for number in numbers]


def sort_lines(lines: list[str], options: SortOptions | None = None) -> list[str]:
    """Return ``lines`` sorted according to ``options``.

    The options are applied one after another: column, numeric, unique,
    reverse. With none of them set the lines are sorted plainly.
    """
    options = options or SortOptions()
    result = remove_last_empty_line(lines)
    if options.column > 0:
        result = _column_sort(result, options.column - 1)
    if options.numeric:
        result = _numeric_sort(result)
    if options.unique:
        result = delete_duplicates(sorted(result))
    if options.reverse:
        result = sorted(result, reverse=True)
    if (
        options.column == 0
        and not options.numeric
        and not options.unique
        and not options.reverse
    ):
        result = sorted(result)
    return result


def parse_args(argv: list[str] | None = None) -> tuple[SortOptions, str]:
    """Parse command-line arguments into sort options and the input path."""
    parser = argparse.ArgumentParser(prog="sort", description="Sort lines of a file.")
    parser.add_argument("-k", type=int, default=0, help="Column for sort.")
    parser.add_argument("-n", action="store_true", help="Sort by numeric value.")
    parser.add_argument("-r", action="store_true", help="Reverse sort.")
    parser.add_argument("-u", action="store_true", help="Without duplicate string.")
    parser.add_argument("file")
    args = parser.parse_args(argv)
    options = SortOptions(column=args.k, numeric=args.n, reverse=args.r, unique=args.u)
    return options, args.file


def main(argv: list[str] | None = None) -> int:
    options, path = parse_args(argv)
    try:
        lines = read_lines(path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    for line in sort_lines(lines, options):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())