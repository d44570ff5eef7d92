"""Primitive run-length unpacking of strings such as ``a4bc2``."""

from __future__ import annotations

import re

_RUN = re.compile(r"(\D)(\d*)", re.DOTALL)


class UnpackError(ValueError):
    """Raised for a string that cannot be unpacked."""


def unpack(text: str) -> str:
    """Expand each character followed by a number into that many copies.

    ``"a4bc2d5e"`` becomes ``"aaaabccddddde"``. A count of zero keeps the
    character once. A string that starts with a digit is invalid.
    """
    if text and text[0].isdecimal():
        raise UnpackError(f"invalid string: cannot start with digit: {text[0]}")
    return "".join(
        char * max(int(count), 1) if count else char
        for char, count in _RUN.findall(text)
    )