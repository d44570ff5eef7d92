"""Find sets of anagrams in a word list."""

from __future__ import annotations

import sys
from collections import defaultdict
from itertools import groupby

_SAMPLE = [
    "пЯтак", "пяТка", "тяпкА", "листоК", "сЛиток", "столИк",
    "Кот", "пятка", "тОк", "оКт", "АбобА",
]


def sort_word(word: str) -> str:
    """Return the letters of ``word`` in ascending order."""
    return "".join(sorted(word))


def delete_duplicates(words: list[str]) -> list[str]:
    """Drop adjacent repeats from an already sorted list."""
    return [word for word, _ in groupby(words)]


def find_anagrams(words: list[str]) -> dict[str, list[str]]:
    """Group lower-cased words into anagram sets.

    Each set is sorted and free of repeats and is keyed by its first word;
    groups made of a single occurrence are left out.
    """
    groups: dict[str, list[str]] = defaultdict(list)
    for word in words:
        lower = word.lower()
        groups[sort_word(lower)].append(lower)

    result: dict[str, list[str]] = {}
    for members in groups.values():
        if len(members) > 1:
            members.sort()
            result[members[0]] = delete_duplicates(members)
    return result


def main(argv: list[str] | None = None) -> int:
    words = list(argv) if argv else _SAMPLE
    for key, members in sorted(find_anagrams(words).items()):
        print(f"{key}: {' '.join(members)}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))