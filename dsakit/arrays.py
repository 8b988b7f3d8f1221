"""Small array and string routines: searching, sparse matrices, polynomials."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import zip_longest
from typing import Any


def append_arrays(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return a new list holding the items of ``first`` followed by ``second``."""
    return [*first, *second]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in ascending ``items``, or None."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None


def find_pattern(text: str, pattern: str) -> int | None:
    """Return the position of the first occurrence of ``pattern`` in ``text``, or None."""
    position = text.find(pattern)
    return None if position < 0 else position


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Return the strings in ascending lexicographic order."""
    return sorted(strings)


def to_triplets(matrix: Iterable[Iterable[int]]) -> list[tuple[int, int, int]]:
    """Return the (row, column, value) triplets of the non-zero entries, row-major."""
    return [
        (row, column, value)
        for row, values in enumerate(matrix)
        for column, value in enumerate(values)
        if value != 0
    ]


def format_matrix(matrix: Iterable[Iterable[int]]) -> str:
    """Render a matrix as nested braces, one row per line."""
    rows = "".join(
        "{" + "".join(f"{value}," for value in values) + "},\n" for values in matrix
    )
    return "{\n" + rows + "}"


def add_polynomials(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two polynomials given as coefficient lists indexed by power."""
    return [a + b for a, b in zip_longest(first, second, fillvalue=0)]


def format_polynomial(coefficients: Sequence[int]) -> str:
    """Render coefficients (indexed by power) as an equation, highest power first."""
    terms = [
        f"{coefficient}x^{power}"
        for power, coefficient in reversed(list(enumerate(coefficients)))
        if power > 0 and coefficient != 0
    ]
    constant = coefficients[0] if coefficients else 0
    if constant != 0 or not terms:
        terms.append(str(constant))
    return " + ".join(terms) + " = 0"