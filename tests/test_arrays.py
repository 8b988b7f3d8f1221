from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import (
    add_polynomials,
    append_arrays,
    binary_search,
    find_pattern,
    format_matrix,
    format_polynomial,
    reverse_string,
    sort_strings,
    to_triplets,
)

ints = st.integers(min_value=-100, max_value=100)


@given(first=st.lists(ints), second=st.lists(ints))
def test_append_arrays(first, second):
    result = append_arrays(first, second)
    assert len(result) == len(first) + len(second)
    assert result[: len(first)] == first
    assert result[len(first):] == second


@given(values=st.sets(ints))
def test_binary_search_finds_every_element(values):
    items = sorted(values)
    for value in items:
        index = binary_search(items, value)
        assert items[index] == value


@given(values=st.sets(ints), target=ints)
def test_binary_search_missing(values, target):
    items = sorted(values - {target})
    assert binary_search(items, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


@given(prefix=st.text(max_size=10), pattern=st.text(min_size=1, max_size=5), suffix=st.text(max_size=10))
def test_find_pattern_locates_first(prefix, pattern, suffix):
    text = prefix + pattern + suffix
    position = find_pattern(text, pattern)
    assert text[position:position + len(pattern)] == pattern
    assert pattern not in text[: position + len(pattern) - 1]


def test_find_pattern_not_found():
    assert find_pattern("data structures", "queue") is None


@given(text=st.text())
def test_reverse_string_round_trip(text):
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert len(reversed_text) == len(text)


def test_reverse_string_ends_swap():
    result = reverse_string("stack")
    assert result[0] == "k"
    assert result[-1] == "s"


@given(strings=st.lists(st.text(max_size=8), max_size=20))
def test_sort_strings(strings):
    result = sort_strings(strings)
    assert Counter(result) == Counter(strings)
    assert all(a <= b for a, b in zip(result, result[1:]))


matrices = st.integers(min_value=1, max_value=5).flatmap(
    lambda width: st.lists(st.lists(st.integers(-5, 5), min_size=width, max_size=width), max_size=5)
)


@given(matrix=matrices)
def test_triplets_rebuild_matrix(matrix):
    triplets = to_triplets(matrix)
    rebuilt = [[0] * len(row) for row in matrix]
    for row, column, value in triplets:
        rebuilt[row][column] = value
    assert rebuilt == matrix
    assert len(triplets) == sum(1 for row in matrix for value in row if value != 0)
    assert triplets == sorted(triplets, key=lambda t: (t[0], t[1]))


def test_triplets_all_zero():
    assert to_triplets([[0] * 5 for _ in range(4)]) == []


def test_format_matrix():
    assert format_matrix([[1, 0], [0, 2]]) == "{\n{1,0,},\n{0,2,},\n}"


@given(first=st.lists(ints, max_size=10), second=st.lists(ints, max_size=10))
def test_add_polynomials(first, second):
    total = add_polynomials(first, second)
    assert len(total) == max(len(first), len(second))
    assert total == add_polynomials(second, first)
    assert add_polynomials(total, [-c for c in second]) == first + [0] * (len(total) - len(first))


@given(poly=st.lists(ints, max_size=10))
def test_add_zero_polynomial(poly):
    assert add_polynomials(poly, []) == poly


def test_format_polynomial():
    assert format_polynomial([5, 0, 3]) == "3x^2 + 5 = 0"


def test_format_polynomial_all_zero():
    assert format_polynomial([0, 0, 0]) == "0 = 0"


@given(poly=st.lists(ints, max_size=8))
def test_format_polynomial_ends_with_equation(poly):
    rendered = format_polynomial(poly)
    assert rendered.endswith(" = 0")
    nonzero_powers = sum(1 for power, c in enumerate(poly) if power > 0 and c != 0)
    assert rendered.count("x^") == nonzero_powers