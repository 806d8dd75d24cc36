import pytest

from drills.stars import (
    butterfly,
    diamond,
    hourglass,
    inverted_triangle,
    right_arrow,
    right_arrow_aligned,
    triangle,
)

SIZES = [1, 2, 3, 5, 10]


def test_smallest_triangle():
    assert triangle(1) == ["*"]


@pytest.mark.parametrize("n", SIZES)
def test_triangle_shape(n):
    lines = triangle(n)
    assert len(lines) == n
    assert [line.count("*") for line in lines] == [2 * i - 1 for i in range(1, n + 1)]
    assert all(len(line.lstrip()) == line.count("*") for line in lines)
    assert lines[-1] == "*" * (2 * n - 1)


@pytest.mark.parametrize("n", SIZES)
def test_inverted_triangle_is_reversed_triangle(n):
    assert inverted_triangle(n) == triangle(n)[::-1]


@pytest.mark.parametrize("n", SIZES)
def test_diamond_is_triangle_and_mirror(n):
    lines = diamond(n)
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert lines[: n] == triangle(n)


@pytest.mark.parametrize("n", SIZES)
def test_hourglass_shape(n):
    lines = hourglass(n)
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert lines[: n] == inverted_triangle(n)
    assert lines[n - 1].strip() == "*"


@pytest.mark.parametrize("n", SIZES)
def test_butterfly_shape(n):
    lines = butterfly(n)
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert all(len(line) == 2 * n for line in lines)
    assert all(line == line[::-1] for line in lines)
    assert lines[n - 1] == "*" * (2 * n)


@pytest.mark.parametrize("n", SIZES)
def test_right_arrow_counts(n):
    lines = right_arrow(n)
    counts = [len(line) for line in lines]
    assert counts == list(range(1, n + 1)) + list(range(n - 1, 0, -1))
    assert all(set(line) == {"*"} for line in lines)


@pytest.mark.parametrize("n", SIZES)
def test_right_arrow_aligned_matches_left_version(n):
    aligned = right_arrow_aligned(n)
    assert all(len(line) == n for line in aligned)
    assert [line.lstrip() for line in aligned] == right_arrow(n)


def test_triangle_rejects_non_positive_size():
    with pytest.raises(ValueError):
        triangle(0)


def test_inverted_triangle_rejects_non_positive_size():
    with pytest.raises(ValueError):
        inverted_triangle(0)


def test_diamond_rejects_non_positive_size():
    with pytest.raises(ValueError):
        diamond(0)


def test_butterfly_rejects_non_positive_size():
    with pytest.raises(ValueError):
        butterfly(0)


def test_hourglass_rejects_non_positive_size():
    with pytest.raises(ValueError):
        hourglass(0)


def test_right_arrow_aligned_rejects_non_positive_size():
    with pytest.raises(ValueError):
        right_arrow_aligned(0)


def test_right_arrow_rejects_non_positive_size():
    with pytest.raises(ValueError):
        right_arrow(0)