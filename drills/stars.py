"""Star patterns drawn as lists of text lines."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 1:
        raise ValueError("pattern size must be at least 1")


def _centered(spaces: int, stars: int) -> str:
    return " " * spaces + "*" * stars


def triangle(n: int) -> list[str]:
    """Centered triangle growing from 1 star to 2n-1 stars."""
    _check(n)
    return [_centered(n - i, 2 * i - 1) for i in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Centered triangle shrinking from 2n-1 stars to 1 star."""
    _check(n)
    return [_centered(n - i, 2 * i - 1) for i in range(n, 0, -1)]


def diamond(n: int) -> list[str]:
    """Diamond of 2n-1 lines whose widest line has 2n-1 stars."""
    top = triangle(n)
    return top + top[-2::-1]


def butterfly(n: int) -> list[str]:
    """Two mirrored wings meeting in a full line of 2n stars."""
    _check(n)
    rows = [
        "*" * i + " " * (2 * (n - i)) + "*" * i for i in range(1, n + 1)
    ]
    return rows + rows[-2::-1]


def hourglass(n: int) -> list[str]:
    """Hourglass of 2n-1 lines, narrowing to a single star."""
    top = inverted_triangle(n)
    return top + top[-2::-1]


def right_arrow_aligned(n: int) -> list[str]:
    """Right-aligned arrow: star counts rise to n and fall back to 1."""
    _check(n)
    return [line.rjust(n) for line in right_arrow(n)]


def right_arrow(n: int) -> list[str]:
    """Left-aligned arrow: star counts rise to n and fall back to 1."""
    _check(n)
    rising = ["*" * i for i in range(1, n + 1)]
    return rising + rising[-2::-1]