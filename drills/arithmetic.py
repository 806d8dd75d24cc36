"""Small arithmetic exercises: division, counting and simple sums."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

_COMMA_PAIR = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


def share_candies(candies: int, brothers: int) -> tuple[int, int]:
    """Split candies evenly among brothers; return (each, left for dad)."""
    if brothers <= 0:
        raise ValueError("number of brothers must be positive")
    return divmod(candies, brothers)


def polyhedron_faces(vertices: int, edges: int) -> int:
    """Number of faces of a convex polyhedron, by Euler's formula."""
    return 2 + edges - vertices


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.factorial(n)


def sum_comma_pair(text: str) -> int:
    """Add the two integers of a line such as ``"3,4"``."""
    match = _COMMA_PAIR.match(text)
    if match is None:
        raise ValueError(f"expected two comma-separated integers, got {text!r}")
    return int(match.group(1)) + int(match.group(2))


def check_digit(digits: Iterable[int]) -> int:
    """Sum of the squares of the digits, modulo 10."""
    return sum(d * d for d in digits) % 10


def gcd_lcm(a: int, b: int) -> tuple[int, int]:
    """Greatest common divisor and least common multiple of two naturals."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be natural")
    g = math.gcd(a, b)
    return g, a * b // g


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("index must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def domino_pips(n: int) -> int:
    """Total number of pips in a domino set whose largest tile is double-n."""
    if n < 0:
        raise ValueError("set size must be non-negative")
    return sum(i + j for i in range(n + 1) for j in range(i, n + 1))


def total(values: Iterable[int]) -> int:
    """Sum of the given values."""
    return sum(values)


def dice_report(rolls: Iterable[tuple[int, int]]) -> list[str]:
    """One ``Case x: sum`` line for each pair of dice throws."""
    return [f"Case {case}: {first + second}" for case, (first, second) in enumerate(rolls, 1)]


def car_price(base: int, options: Iterable[tuple[int, int]]) -> int:
    """Price of a car with the given (quantity, unit price) options."""
    return base + sum(quantity * price for quantity, price in options)


def leftover_apples(schools: Iterable[tuple[int, int]]) -> int:
    """Apples left over after sharing each school's apples among its students."""
    leftover = 0
    for students, apples in schools:
        if students <= 0:
            raise ValueError("each school needs at least one student")
        leftover += apples % students
    return leftover


def plug_capacity(strips: Iterable[int]) -> int:
    """Computers that chained power strips can supply from a single socket."""
    sockets = list(strips)
    if not sockets:
        raise ValueError("at least one power strip is required")
    return sum(sockets) - (len(sockets) - 1)


def reversed_max(a: int | str, b: int | str) -> int:
    """The larger of two numbers when each is read backwards."""
    return max(int(str(a).strip()[::-1]), int(str(b).strip()[::-1]))