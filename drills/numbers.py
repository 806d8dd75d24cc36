"""Exercises on divisors, primes, digits and remainders."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

_YUT = {0: "D", 1: "C", 2: "B", 3: "A", 4: "E"}


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def _sum_and_min(values: list[int]) -> tuple[int, int] | None:
    if not values:
        return None
    return sum(values), min(values)


def perfect_squares(low: int, high: int) -> tuple[int, int] | None:
    """Sum and smallest of the perfect squares in [low, high], or None."""
    start = max(1, math.isqrt(max(low, 1) - 1) + 1)
    squares = [i * i for i in range(start, math.isqrt(max(high, 0)) + 1) if low <= i * i]
    return _sum_and_min(squares)


def count_primes(values: Iterable[int]) -> int:
    """Number of primes among the values."""
    return sum(1 for value in values if _is_prime(value))


def yut_result(sticks: Sequence[int]) -> str:
    """Letter for a throw of four yut sticks (1 = flat side up)."""
    if len(sticks) != 4 or any(stick not in (0, 1) for stick in sticks):
        raise ValueError("a throw is four sticks, each 0 or 1")
    return _YUT[sum(sticks)]


def kth_divisor(n: int, k: int) -> int:
    """The k-th smallest divisor of n, or 0 if n has fewer than k divisors."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be natural numbers")
    divisors = [d for d in range(1, n + 1) if n % d == 0]
    return divisors[k - 1] if k <= len(divisors) else 0


def odd_summary(values: Iterable[int]) -> tuple[int, int] | None:
    """Sum and smallest of the odd values, or None if there are none."""
    return _sum_and_min([value for value in values if value % 2])


def digit_counts(a: int, b: int, c: int) -> list[int]:
    """How often each digit 0-9 appears in the product a * b * c."""
    counts = Counter(str(abs(a * b * c)))
    return [counts[str(digit)] for digit in range(10)]


def prime_summary(low: int, high: int) -> tuple[int, int] | None:
    """Sum and smallest of the primes in [low, high], or None."""
    return _sum_and_min([n for n in range(low, high + 1) if _is_prime(n)])


def distinct_remainders(values: Iterable[int]) -> int:
    """Number of distinct remainders modulo 42."""
    return len({value % 42 for value in values})