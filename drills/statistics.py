"""Score keeping and simple statistics over short lists of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Smallest and largest of the given values."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return min(items), max(items)


def semester_summary(courses: Iterable[tuple[int, float]]) -> tuple[int, float]:
    """Total credits and credit-weighted grade average for one semester."""
    credits_total = 0
    weighted = 0.0
    for credits, grade in courses:
        credits_total += credits
        weighted += credits * grade
    if credits_total <= 0:
        raise ValueError("a semester needs a positive number of credits")
    return credits_total, weighted / credits_total


def adjusted_average(scores: Iterable[float]) -> float:
    """Average after rescaling every score so that the best one becomes 100."""
    items = [float(score) for score in scores]
    if not items:
        raise ValueError("at least one score is required")
    best = max(items)
    if best <= 0:
        raise ValueError("at least one score must be positive")
    return sum(score / best * 100 for score in items) / len(items)


def peak_passengers(stops: Iterable[tuple[int, int]]) -> int:
    """Largest number of people on board, given (got off, got on) per stop."""
    on_board = 0
    peak: int | None = None
    for got_off, got_on in stops:
        on_board += got_on - got_off
        if peak is None or on_board > peak:
            peak = on_board
    if peak is None:
        raise ValueError("at least one stop is required")
    return peak


def max_with_position(values: Iterable[int]) -> tuple[int, int]:
    """Largest value and its 1-based position; ties resolve to the last one."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    best = max(items)
    position = len(items) - items[::-1].index(best)
    return best, position


def cooking_winner(scores: Iterable[Iterable[int]]) -> tuple[int, int]:
    """1-based number of the contestant with the highest total, and that total."""
    totals = [sum(row) for row in scores]
    return max_with_position(totals)


def judge_total(scores: Sequence[int]) -> int | None:
    """Total of five judges' scores without the highest and lowest.

    Returns None when the remaining scores are too far apart and the
    result has to be renegotiated.
    """
    if len(scores) != 5:
        raise ValueError("exactly five scores are required")
    high = max(scores)
    low = min(scores)
    second_high = max((s for s in scores if s != high), default=0)
    second_low = min((s for s in scores if s != low), default=11)
    if second_high - second_low >= 4:
        return None
    return sum(scores) - high - low


def streak_score(results: Iterable[int]) -> int:
    """Score where each correct answer is worth the length of its current streak."""
    streak = 0
    score = 0
    for result in results:
        if result == 0:
            streak = 0
        elif result == 1:
            streak += 1
            score += streak
    return score


def count_violations(day: int, cars: Iterable[int]) -> int:
    """Number of cars whose last plate digit matches the day's digit."""
    return sum(1 for car in cars if car == day)


def count_value(values: Iterable[int], target: int) -> int:
    """How many times target occurs among the values."""
    return sum(1 for value in values if value == target)


def less_than(values: Iterable[int], limit: int) -> list[int]:
    """The values smaller than limit, in their original order."""
    return [value for value in values if value < limit]