"""Command line front end that reads test cases from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from .arithmetic import dice_report, share_candies, sum_comma_pair


def _parse_count(token: str) -> int:
    try:
        count = int(token)
    except ValueError:
        raise ValueError(f"invalid number of test cases: {token!r}") from None
    if count < 0:
        raise ValueError("number of test cases must not be negative")
    return count


def _int_pairs(text: str) -> Iterator[tuple[int, int]]:
    """Yield the pairs that follow a leading case count in whitespace-separated text."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing number of test cases")
    count = _parse_count(tokens[0])
    numbers = tokens[1:]
    if len(numbers) < 2 * count:
        raise ValueError(f"expected {count} pairs of numbers")
    try:
        values = [int(token) for token in numbers[: 2 * count]]
    except ValueError as exc:
        raise ValueError(f"invalid number in input: {exc}") from None
    yield from zip(values[0::2], values[1::2])


def _candy(stream: TextIO) -> list[str]:
    lines = []
    for candies, brothers in _int_pairs(stream.read()):
        each, dad = share_candies(candies, brothers)
        lines.append(f"You get {each} piece(s) and your dad gets {dad} piece(s).")
    return lines


def _comma(stream: TextIO) -> list[str]:
    lines = [line for line in stream.read().splitlines() if line.strip()]
    if not lines:
        raise ValueError("missing number of test cases")
    count = _parse_count(lines[0].strip())
    cases = lines[1 : count + 1]
    if len(cases) < count:
        raise ValueError(f"expected {count} lines of comma-separated pairs")
    return [str(sum_comma_pair(line)) for line in cases]


def _dice(stream: TextIO) -> list[str]:
    return dice_report(_int_pairs(stream.read()))


_COMMANDS: dict[str, tuple[Callable[[TextIO], list[str]], str]] = {
    "candy": (_candy, "share candies among brothers, the rest going to dad"),
    "comma": (_comma, "add pairs of integers written as 'a,b'"),
    "dice": (_dice, "report the sum of two dice for each case"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drills",
        description="Solve a batch of test cases read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command on standard input and print one result per case."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        lines = handler(sys.stdin)
    except ValueError as exc:
        print(f"drills: error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())