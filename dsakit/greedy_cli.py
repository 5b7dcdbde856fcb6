"""Command line front end for greedy activity selection, knapsack and set cover."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from .greedy import activity_selection, fractional_knapsack, greedy_set_cover


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _pairs(tokens: Iterator[str], count: int) -> list[tuple[int, int]]:
    return [(_next_int(tokens), _next_int(tokens)) for _ in range(count)]


def _activities(tokens: Iterator[str]) -> list[str]:
    count = _next_int(tokens)
    return [str(len(activity_selection(_pairs(tokens, count))))]


def _knapsack(tokens: Iterator[str]) -> list[str]:
    count = _next_int(tokens)
    items = _pairs(tokens, count)
    capacity = _next_int(tokens)
    return [f"{fractional_knapsack(items, capacity):.2f}"]


def _set_cover(tokens: Iterator[str]) -> list[str]:
    universe_size = _next_int(tokens)
    set_count = _next_int(tokens)
    sets = []
    for _ in range(set_count):
        size = _next_int(tokens)
        sets.append([_next_int(tokens) for _ in range(size)])
    chosen = greedy_set_cover(universe_size, sets)
    return [str(len(chosen)), " ".join(map(str, chosen))]


_COMMANDS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "activities": _activities,
    "knapsack": _knapsack,
    "set-cover": _set_cover,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem from standard input, solve it and print the answer."""
    parser = argparse.ArgumentParser(
        prog="dsakit-greedy",
        description="Solve a greedy problem read as whitespace-separated integers.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "activities", help="n, then n 'start finish' pairs; prints the count chosen"
    )
    commands.add_parser(
        "knapsack",
        help="n, then n 'weight value' pairs, then the capacity; prints the value",
    )
    commands.add_parser(
        "set-cover",
        help="universe size, set count, then each set as 'k x1 .. xk'; "
        "prints the count and the chosen indices",
    )
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        lines = _COMMANDS[args.command](tokens)
    except ValueError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())