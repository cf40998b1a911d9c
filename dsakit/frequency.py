"""Count how often each value occurs in a sequence of integers."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Mapping

PROMPT = "enter the size of the array u want to yk..."


def count_occurrences(values: Iterable[Hashable]) -> dict:
    """Return a mapping of each distinct value to its count, ordered by value."""
    return dict(sorted(Counter(values).items()))


def format_counts(counts: Mapping) -> str:
    """Render counts in key order, one entry after another."""
    return "".join(f"{value}-> this many times{count}" for value, count in counts.items())


def _read_values(text: str) -> list[int]:
    tokens = text.split()
    if not tokens:
        raise ValueError("expected the number of values")
    size = int(tokens[0])
    if size < 0:
        raise ValueError("the number of values cannot be negative")
    values = [int(token) for token in tokens[1 : 1 + size]]
    if len(values) < size:
        raise ValueError(f"expected {size} values, got {len(values)}")
    return values


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from stdin and print their frequencies."""
    parser = argparse.ArgumentParser(
        prog="dsakit-frequency",
        description="Read N followed by N integers from standard input and count each value.",
    )
    parser.parse_args(argv)

    sys.stdout.write(PROMPT)
    sys.stdout.flush()
    try:
        values = _read_values(sys.stdin.read())
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_counts(count_occurrences(values)))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())