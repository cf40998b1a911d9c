"""Decide whether two words are anagrams of each other."""

from __future__ import annotations

import argparse
import sys


def is_anagram(s: str, t: str) -> bool:
    """Return True when t is a rearrangement of the characters of s."""
    if len(s) != len(t):
        return False
    return sorted(s) == sorted(t)


def main(argv: list[str] | None = None) -> int:
    """Read two words from stdin and report whether they are anagrams."""
    parser = argparse.ArgumentParser(
        prog="dsakit-anagram",
        description="Read two whitespace-separated words from standard input.",
    )
    parser.parse_args(argv)

    words = sys.stdin.read().split()
    first, second = (words + ["", ""])[:2]
    print("Anagram" if is_anagram(first, second) else "Not an Anagram")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())