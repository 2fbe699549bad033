"""Selection sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Any


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, sorted by selection."""
    result = list(items)
    for boundary in range(len(result) - 1):
        smallest = min(range(boundary, len(result)), key=result.__getitem__)
        if smallest != boundary:
            result[boundary], result[smallest] = result[smallest], result[boundary]
    return result


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers, then print them sorted."""
    parser = argparse.ArgumentParser(description="Sort integers with selection sort.")
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        print("Enter number of elements: ", end="", flush=True)
        if not tokens:
            raise EOFError
        count = int(tokens[0])
        if count < 0:
            raise ValueError(f"number of elements must not be negative: {count}")
        print(f"Enter {count} elements:")
        values = tokens[1 : 1 + count]
        if len(values) < count:
            raise EOFError
        numbers = [int(token) for token in values]
    except EOFError:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Sorted array:")
    print(" ".join(str(n) for n in selection_sort(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())