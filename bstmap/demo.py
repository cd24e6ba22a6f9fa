"""Small example: store words in a tree map and print them in order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bstmap.treemap import TreeMap

WORDS = ("saco", "cese", "case", "cosa", "casa", "cesa", "cose", "seco", "saca")


def lower_than_string(key1: str, key2: str) -> bool:
    """Order strings lexicographically."""
    return key1 < key2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert the sample words and print their values in key order."""
    tree = TreeMap(lower_than_string)
    for word in WORDS:
        tree.insert(word, word)

    pair = tree.first()
    while pair is not None:
        print(pair.value)
        pair = tree.next()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())