# bstmap

An ordered map built on a plain binary search tree. The tree is not
balanced. The ordering comes from a function you supply:
`lower_than(a, b)` returns true when `a` sorts before `b`. Two keys count as
equal when neither is lower than the other (`TreeMap.is_equal`).

The map keeps a cursor, `current`. `search`, `upper_bound`, `insert`,
`first` and `next` all move it, so you can find a key and then step forward
from there.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bstmap.treemap import TreeMap

tree = TreeMap(lambda a, b: a < b)
for word in ["saco", "cese", "case", "cosa"]:
    tree.insert(word, word.upper())

pair = tree.search("cosa")          # Pair with key "cosa", or None
print(pair.value)                   # COSA

pair = tree.upper_bound("cat")      # smallest key not lower than "cat"
print(pair.key)                     # cese

pair = tree.first()                 # smallest key; moves the cursor
while pair is not None:
    print(pair.key, pair.value)
    pair = tree.next()              # in-order successor of the cursor

for pair in tree:                   # the same walk, leaving the cursor alone
    print(pair.key)

tree.erase("cese")                  # no effect if the key is absent
```

Points to keep in mind:

- `insert` leaves an existing key alone. A repeated key does not replace
  its value.
- `search`, `upper_bound` and `first` return `None` when nothing matches.
  `next` returns `None` once the walk has passed the largest key.
- The entries are `Pair` objects with `key` and `value` attributes. The tree
  is made of `TreeNode` objects with `pair`, `left`, `right` and `parent`.
  You can reach them through `tree.root` and `tree.current`.
- `minimum(node)` from `bstmap.treemap` gives the leftmost node of a subtree,
  or `None` for `None`.
- `remove_node(node)` unlinks a given node. A node with two children takes
  the pair of its in-order successor, and the successor is removed instead.

## Commands

`bstmap-demo` inserts nine fixed four-letter words and prints them in
sorted order:

```
bstmap-demo
```

`bstmap-grade` runs a set of scored checks against a small fixed tree. It
prints `[OK]`, `[FAILED]` and `[ INFO ]` lines, a partial score for each
section, and `total_score: N/70` at the end:

```
bstmap-grade
```

You can pass a check number from 0 to 11. The command then runs only the
section that holds that check, plus the `minimum` check. It prints `SUCCESS`
and stops as soon as the numbered check passes. In this mode it prints no
total score.

```
bstmap-grade 4
```

## Limitations

The tree does no rebalancing, so keys inserted in sorted order make a
linear chain. The map lives in memory only. There is no persistence and no
thread safety.