"""Scored checks for the tree map, run against a small fixed tree.

Each check prints ``[OK]`` lines as its conditions hold and raises
:class:`CheckFailed` at the first condition that does not.  ``main``
runs the checks in sections and reports partial and total scores.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, Optional

from bstmap.treemap import Pair, TreeMap, TreeNode, minimum


@dataclass
class Palabra:
    """A word with a numeric identifier, stored as the value in the tree."""

    id: int
    word: str


class CheckFailed(Exception):
    """Raised when a grading check does not hold."""


class _Success(Exception):
    """Raised to stop the run once the selected check has passed."""


Check = Callable[[], None]
Stage = tuple[list[Check], int, int]


def _ok(msg: str) -> None:
    print(f"   [OK] {msg}")


def _err(msg: str) -> None:
    print(f"   [FAILED] {msg}")


def _info(msg: str) -> None:
    print(f"   [ INFO ] {msg}")


def _node(palabra: Palabra, parent: Optional[TreeNode] = None) -> TreeNode:
    return TreeNode(Pair(palabra.id, palabra), parent=parent)


def _value_id(pair: Optional[Pair]) -> Optional[int]:
    return None if pair is None else pair.value.id


def _key(node: Optional[TreeNode]) -> Any:
    return None if node is None else node.pair.key


def lower_than_int(key1: int, key2: int) -> bool:
    """Order integers numerically."""
    return key1 < key2


def initialize_tree() -> TreeMap:
    """Build the fixed four-node tree the checks run against."""
    _info("inicializando el arbol...")
    tree = TreeMap(lower_than_int)
    root = _node(Palabra(5239, "auto"))
    tree.root = root
    root.right = _node(Palabra(8213, "rayo"), root)
    root.right.left = _node(Palabra(6980, "hoja"), root.right)
    root.left = _node(Palabra(1273, "reto"), root)
    return tree


def create_test1() -> None:
    """A new map is empty and keeps its comparison function."""
    tree = TreeMap(lower_than_int)
    if tree is None:
        raise CheckFailed("createTreeMap debe retornar el mapa")
    _ok("createTreeMap retorna un objeto")

    if tree.root is not None:
        raise CheckFailed("root debe ser NULL")
    _ok("root==NULL")

    if tree.lower_than is not lower_than_int or not tree.lower_than(10, 15):
        raise CheckFailed("la funcion lower_than no fue guardada de forma correcta")
    _ok("Funcion de comparcion inicializada correctamente")


def search_test1(tree: TreeMap) -> None:
    """The key at the root is found and becomes current."""
    if _value_id(tree.search(5239)) != 5239:
        raise CheckFailed("no encuentra dato con clave 5239")
    _ok("encuentra dato con clave 5239")

    if tree.current is not tree.root:
        raise CheckFailed("no actualiza current (5329)")
    _ok("current actualizado correctamente")


def search_test2(tree: TreeMap) -> None:
    """The key at root.right is found and becomes current."""
    if _value_id(tree.search(8213)) != 8213:
        raise CheckFailed("no encuentra dato con clave 8213")
    _ok("encuentra dato con clave 8213")

    if tree.current is not tree.root.right:
        raise CheckFailed("no actualiza current correctamente (8213)")
    _ok("current actualizado correctamente")


def search_test3(tree: TreeMap) -> None:
    """The key at root.right.left is found and becomes current."""
    key = 6980
    if _value_id(tree.search(key)) != key:
        raise CheckFailed("no encuentra dato con clave 6980")
    _ok(f"encuentra dato con clave {key}")

    if tree.current is not tree.root.right.left:
        raise CheckFailed("no actualiza current correctamente")
    _ok("current actualizado correctamente")


def search_test4(tree: TreeMap) -> None:
    """Searching a missing key gives None."""
    key = 7010
    if tree.search(key) is not None:
        raise CheckFailed("retorna dato y clave no existe (7010)\n")
    _ok(f"retorna NULL: search(key={key})")


def insert_test1(tree: TreeMap) -> None:
    """Inserting an existing key leaves the tree unchanged."""
    palabra = Palabra(1273, "repetido")
    tree.insert(palabra.id, palabra)
    node = tree.root.left
    if node.left is not None or node.right is not None:
        raise CheckFailed("se inserta dato repetido")
    _ok("no inserta dato repetido")


def insert_test2() -> None:
    """A new smallest key lands at root.left.left with links and cursor set."""
    tree = initialize_tree()
    palabra = Palabra(900, "maicol")
    _info("insertando dato con clave 900")
    tree.insert(palabra.id, palabra)

    node = tree.root.left.left
    if node is None or node.pair.value is not palabra:
        raise CheckFailed("dato insertado no se encuentra en root->left->left")
    _ok("dato insertado correctamente")

    if node.pair.key != palabra.id:
        raise CheckFailed("clave de dato no se guarda correctamente")

    if node.parent is not tree.root.left:
        raise CheckFailed("no se inicializa el padre del nuevo nodo")

    if tree.current is not node:
        raise CheckFailed("no se actualiza el current")
    _ok("current actualizado correctamente")


def minimum_test() -> None:
    """``minimum`` finds the leftmost node, also after a new one is added."""
    tree = initialize_tree()
    node = minimum(tree.root)
    if node is None:
        raise CheckFailed("minimum(root) retorna NULL")
    if node.pair.key != 1273:
        raise CheckFailed(
            f"minimum retorna nodo con clave {node.pair.key} (deberia retornar 1273)"
        )
    _ok("minimum retorna el nodo con clave 1273")

    if minimum(tree.root.left) is None:
        raise CheckFailed("minimum(root->left) retorn NULL (debería retornar 1273)")

    _info("agregando nodo con clave 100")
    tree.root.left.left = _node(Palabra(100, "first_word"), tree.root.left)

    node = minimum(tree.root)
    if _key(node) != 100:
        raise CheckFailed(
            f"minimum retorna nodo con clave {_key(node)} (deberia retornar 100)"
        )
    _ok("minimum retorna el nodo con clave 100")


def erase_test1() -> None:
    """Erasing a leaf unlinks it from its parent."""
    tree = initialize_tree()
    _info("eliminando dato con clave 1273 (nodo sin hijos)")
    tree.erase(1273)
    if tree.root.left is not None:
        raise CheckFailed(
            "el dato no se elimino correctamente: tree->root->left != NULL"
        )
    _ok("dato eliminado correctamente")


def erase_test2() -> None:
    """Erasing a node with one child lifts the child into its place."""
    tree = initialize_tree()
    _info("eliminando dato con clave 8213 (nodo con un hijo)")
    tree.erase(8213)

    if _key(tree.root.right) != 6980:
        raise CheckFailed("el dato no se elimino correctamente root->right!=6980")

    if tree.root.right.parent is not tree.root:
        raise CheckFailed("falta actualizar el parent de nodo 6980")
    _ok("dato eliminado correctamente")


def erase_test3() -> None:
    """Erasing a node with two children replaces it with its successor."""
    tree = initialize_tree()
    _info("eliminando dato con clave 5239 (nodo con dos hijos)")
    tree.erase(5239)

    if _key(tree.root) != 6980:
        raise CheckFailed("el dato no se elimino correctamente root!=6980")

    if _key(tree.root.right) != 8213:
        raise CheckFailed("el dato no se elimino correctamente root->right!=8213")
    _ok("dato eliminado correctamente")


def first_test1(tree: TreeMap) -> None:
    """``first`` returns the smallest key of the fixed tree."""
    pair = tree.first()
    if pair is None:
        raise CheckFailed("first retorna NULL")
    if pair.value.id != 1273:
        raise CheckFailed("first no retorna nodo 1273")
    _ok("first retorna nodo 1273")


def first_test2() -> None:
    """``first`` descends more than one level to the smallest key."""
    tree = initialize_tree()
    _info("agregando nodo con clave 100")
    tree.root.left.left = _node(Palabra(100, "first_word"), tree.root.left)

    if _value_id(tree.first()) != 100:
        raise CheckFailed("first no retorna nodo 100")
    _ok("first retorna nodo 100")


def next_test1() -> None:
    """``next`` from a node with a right child goes into that subtree."""
    tree = initialize_tree()
    _info("agregando nodo con clave 2000")
    tree.root.left.right = _node(Palabra(2000, "next_word"), tree.root.left)

    _info("actualizando current -> nodo 1273")
    tree.current = tree.root.left
    pair = tree.next()

    if pair is None:
        raise CheckFailed("next retorna NULL")
    if pair.value.id != 2000:
        raise CheckFailed("next no retorna nodo 2000")
    _ok("next retorna nodo 2000")


def next_test2() -> None:
    """``next`` walks from the root to the end and then gives None."""
    tree = initialize_tree()
    _info("actualizando current -> root")
    tree.current = tree.root

    if _value_id(tree.next()) != 6980:
        raise CheckFailed("next no retorna nodo 6980")
    _ok("next retorna nodo 6980")

    if _value_id(tree.next()) != 8213:
        raise CheckFailed("next no retorna nodo 8213")
    _ok("next retorna nodo 8213")

    if tree.next() is not None:
        raise CheckFailed("next != NULL")
    _ok("next retorna NULL")


def next_test3() -> None:
    """``next`` from a node without a right child climbs to an ancestor."""
    tree = initialize_tree()
    _info("agregando nodo con clave 2000")
    tree.root.left.right = _node(Palabra(2000, "next_word"), tree.root.left)
    _info("actualizando current -> nodo 2000")
    tree.current = tree.root.left.right

    if _value_id(tree.next()) != 5239:
        raise CheckFailed("next no retorna nodo 5239\n")
    _ok("next retorna nodo 5239")


def _check_upper_bound(tree: TreeMap, key: int, expected: int) -> None:
    pair = tree.upper_bound(key)
    if pair is None:
        raise CheckFailed(f"upperbound de {key} retorna NULL")
    if pair.value.id != expected:
        raise CheckFailed(f"upperbound de {key} retorna {pair.value.id}")
    _ok(f"upperbound de {key} retorna {pair.value.id}")


def ub_test1(tree: TreeMap) -> None:
    """The upper bound of a present key is that key."""
    _check_upper_bound(tree, 6980, 6980)


def ub_test2(tree: TreeMap) -> None:
    """The upper bound just below a key is that key."""
    _check_upper_bound(tree, 6979, 6980)


def ub_test3(tree: TreeMap) -> None:
    """The upper bound just above a key is the next key."""
    _check_upper_bound(tree, 6981, 8213)


def ub_test4(tree: TreeMap) -> None:
    """A key above every stored key has no upper bound."""
    key = 8214
    if tree.upper_bound(key) is not None:
        raise CheckFailed(f"upperbound de {key} retorna NULL")
    _ok("upperbound de 8214 retona NULL")


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _section(
    title: str, maximum: int, build: Callable[[], list[Stage]], test_id: int
) -> int:
    print(f"\nTest {title}...")
    score = 0
    try:
        for checks, points, stage_id in build():
            for check in checks:
                check()
            score += points
            if test_id == stage_id:
                raise _Success
    except CheckFailed as exc:
        _err(str(exc))
    print(f"   partial_score: {score}/{maximum}")
    return score


def _create_stages() -> list[Stage]:
    initialize_tree()
    return [([create_test1], 5, 0)]


def _search_stages() -> list[Stage]:
    tree = initialize_tree()
    checks = [partial(f, tree) for f in (search_test1, search_test2, search_test3, search_test4)]
    return [(checks, 10, 1)]


def _insert_stages() -> list[Stage]:
    tree = initialize_tree()
    return [([partial(insert_test1, tree), insert_test2], 10, 2)]


def _erase_stages() -> list[Stage]:
    return [([erase_test1], 5, 3), ([erase_test2], 5, 4), ([erase_test3], 5, 5)]


def _first_stages() -> list[Stage]:
    tree = initialize_tree()
    return [([partial(first_test1, tree), first_test2], 5, 6)]


def _next_stages() -> list[Stage]:
    return [([next_test1], 5, 7), ([next_test2], 5, 8), ([next_test3], 5, 9)]


def _upper_bound_stages() -> list[Stage]:
    tree = initialize_tree()
    first_checks = [partial(f, tree) for f in (ub_test1, ub_test2, ub_test3)]
    return [(first_checks, 5, 10), ([partial(ub_test4, tree)], 5, 11)]


def _run(test_id: int) -> int:
    def selected(low: int, high: int) -> bool:
        return test_id == -1 or low <= test_id <= high

    total = 0
    if selected(0, 0):
        total += _section("createTreeMap", 5, _create_stages, test_id)
    if selected(1, 1):
        total += _section("searchTreeMap", 10, _search_stages, test_id)
    if selected(2, 2):
        total += _section("insertTreeMap", 10, _insert_stages, test_id)

    print("\nTest minimum...")
    try:
        minimum_test()
    except CheckFailed as exc:
        _err(str(exc))

    if selected(3, 5):
        total += _section("removeNode", 15, _erase_stages, test_id)
    if selected(6, 6):
        total += _section("firstTreeMap", 5, _first_stages, test_id)
    if selected(7, 9):
        total += _section("nextTreeMap", 15, _next_stages, test_id)
    if selected(10, 11):
        total += _section("upperBound", 10, _upper_bound_stages, test_id)
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run all checks, or only up to the one numbered by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_id = _atoi(args[0]) if args else -1
    try:
        total = _run(test_id)
    except _Success:
        print("SUCCESS")
        return 0
    if not args:
        print(f"\ntotal_score: {total}/70")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())