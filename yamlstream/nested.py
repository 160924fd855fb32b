"""Generation of a deeply nested YAML mapping."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

_ID_DIGITS = "_abcdefghijklmnopqrstuvwxyz"


@dataclass
class _Node:
    children: list[_Node] = field(default_factory=list)


def id_for_number(n: int) -> str:
    """Return a valid mapping key identifying the ``n``-th child."""
    n += 1
    digits = []
    while n > 0:
        digits.append(_ID_DIGITS[n % len(_ID_DIGITS)])
        n //= len(_ID_DIGITS)
    return "".join(digits)


class Tree:
    """A random n-ary tree in which new nodes favour recently added parents."""

    def __init__(self, seed: int = 42) -> None:
        self._root = _Node()
        self._nodes = [self._root]
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return len(self._nodes)

    def push_node(self) -> None:
        """Add a node as the child of a random node among the newest quarter."""
        node = _Node()
        n_nodes = len(self._nodes)
        parent = self._nodes[self._rng.randrange(3 * n_nodes // 4, n_nodes)]
        parent.children.append(node)
        self._nodes.append(node)

    def _lines(self) -> Iterator[str]:
        if not self._root.children:
            yield "a: 1\n"
            return
        stack = [(0, iter(enumerate(self._root.children)))]
        while stack:
            indent, children = stack[-1]
            entry = next(children, None)
            if entry is None:
                stack.pop()
                continue
            index, child = entry
            yield f"{' ' * indent}{id_for_number(index)}:\n"
            if child.children:
                stack.append((indent + 2, iter(enumerate(child.children))))
            else:
                yield f"{' ' * (indent + 2)}a: 1\n"

    def write_to(self, writer: TextIO) -> None:
        """Write the tree as a YAML mapping; leaves become ``a: 1``."""
        for line in self._lines():
            writer.write(line)


def create_deep_object(writer: TextIO, n_nodes: int) -> None:
    """Write a nested YAML mapping built from ``n_nodes`` random tree nodes."""
    tree = Tree()
    for _ in range(n_nodes):
        tree.push_node()
    tree.write_to(writer)