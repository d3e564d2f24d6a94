"""Containment walks over a built code model.

Nodes carry no parent pointers; parents are recovered by walking down
from the root. Type references are shared values, not tree members, and
are skipped.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Iterator

from .ir import TypeRef


def _is_node(obj: object) -> bool:
    return is_dataclass(obj) and not isinstance(obj, (type, TypeRef))


def children(node: object) -> list[object]:
    """Direct child nodes of node, in field order then list order."""
    result: list[object] = []
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, list):
            result.extend(v for v in value if _is_node(v))
        elif _is_node(value):
            result.append(value)
    return result


def walk(root: object) -> Iterator[object]:
    """Yield root and every node below it, depth-first pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))


def parent_map(root: object) -> dict[int, object]:
    """Map id(node) -> parent for every node below root.

    Raises ValueError if a node is reachable through two parents.
    """
    parents: dict[int, object] = {}
    for node in walk(root):
        for child in children(node):
            if id(child) in parents or child is root:
                raise ValueError(
                    f"{type(child).__name__} has more than one parent"
                )
            parents[id(child)] = node
    return parents


def depth(node: object, parents: dict[int, object]) -> int:
    """Number of parent links from node up to the root."""
    d = 0
    while id(node) in parents:
        node = parents[id(node)]
        d += 1
    return d
