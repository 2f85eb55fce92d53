# statesearch/core/utils.py
# Path reconstruction over the node arena, and containment helpers shared by the problems.
from __future__ import annotations
from bisect import bisect_left
from typing import Any, List, Sequence, TypeVar

from .node import Node

S = TypeVar("S")


def node_to_path(node: Node[S]) -> List[S]:
    """States from the root down to `node`, root first."""
    path: List[S] = []
    cur = node
    while cur is not None:
        path.append(cur.state)
        cur = cur.parent_node()
    path.reverse()
    return path


def linear_contains(iterable: Sequence[Any], key: Any) -> bool:
    for item in iterable:
        if item == key:
            return True
    return False


def binary_contains(sequence: Sequence[Any], key: Any) -> bool:
    """`sequence` must already be sorted ascending."""
    i = bisect_left(sequence, key)
    return i < len(sequence) and sequence[i] == key
