# statesearch/core/node.py
# Search nodes live in a per-call arena (SearchTree); a node's parent is an index into that arena.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class Node(Generic[S]):
    """
    Immutable record linking a state to how it was discovered.

    - state: the search state
    - parent: index of the parent node in the owning SearchTree (None for the root)
    - cost: cumulative path cost from the root (0 for DFS/BFS)
    - heuristic: estimated remaining cost (0 for DFS/BFS)
    - index: this node's own slot in the tree
    """
    state: S
    parent: Optional[int] = None
    cost: float = 0.0
    heuristic: float = 0.0
    index: int = 0
    tree: Optional["SearchTree[S]"] = field(default=None, compare=False, repr=False)

    @property
    def f(self) -> float:
        return self.cost + self.heuristic

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def parent_node(self) -> Optional["Node[S]"]:
        if self.parent is None:
            return None
        if self.tree is None:
            raise ValueError(f"node {self.index} has a parent index but no owning tree")
        return self.tree[self.parent]


class SearchTree(Generic[S]):
    """Growable arena owning every node created during one search call."""

    def __init__(self) -> None:
        self.nodes: List[Node[S]] = []
        self.expanded = 0

    def add(self, state: S, parent: Optional[Node[S]] = None,
            cost: float = 0.0, heuristic: float = 0.0) -> Node[S]:
        if cost < 0:
            raise ValueError(f"node cost must be non-negative, got {cost!r}")
        node = Node(
            state=state,
            parent=None if parent is None else parent.index,
            cost=float(cost),
            heuristic=float(heuristic),
            index=len(self.nodes),
            tree=self,
        )
        self.nodes.append(node)
        return node

    def parent_of(self, node: Node[S]) -> Optional[Node[S]]:
        return None if node.parent is None else self.nodes[node.parent]

    def __getitem__(self, index: int) -> Node[S]:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node[S]]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"SearchTree(generated={len(self.nodes)}, expanded={self.expanded})"
