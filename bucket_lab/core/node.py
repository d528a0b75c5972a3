# bucket_lab/core/node.py
# Search-tree node: a state plus the parent link, action and depth that produced it.
from __future__ import annotations
from typing import Any, Iterator, List, Optional


class Node:
    """Base class for states that know their own successors.

    Subclasses implement ``is_goal`` and ``successors``; ``expand`` adds the
    depth bound on top. Nodes are never mutated after construction, so a parent
    can be shared by any number of children.
    """

    def __init__(self, state, parent: Optional["Node"] = None, action: Any = None, depth: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.depth = depth

    def is_goal(self) -> bool:
        raise NotImplementedError

    def successors(self) -> Iterator["Node"]:
        raise NotImplementedError

    def expand(self, limit: int) -> List["Node"]:
        """Children of this node, or nothing once ``depth >= limit``."""
        if self.depth >= limit:
            return []
        return list(self.successors())

    def path(self) -> List["Node"]:
        """Nodes from the root down to (and including) this one."""
        nodes = []
        cur = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes
