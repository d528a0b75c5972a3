# bucket_lab/algorithms/depth_limited.py
# Depth-Limited Search (DLS) over self-expanding nodes, driven by an explicit LIFO stack.
from __future__ import annotations
import logging
import os
from typing import Dict, Hashable, List, Optional

from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import Node
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)

DEPTH_LIMIT = int(os.getenv("BUCKET_DEPTH_LIMIT", "6"))


class DepthLimitedSolver:
    """
    Single depth-first pass that never expands a node at or past ``depth_limit``.

    With ``prune_revisits`` a child is dropped when its state key (see
    ``_key``) was already pushed at the same or a shallower depth. Without it
    the search is a plain tree search and may revisit configurations.
    """

    def __init__(self, initial_state: Node, depth_limit: int = DEPTH_LIMIT, prune_revisits: bool = False):
        self.initial_state = initial_state
        self.depth_limit = depth_limit
        self.prune_revisits = prune_revisits
        self.explored: List[Node] = []
        self.cutoff = False

    @property
    def nodes_expanded(self) -> int:
        return len(self.explored)

    @staticmethod
    def _key(node: Node) -> Hashable:
        levels = getattr(node, "fill_levels", None)
        return levels() if levels is not None else node.state

    def solve(self) -> Optional[Node]:
        """First goal node found, or None when nothing is reachable within the limit."""
        self.explored = []
        self.cutoff = False
        frontier = LIFOStack(self.initial_state)
        reached: Dict[Hashable, int] = {self._key(self.initial_state): 0}

        while len(frontier):
            node = frontier.pop()
            logger.debug("pop depth=%d %r", node.depth, node)
            if node.is_goal():
                logger.info("goal found at depth %d after %d expansions", node.depth, len(self.explored))
                return node
            if node.depth >= self.depth_limit:
                self.cutoff = True
            children = node.expand(self.depth_limit)
            if self.prune_revisits:
                kept = []
                for child in children:
                    k = self._key(child)
                    if k in reached and reached[k] <= child.depth:
                        continue
                    reached[k] = child.depth
                    kept.append(child)
                children = kept
            frontier.extend(children)
            self.explored.append(node)

        logger.info("no goal within depth %d (%d expansions)", self.depth_limit, len(self.explored))
        return None


def depth_limited_search(initial_state: Node, limit: int = DEPTH_LIMIT, prune_revisits: bool = False) -> SearchResult:
    name = f"DLS(l={limit}{', pruned' if prune_revisits else ''})"
    solver = DepthLimitedSolver(initial_state, limit, prune_revisits=prune_revisits)

    with MeasuredRun() as meter:
        goal = solver.solve()
        if goal is not None:
            a, c = reconstruct_path(goal)
            return SearchResult(name, True, a, c, solver.nodes_expanded, *meter.sample(), goal=goal)
        return SearchResult(name, False, [], float("inf"), solver.nodes_expanded, *meter.sample())
