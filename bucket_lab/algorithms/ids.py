# bucket_lab/algorithms/ids.py
from __future__ import annotations
import logging
import os

from ..core.node import Node
from ..core.utils import reconstruct_path
from ..core.metrics import SearchResult, MeasuredRun
from .depth_limited import DepthLimitedSolver

logger = logging.getLogger(__name__)

MAX_DEPTH = int(os.getenv("IDS_MAX_DEPTH", "12"))


def iterative_deepening_search(initial_state: Node, max_depth: int = MAX_DEPTH, prune_revisits: bool = False) -> SearchResult:
    """
    Iterative Deepening Search. Repeats a depth-limited DFS with limits 0..max_depth,
    so the first goal returned is one with the fewest moves.
    Expansion count is summed over all passes.
    """
    name = "IDS"
    expanded_total = 0

    with MeasuredRun() as meter:
        for limit in range(max_depth + 1):
            solver = DepthLimitedSolver(initial_state, limit, prune_revisits=prune_revisits)
            goal = solver.solve()
            expanded_total += solver.nodes_expanded

            if goal is not None:
                actions, cost = reconstruct_path(goal)
                return SearchResult(name, True, actions, cost, expanded_total, *meter.sample(), goal=goal)

            if not solver.cutoff:
                logger.info("IDS: tree exhausted at limit %d", limit)
                break  # fully explored up to `limit`; nothing deeper

        return SearchResult(name, False, [], float("inf"), expanded_total, *meter.sample())
