# bucket_lab/core/utils.py
# Walks parent links from a goal node back to the root to recover the move sequence.
from __future__ import annotations
from typing import List, Tuple
from .node import Node

def reconstruct_path(node: Node) -> Tuple[List[str], int]:
    actions = []
    cur = node
    while cur.parent is not None:
        actions.append(str(cur.action))
        cur = cur.parent
    actions.reverse()
    return actions, node.depth
