# bucket_lab/core/frontiers.py
from __future__ import annotations


class LIFOStack:
    """Depth-first frontier. Children pushed together come back out last-first."""
    def __init__(self, root):
        self.q = [root]
    def extend(self, nodes): self.q.extend(nodes)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
