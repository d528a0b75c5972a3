# bucket_lab/plots/plotting.py
# Side-by-side bar charts of search runs: nodes expanded, moves in the solution, wall time.
from __future__ import annotations
import matplotlib.pyplot as plt

def bar_compare(results, title="Bucket Puzzle Search Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_expanded for r in results]
    moves = [r.cost if r.success else 0 for r in results]
    times = [r.time_s or 0 for r in results]

    fig, axs = plt.subplots(1, 3, figsize=(13, 4))
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=30)
    axs[1].bar(names, moves); axs[1].set_title("Moves (0 = no solution)"); axs[1].tick_params(axis='x', rotation=30)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=30)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.92])
    return fig
