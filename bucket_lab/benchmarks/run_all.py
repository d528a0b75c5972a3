# bucket_lab/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path

from ..algorithms.depth_limited import depth_limited_search
from ..algorithms.ids import iterative_deepening_search
from ..problems.buckets import bucket_puzzle

# ---- Tunables (overridable via environment variables) -----------------------
DLS_LIMIT = int(os.getenv("DLS_LIMIT", "8"))
IDS_MAX   = int(os.getenv("IDS_MAX_DEPTH", "12"))
TARGET    = int(os.getenv("BUCKET_TARGET", "4"))
PLOT      = os.getenv("BENCH_PLOT", "1") != "0"

def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"

def _load_algos():
    return [
        ("DLS", lambda p: depth_limited_search(p, limit=DLS_LIMIT)),
        ("DLS+prune", lambda p: depth_limited_search(p, limit=DLS_LIMIT, prune_revisits=True)),
        ("IDS", lambda p: iterative_deepening_search(p, max_depth=IDS_MAX)),
        ("IDS+prune", lambda p: iterative_deepening_search(p, max_depth=IDS_MAX, prune_revisits=True)),
    ]

def run(problem, algos=None):
    results = []
    for name, fn in algos or _load_algos():
        print(f"→ Running {name} ...")
        r = fn(problem)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"moves={r.cost if r.success else 'n/a'} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        results.append(r)
    return results

def main(out_dir: Path | None = None):
    out_dir = out_dir or Path(__file__).parent
    problem = bucket_puzzle(((3, 0), (5, 5)), target=TARGET)
    results = run(problem)

    out = {"results": [r.as_row() for r in results], "ts": time.time()}
    print(json.dumps(out, indent=2))
    (out_dir / "results.json").write_text(json.dumps(out, indent=2))

    if PLOT:
        import matplotlib
        matplotlib.use("Agg")  # file output only
        from ..plots.plotting import bar_compare
        fig = bar_compare(results)
        fig.savefig(out_dir / "comparison.png", dpi=160)
        print(f"Wrote {out_dir / 'comparison.png'}")
    return results

if __name__ == "__main__":
    main()
