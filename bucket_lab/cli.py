# bucket_lab/cli.py
# Command-line entry point: build a puzzle from flags, solve it, print the move sequence.
from __future__ import annotations
import argparse
import logging
import os
from typing import List, Optional, Tuple

from .algorithms.depth_limited import DEPTH_LIMIT, depth_limited_search
from .algorithms.ids import iterative_deepening_search
from .problems.buckets import BucketError, BucketPuzzle, Container, Rules

TARGET = int(os.getenv("BUCKET_TARGET", "4"))
DEFAULT_BUCKETS = ["0:3:0", "1:5:5"]


def parse_bucket(text: str) -> Tuple[int, int, int]:
    """'ID:CAPACITY:FILL' -> (id, capacity, fill). FILL may be omitted (empty bucket)."""
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"expected ID:CAPACITY[:FILL], got {text!r}")
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"bucket fields must be integers, got {text!r}") from None
    if len(values) == 2:
        values.append(0)
    return values[0], values[1], values[2]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bucket-lab", description="Depth-limited search for the water-jug puzzle.")
    ap.add_argument("--bucket", action="append", type=parse_bucket, metavar="ID:CAPACITY:FILL",
                    help=f"add a bucket (repeatable, default {' '.join(DEFAULT_BUCKETS)})")
    ap.add_argument("--target", type=int, default=TARGET, help="volume some bucket must hold")
    ap.add_argument("--depth-limit", type=int, default=DEPTH_LIMIT, help="maximum number of moves")
    ap.add_argument("--no-fill", action="store_true", help="forbid filling a bucket from the tap")
    ap.add_argument("--no-empty", action="store_true", help="forbid emptying a bucket onto the ground")
    ap.add_argument("--iterative", action="store_true",
                    help="retry with limits 0..depth-limit (shortest solution) instead of a single pass")
    ap.add_argument("--prune-revisits", action="store_true",
                    help="skip fill-level vectors already reached at the same or a shallower depth")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    specs = args.bucket or [parse_bucket(s) for s in DEFAULT_BUCKETS]
    ids = [i for i, _, _ in specs]
    if len(set(ids)) != len(ids):
        ap.error(f"bucket ids must be distinct, got {ids}")
    if args.depth_limit < 0:
        ap.error("--depth-limit must be >= 0")
    try:
        containers = [Container(i, cap, fill) for i, cap, fill in specs]
    except BucketError as e:
        ap.error(str(e))

    rules = Rules(can_fill=not args.no_fill, can_empty=not args.no_empty)
    puzzle = BucketPuzzle.initial(containers, rules, args.target)
    print(puzzle)
    print()

    if args.iterative:
        r = iterative_deepening_search(puzzle, max_depth=args.depth_limit, prune_revisits=args.prune_revisits)
    else:
        r = depth_limited_search(puzzle, limit=args.depth_limit, prune_revisits=args.prune_revisits)

    if not r.success:
        print(f"No solution within depth limit {args.depth_limit}.")
        print(f"({r.nodes_expanded} states expanded)")
        return 1

    print(f"{r.algo}: solved in {r.cost} moves ({r.nodes_expanded} states expanded)")
    for step, node in enumerate(r.goal.path()[1:], start=1):
        levels = ", ".join(str(b) for b in node.containers)
        print(f"  {step}. {node.move}  ->  {levels}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
