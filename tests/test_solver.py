from __future__ import annotations

from bucket_lab.algorithms.depth_limited import DepthLimitedSolver, depth_limited_search
from bucket_lab.algorithms.ids import iterative_deepening_search
from bucket_lab.problems.buckets import BucketPuzzle, Container, Rules, bucket_puzzle


def _classic(target=4):
    return BucketPuzzle.initial([Container.empty(0, 3), Container.full(1, 5)], Rules(), target)


def test_finds_four_with_three_and_five():
    goal = DepthLimitedSolver(_classic(), 6).solve()
    assert goal is not None
    assert goal.is_goal()
    assert goal.depth <= 6
    assert len(goal.moves()) == goal.depth


def test_shortest_solution_needs_five_moves():
    assert DepthLimitedSolver(_classic(), 4).solve() is None
    assert DepthLimitedSolver(_classic(), 5).solve() is not None


def test_depth_limit_zero_only_checks_the_root():
    root = BucketPuzzle.initial([Container.empty(0, 3), Container.empty(1, 5)], Rules(), 4)
    solver = DepthLimitedSolver(root, 0)
    assert solver.solve() is None
    assert solver.explored == [root]


def test_root_goal_is_returned_immediately():
    root = bucket_puzzle(((3, 0), (5, 4)))
    solver = DepthLimitedSolver(root, 3)
    assert solver.solve() is root
    assert solver.nodes_expanded == 0


def test_unreachable_target():
    root = BucketPuzzle.initial([Container.empty(0, 2)], Rules(), 5)
    for limit in (0, 1, 5, 20):
        assert DepthLimitedSolver(root, limit).solve() is None


def test_goal_path_replays_from_root():
    goal = DepthLimitedSolver(_classic(), 6).solve()
    path = goal.path()
    assert path[0].parent is None
    for parent, child in zip(path, path[1:]):
        assert child.parent is parent
        assert child.depth == parent.depth + 1


def test_pruning_expands_fewer_nodes_and_still_solves():
    plain = DepthLimitedSolver(_classic(), 8)
    pruned = DepthLimitedSolver(_classic(), 8, prune_revisits=True)
    assert plain.solve() is not None
    assert pruned.solve() is not None
    assert pruned.nodes_expanded < plain.nodes_expanded


def test_pruning_keeps_bounded_search_complete():
    assert DepthLimitedSolver(_classic(), 5, prune_revisits=True).solve() is not None
    assert DepthLimitedSolver(_classic(), 4, prune_revisits=True).solve() is None


def test_depth_limited_search_result():
    r = depth_limited_search(_classic(), limit=6)
    assert r.success
    assert r.cost == len(r.actions)
    assert r.goal.is_goal()
    assert r.nodes_expanded > 0

    r = depth_limited_search(_classic(), limit=2)
    assert not r.success
    assert r.actions == []
    assert r.goal is None
    assert r.as_row()["cost"] is None


def test_iterative_deepening_returns_shortest():
    r = iterative_deepening_search(_classic(), max_depth=10)
    assert r.success
    assert r.cost == 5
    assert r.actions[-1] == "Poured 1 from bucket 1 into bucket 0"


def test_iterative_deepening_gives_up_at_max_depth():
    r = iterative_deepening_search(_classic(), max_depth=4)
    assert not r.success


def test_iterative_deepening_stops_when_tree_is_exhausted():
    root = BucketPuzzle.initial([Container.empty(0, 2)], Rules(can_fill=False, can_empty=False), 5)
    r = iterative_deepening_search(root, max_depth=50)
    assert not r.success
    # limit 0 hits the bound at the root, limit 1 finds no moves at all
    assert r.nodes_expanded == 2
