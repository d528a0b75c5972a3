from __future__ import annotations

from bucket_lab.core.frontiers import LIFOStack
from bucket_lab.core.metrics import MeasuredRun


def test_stack_pops_last_pushed_first():
    frontier = LIFOStack("root")
    frontier.extend(["a", "b"])
    assert len(frontier) == 3
    assert [frontier.pop() for _ in range(3)] == ["b", "a", "root"]
    assert len(frontier) == 0


def test_measured_run_samples_inside_block():
    with MeasuredRun() as meter:
        data = [list(range(1000)) for _ in range(50)]
        elapsed, peak_kb = meter.sample()
    assert elapsed >= 0.0
    assert peak_kb > 0
    assert data
