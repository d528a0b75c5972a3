# bucket_lab/problems/buckets.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.node import Node
from ..core.utils import reconstruct_path


# --- Errors ------------------------------------------------------------------

class BucketError(ValueError):
    """Base class for invalid bucket construction or moves."""


class InvalidCapacity(BucketError):
    pass


class OverCapacity(BucketError):
    pass


# --- Containers --------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Container:
    """
    One bucket: a fixed capacity and the amount of water currently in it.

    Containers compare (and hash) by identity only, so two values describing the
    same physical bucket at different fill levels are equal. Every operation
    returns a new Container; nothing is changed in place.
    """
    identity: int
    capacity: int
    fill: int = 0

    def __post_init__(self):
        if self.capacity <= 0:
            raise InvalidCapacity(f"Bucket {self.identity} can not have capacity {self.capacity}.")
        if self.fill < 0 or self.fill > self.capacity:
            raise OverCapacity(
                f"Bucket {self.identity} with capacity {self.capacity} can not hold {self.fill}."
            )

    @classmethod
    def empty(cls, identity: int, capacity: int) -> "Container":
        return cls(identity, capacity, 0)

    @classmethod
    def full(cls, identity: int, capacity: int) -> "Container":
        return cls(identity, capacity, capacity)

    def is_empty(self) -> bool:
        return self.fill == 0

    def is_full(self) -> bool:
        return self.fill == self.capacity

    def remaining_capacity(self) -> int:
        return self.capacity - self.fill

    def emptied(self) -> "Container":
        return Container(self.identity, self.capacity, 0)

    def filled(self) -> "Container":
        return Container(self.identity, self.capacity, self.capacity)

    def poured_out(self, amount: int) -> "Container":
        if amount < 0:
            raise OverCapacity(f"Can not pour a negative amount ({amount}) out of bucket {self.identity}.")
        return Container(self.identity, self.capacity, self.fill - amount)

    def poured_in(self, amount: int) -> "Container":
        if amount < 0:
            raise OverCapacity(f"Can not pour a negative amount ({amount}) into bucket {self.identity}.")
        return Container(self.identity, self.capacity, self.fill + amount)

    def __eq__(self, other):
        if not isinstance(other, Container):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self):
        return hash(self.identity)

    def __str__(self):
        return f"bucket {self.identity}: {self.fill}/{self.capacity}"


# --- Rules and moves ---------------------------------------------------------

@dataclass(frozen=True)
class Rules:
    """Which single-bucket moves are allowed. Pouring is always allowed."""
    can_fill: bool = True
    can_empty: bool = True


EMPTY, FILL, POUR = "empty", "fill", "pour"


@dataclass(frozen=True)
class Move:
    kind: str
    source: int
    target: Optional[int] = None
    amount: int = 0

    def __post_init__(self):
        if self.kind not in (EMPTY, FILL, POUR):
            raise ValueError(f"Unknown move kind {self.kind!r}.")
        if self.kind == POUR and self.target is None:
            raise ValueError("A pour needs a target bucket.")

    def __str__(self):
        if self.kind == EMPTY:
            return f"Emptied bucket {self.source}"
        if self.kind == FILL:
            return f"Filled bucket {self.source}"
        if self.kind == POUR:
            return f"Poured {self.amount} from bucket {self.source} into bucket {self.target}"


# --- Puzzle state ------------------------------------------------------------

class BucketPuzzle(Node):
    """
    A snapshot of every bucket, plus the rules and target shared by the whole run.

    - State: tuple of Containers, always in the same order and with the same
      identities as the root
    - is_goal(): some bucket holds exactly ``target`` units
    - successors(): empty, fill and pour moves in bucket order
    - parent/action/depth come from Node; action is a Move
    """

    def __init__(self, containers: Iterable[Container], rules: Rules, target: int,
                 parent: Optional["BucketPuzzle"] = None, action: Optional[Move] = None):
        super().__init__(
            state=tuple(containers),
            parent=parent,
            action=action,
            depth=0 if parent is None else parent.depth + 1,
        )
        self.rules = rules
        self.target = target

    @classmethod
    def initial(cls, containers: Iterable[Container], rules: Rules, target: int) -> "BucketPuzzle":
        """Root state. Containers must have distinct identities (not checked)."""
        return cls(containers, rules, target)

    @property
    def containers(self) -> Tuple[Container, ...]:
        return self.state

    @property
    def move(self) -> Optional[Move]:
        return self.action

    def is_goal(self) -> bool:
        return any(b.fill == self.target for b in self.containers)

    def fill_levels(self) -> Tuple[int, ...]:
        return tuple(b.fill for b in self.containers)

    def moves(self) -> List[str]:
        actions, _ = reconstruct_path(self)
        return actions

    def _child(self, replaced, move: Move) -> "BucketPuzzle":
        # replaced: {slot index: new Container}
        containers = tuple(replaced.get(i, b) for i, b in enumerate(self.containers))
        return BucketPuzzle(containers, self.rules, self.target, parent=self, action=move)

    def successors(self) -> Iterator["BucketPuzzle"]:
        buckets = self.containers
        for i, b in enumerate(buckets):
            if self.rules.can_empty and not b.is_empty():
                yield self._child({i: b.emptied()}, Move(EMPTY, b.identity))
            if self.rules.can_fill and not b.is_full():
                yield self._child({i: b.filled()}, Move(FILL, b.identity))
            if b.is_empty():
                continue
            for j, c in enumerate(buckets):
                if j == i or c.is_full():
                    continue
                # both conditions above make amount >= 1
                amount = min(b.fill, c.remaining_capacity())
                yield self._child(
                    {i: b.poured_out(amount), j: c.poured_in(amount)},
                    Move(POUR, b.identity, c.identity, amount),
                )

    def __str__(self):
        lines = [
            f"Rules: can_fill={self.rules.can_fill}, can_empty={self.rules.can_empty}",
            f"Target Volume: {self.target}",
            f"Depth: {self.depth}",
        ]
        if self.action is not None:
            lines.append(f"Move: {self.action}")
        lines.extend(f"  {b}" for b in self.containers)
        return "\n".join(lines)

    def __repr__(self):
        return f"BucketPuzzle(fills={self.fill_levels()}, target={self.target}, depth={self.depth})"


def bucket_puzzle(buckets: Iterable[Tuple[int, int]] = ((3, 0), (5, 5)), target: int = 4,
                  can_fill: bool = True, can_empty: bool = True) -> BucketPuzzle:
    """
    Factory for a ready-to-use root state from (capacity, fill) pairs.
    Identities are assigned by position.
    """
    containers = [Container(i, cap, fill) for i, (cap, fill) in enumerate(buckets)]
    return BucketPuzzle.initial(containers, Rules(can_fill=can_fill, can_empty=can_empty), target)
