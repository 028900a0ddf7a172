"""Bulk time-skipping for stable Round-Robin rounds.

Once every ready process has been dispatched at least once and no arrival
can land inside the skipped span, whole RR rounds are fully determined:
each member runs one quantum per round, in queue order, and none of them
finishes. ``plan_fast_forward`` decides how many such rounds can be
collapsed; the simulator applies the plan.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Tuple


class ReadySlot(NamedTuple):
    pid: int
    remaining: int
    started: bool


@dataclass(frozen=True)
class FastForwardPlan:
    rounds: int
    affected: Tuple[int, ...]
    quantum: int

    @property
    def per_process(self) -> int:
        """CPU time each affected process receives."""
        return self.rounds * self.quantum

    @property
    def duration(self) -> int:
        return self.rounds * self.quantum * len(self.affected)


def plan_fast_forward(
    ready: Sequence[ReadySlot],
    next_arrival: Optional[int],
    quantum: int,
    now: int,
    sequence_full: bool,
) -> Optional[FastForwardPlan]:
    """Return the rounds that can be skipped, or None to run a normal quantum.

    A lone ready process can always be advanced: its upcoming dispatches
    are all itself. Several processes are only advanced once the sequence
    is saturated, since the skipped dispatches would otherwise be recorded,
    and only when more than one round is saved.
    """
    size = len(ready)
    if size == 0:
        return None
    span = size * quantum
    if next_arrival is not None and next_arrival - now <= span:
        return None
    if size > 1 and not sequence_full:
        return None
    if not all(slot.started for slot in ready):
        return None

    least = min(slot.remaining for slot in ready)
    rounds = least // span
    if next_arrival is not None:
        rounds = min(rounds, (next_arrival - now) // span)

    if size == 1:
        if rounds < 1:
            return None
    elif rounds <= 1:
        return None
    return FastForwardPlan(rounds, tuple(slot.pid for slot in ready), quantum)
